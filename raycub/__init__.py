"""Grid-map raycaster: map parsing and validation, frame rendering and BMP encoding."""

__version__ = "0.1.0"