"""Scene state shared by the parser and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from raycub.mapfile import GameMap

TEX_WIDTH = 64
TEX_HEIGHT = 64
MOVE_SPEED = 0.03
STRAFE_SPEED = 0.05
ROT_SPEED = 0.03


@dataclass
class Camera:
    """Position, view direction and camera plane of the viewer."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class Scene:
    """Everything a scene file describes, plus the viewer's camera.

    ``textures`` holds five TEX_WIDTH x TEX_HEIGHT pixel lists in the order
    the wall caster indexes them, the last one being the sprite texture.
    Colours of -1 mean that no colour was given.
    """

    width: int = 0
    height: int = 0
    floor: int = -1
    ceiling: int = -1
    texture_paths: dict[str, str] = field(default_factory=dict)
    textures: list[list[int]] = field(default_factory=list)
    game_map: GameMap | None = None
    camera: Camera = field(default_factory=Camera)

    def clamp_to_screen(self, max_width: int, max_height: int) -> None:
        """Shrink a resolution larger than the screen to one pixel below it."""
        if self.width > max_width:
            self.width = max_width - 1
        if self.height > max_height:
            self.height = max_height - 1