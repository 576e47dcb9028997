"""Ray casting of walls, floor, ceiling and sprites into a pixel frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raycub.mapfile import GameMap
from raycub.scene import TEX_HEIGHT, TEX_WIDTH, Camera, Scene

SPRITE_TEXTURE = 4


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Frame:
    """A width x height grid of 0xRRGGBB colours stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("frame dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError("pixel count does not match frame dimensions")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        return self.pixels[self._index(x, y)]

    def set(self, x: int, y: int, color: int) -> None:
        """Store a colour at column x, row y."""
        self.pixels[self._index(x, y)] = color


@dataclass(frozen=True)
class RayHit:
    """Where the ray of one screen column met a wall and how to draw it."""

    map_x: int
    map_y: int
    side: int
    tex_num: int
    perp_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    tex_x: int
    ray_dir_x: float
    ray_dir_y: float


def _require_map(scene: Scene) -> GameMap:
    if scene.game_map is None:
        raise ValueError("scene has no map to render")
    return scene.game_map


def fill_floor_ceiling(scene: Scene, frame: Frame) -> None:
    """Paint the ceiling colour into the lower half and the floor colour
    into the mirrored rows of the upper half, from column 1 onwards."""
    for y in range(scene.height // 2 + 1, scene.height):
        for x in range(1, scene.width):
            frame.set(x, y, scene.ceiling)
            frame.set(x, scene.height - y - 1, scene.floor)


def _texture_number(side: int, ray_dir_x: float, ray_dir_y: float) -> int:
    if side == 0:
        return 3 if ray_dir_x < 0 else 2
    return 1 if ray_dir_y > 0 else 0


def cast_ray(scene: Scene, x: int) -> RayHit:
    """Follow the ray of screen column x through the grid until it hits a wall."""
    game_map = _require_map(scene)
    cam = scene.camera
    camera_x = 2 * x / float(scene.width) - 1
    ray_dir_x = cam.dir_x + cam.plane_x * camera_x
    ray_dir_y = cam.dir_y + cam.plane_y * camera_x
    map_x = int(cam.pos_x)
    map_y = int(cam.pos_y)
    delta_x = math.inf if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = math.inf if ray_dir_y == 0 else abs(1 / ray_dir_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (cam.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - cam.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (cam.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - cam.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if game_map.is_wall(map_x, map_y):
            break

    if side == 0:
        perp = (map_x - cam.pos_x + (1 - step_x) // 2) / ray_dir_x
    else:
        perp = (map_y - cam.pos_y + (1 - step_y) // 2) / ray_dir_y

    line_height = int(scene.height / perp) if perp != 0 else scene.height
    draw_start = max(-(line_height // 2) + scene.height // 2, 0)
    draw_end = line_height // 2 + scene.height // 2
    if draw_end >= scene.height:
        draw_end = scene.height - 1
    if side == 0:
        wall_x = cam.pos_y + perp * ray_dir_y
    else:
        wall_x = cam.pos_x + perp * ray_dir_x
    wall_x -= int(wall_x)

    return RayHit(
        map_x=map_x,
        map_y=map_y,
        side=side,
        tex_num=_texture_number(side, ray_dir_x, ray_dir_y),
        perp_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        tex_x=int(wall_x * float(TEX_WIDTH)),
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
    )


def cast_walls(scene: Scene, frame: Frame) -> list[float]:
    """Draw every wall column and return the per-column wall distances."""
    zbuffer: list[float] = []
    for x in range(scene.width):
        hit = cast_ray(scene, x)
        if hit.line_height > 0:
            step = TEX_HEIGHT / hit.line_height
            tex_pos = (hit.draw_start - scene.height // 2 + hit.line_height // 2) * step
            texture = scene.textures[hit.tex_num]
            for y in range(hit.draw_start, hit.draw_end):
                tex_y = int(tex_pos)
                tex_pos += step
                frame.set(x, y, texture[TEX_HEIGHT * tex_y + hit.tex_x])
        zbuffer.append(hit.perp_dist)
    return zbuffer


def sort_sprites(
    camera: Camera, sprites: list[tuple[float, float]]
) -> list[tuple[float, float]]:
    """Order sprite positions from farthest to nearest.

    Squared distances are compared after truncation to whole numbers; among
    equal distances later sprites come first.
    """
    distances = [
        int((camera.pos_x - sx) ** 2 + (camera.pos_y - sy) ** 2) for sx, sy in sprites
    ]
    order = sorted(range(len(sprites)), key=distances.__getitem__)
    return [sprites[i] for i in reversed(order)]


def draw_sprites(scene: Scene, frame: Frame, zbuffer: list[float]) -> None:
    """Project the map's sprites onto the frame behind-to-front, hidden by walls."""
    game_map = _require_map(scene)
    cam = scene.camera
    width, height = scene.width, scene.height
    texture = scene.textures[SPRITE_TEXTURE]

    for sprite_x, sprite_y in sort_sprites(cam, game_map.sprite_positions()):
        rel_x = sprite_x - cam.pos_x
        rel_y = sprite_y - cam.pos_y
        inv_det = 1.0 / (cam.plane_x * cam.dir_y - cam.dir_x * cam.plane_y)
        transform_x = inv_det * (cam.dir_y * rel_x - cam.dir_x * rel_y)
        transform_y = inv_det * (-cam.plane_y * rel_x + cam.plane_x * rel_y)
        if transform_y <= 0:
            continue

        screen_x = int((width // 2) * (1 + transform_x / transform_y))
        sprite_height = int(abs(height / transform_y))
        sprite_width = sprite_height
        start_y = max(-(sprite_height // 2) + height // 2, 0)
        end_y = min(sprite_height // 2 + height // 2, height - 1)
        left = -(sprite_width // 2) + screen_x
        start_x = max(left, 0)
        end_x = min(sprite_width // 2 + screen_x, width - 1)

        for stripe in range(start_x, end_x):
            if not (0 < stripe < width and transform_y < zbuffer[stripe]):
                continue
            tex_x = _cdiv(_cdiv(256 * (stripe - left) * TEX_WIDTH, sprite_width), 256)
            for y in range(start_y, end_y):
                d = y * 256 - height * 128 + sprite_height * 128
                tex_y = _cdiv(_cdiv(d * TEX_HEIGHT, sprite_height), 256)
                index = TEX_WIDTH * tex_y + tex_x
                if not 0 <= index < len(texture):
                    continue
                color = texture[index]
                if color & 0xFFFFFF:
                    frame.set(stripe, y, color)


def render(scene: Scene) -> Frame:
    """Render one complete frame of the scene."""
    _require_map(scene)
    frame = Frame(scene.width, scene.height)
    fill_floor_ceiling(scene, frame)
    zbuffer = cast_walls(scene, frame)
    draw_sprites(scene, frame, zbuffer)
    return frame