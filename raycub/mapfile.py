"""Parsing and validation of the grid part of a scene file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

PLAYER_MARKS = frozenset("NSEW")
MAX_MAP_SIZE = 254

_NEIGHBOURS = ((-1, 0), (0, 1), (1, 0), (0, -1), (-1, -1), (-1, 1), (1, 1), (1, -1))


class MapError(ValueError):
    """Raised when a map is malformed or not closed by walls."""


@dataclass(frozen=True)
class Player:
    """Starting position (cell centre) and facing of the player."""

    x: float
    y: float
    direction: str


@dataclass
class GameMap:
    """Integer grid of the level together with the player's start."""

    grid: list[list[int]]
    player: Player

    def is_wall(self, x: int, y: int) -> bool:
        """Tell whether cell (x, y) is a wall; cells outside the grid count as walls."""
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x] == 1
        return True

    def sprite_positions(self) -> list[tuple[float, float]]:
        """Return the (x, y) centres of all sprite cells in row-major order."""
        return [
            (x + 0.5, y + 0.5)
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value == 2
        ]


def find_player(rows: list[str]) -> tuple[Player, list[str]]:
    """Locate the single player mark and return it with the mark replaced by '0'."""
    player: Player | None = None
    cleaned: list[str] = []
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in PLAYER_MARKS:
                if player is not None:
                    raise MapError("map has more than one player start")
                player = Player(x + 0.5, y + 0.5, char)
        cleaned.append("".join("0" if c in PLAYER_MARKS else c for c in row))
    if player is None:
        raise MapError("map has no player start")
    return player, cleaned


def check_closed(rows: list[str]) -> None:
    """Raise MapError unless every area reachable from a '0' is enclosed by walls.

    Movement is checked in all eight directions; cells outside the rows and
    space characters count as open space.
    """
    if len(rows) > MAX_MAP_SIZE or any(len(row) > MAX_MAP_SIZE for row in rows):
        raise MapError(f"map is larger than {MAX_MAP_SIZE} cells in a direction")

    def cell(x: int, y: int) -> str:
        if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
            return rows[y][x]
        return " "

    visited: set[tuple[int, int]] = set()
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char != "0" or (x, y) in visited:
                continue
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                current = cell(cx, cy)
                if current == "1" or (cx, cy) in visited:
                    continue
                if current == " ":
                    raise MapError(f"map is open near column {cx}, row {cy}")
                visited.add((cx, cy))
                stack.extend((cx + dx, cy + dy) for dx, dy in _NEIGHBOURS)


def build_grid(rows: list[str]) -> list[list[int]]:
    """Turn map rows into integer cells; spaces become 0, digits their value."""
    return [[0 if c == " " else ord(c) - ord("0") for c in row] for row in rows]


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a GameMap from the lines that follow a scene header.

    Leading lines holding neither '0' nor '1' are skipped; every line from the
    first map row onwards belongs to the map.
    """
    rows: list[str] = []
    for line in lines:
        if not rows and "0" not in line and "1" not in line:
            continue
        rows.append(line)
    player, rows = find_player(rows)
    check_closed(rows)
    return GameMap(build_grid(rows), player)