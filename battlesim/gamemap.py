"""The rectangular battlefield grid."""

from typing import Any

EMPTY_TILE = "_"


class GameMap:
    """A width by height grid of tiles, initially all empty."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"map size must not be negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: list[Any] = [EMPTY_TILE] * (width * height)

    def set_tile(self, x: int, y: int, tile: Any) -> None:
        if not self.check_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        self._tiles[y * self.width + x] = tile

    def check_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, position: tuple[int, int]) -> Any:
        x, y = position
        if not self.check_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self._tiles[y * self.width + x]