from typing import Dict


class Vec2d:
    """
    Integer 2D vector. Doubles as a displacement (parsed path step)
    and as an absolute grid coordinate (rasterized cell).
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __add__(self, other: 'Vec2d') -> 'Vec2d':
        return Vec2d(self.x + other.x, self.y + other.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Vec2d({self.x}, {self.y})"

    def manhattan_distance(self) -> int:
        return abs(self.x) + abs(self.y)

    def unit(self) -> 'Vec2d':
        # Sign per component. Paths are axis aligned so at most one is non-zero.
        return Vec2d((self.x > 0) - (self.x < 0), (self.y > 0) - (self.y < 0))

    def length(self) -> int:
        # Only meaningful for axis aligned displacements
        return abs(self.x) + abs(self.y)


ORIGIN = Vec2d(0, 0)

# Direction Helpers (y grows upwards)
DIRECTIONS: Dict[str, Vec2d] = {
    "U": Vec2d(0, 1),
    "D": Vec2d(0, -1),
    "L": Vec2d(-1, 0),
    "R": Vec2d(1, 0),
}
