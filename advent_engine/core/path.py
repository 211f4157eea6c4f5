import re
from typing import Iterator, List, Tuple
from advent_engine.core.errors import PathFormatError
from advent_engine.core.vec2d import Vec2d, ORIGIN, DIRECTIONS

TOKEN_RE = re.compile(r"^([UDLR])(\d+)$")


def parse_step(token: str) -> Vec2d:
    """
    Parses a single path token like 'R8' or 'D30' into a displacement.
    Raises PathFormatError if the token is not a direction letter followed by digits.
    """
    match = TOKEN_RE.match(token)
    if match is None:
        raise PathFormatError(f"Malformed path token: {token!r}")

    direction = DIRECTIONS[match.group(1)]
    magnitude = int(match.group(2))
    return Vec2d(direction.x * magnitude, direction.y * magnitude)


def parse_path(line: str) -> List[Vec2d]:
    if not line.strip():
        raise PathFormatError("Empty wire path")
    return [parse_step(token) for token in line.split(",")]


def iter_points(vectors: List[Vec2d]) -> Iterator[Vec2d]:
    """
    Walks the path from the origin one cell at a time.
    Yields every cell entered, in order. The origin itself is never yielded.
    """
    pos = ORIGIN
    for vector in vectors:
        step = vector.unit()
        for _ in range(vector.length()):
            pos = pos + step
            yield pos


def rasterize(vectors: List[Vec2d]) -> List[Vec2d]:
    return list(iter_points(vectors))


def corners(vectors: List[Vec2d]) -> List[Tuple[int, Vec2d]]:
    """
    Returns the polyline vertices as (step_index, position), starting at (0, ORIGIN).
    step_index is the number of cells entered when the vertex is reached.
    """
    result = [(0, ORIGIN)]
    steps = 0
    pos = ORIGIN
    for vector in vectors:
        steps += vector.length()
        pos = pos + vector
        result.append((steps, pos))
    return result
