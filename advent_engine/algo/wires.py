from typing import Dict, Iterator, List, Sequence, Set
from advent_engine.algo.base import Puzzle
from advent_engine.core.errors import NoIntersectionError, WireInputError
from advent_engine.core.path import parse_path, rasterize
from advent_engine.core.vec2d import Vec2d


def find_intersections(first: List[Vec2d], second: List[Vec2d]) -> Set[Vec2d]:
    # Origin is never part of a rasterized wire, so it can't show up here
    return set(first) & set(second)


def first_visit_steps(points: List[Vec2d]) -> Dict[Vec2d, int]:
    """
    Maps every cell of a rasterized wire to the 1-indexed step of its first visit.
    Later visits of the same cell (wire crossing itself) are ignored.
    """
    steps: Dict[Vec2d, int] = {}
    for step, point in enumerate(points, 1):
        if point not in steps:
            steps[point] = step
    return steps


def closest_intersection(intersections: Set[Vec2d]) -> Vec2d:
    if not intersections:
        raise NoIntersectionError("Wires never cross")
    return min(intersections, key=lambda p: (p.manhattan_distance(), p.x, p.y))


def closest_distance(intersections: Set[Vec2d]) -> int:
    return closest_intersection(intersections).manhattan_distance()


def combined_steps(step_tables: Sequence[Dict[Vec2d, int]], point: Vec2d) -> int:
    return sum(table[point] for table in step_tables)


def fastest_intersection(step_tables: Sequence[Dict[Vec2d, int]], intersections: Set[Vec2d]) -> Vec2d:
    if not intersections:
        raise NoIntersectionError("Wires never cross")
    return min(intersections, key=lambda p: (combined_steps(step_tables, p), p.x, p.y))


def fewest_combined_steps(wires: Sequence[List[Vec2d]], intersections: Set[Vec2d]) -> int:
    step_tables = [first_visit_steps(wire) for wire in wires]
    return combined_steps(step_tables, fastest_intersection(step_tables, intersections))


class CrossedWires(Puzzle):
    """
    Two wires leave the origin and wander the grid. Part one is the Manhattan
    distance of the nearest crossing, part two the lowest combined number of
    steps both wires need to reach a crossing.
    """

    def __init__(self, paths: Sequence[str]):
        super().__init__()
        if len(paths) != 2:
            raise WireInputError(f"Expected 2 wire paths, got {len(paths)}")
        # Parse eagerly so malformed input fails before anything is solved
        self.vectors = [parse_path(line) for line in paths]
        self.wires = [rasterize(vectors) for vectors in self.vectors]
        self.step_tables: List[Dict[Vec2d, int]] = []
        self.intersections: Set[Vec2d] = set()
        self.closest = None
        self.fastest = None

    def run(self) -> Iterator[str]:
        self.step_count = sum(len(wire) for wire in self.wires)
        yield f"Rasterized {self.step_count} cells"

        self.intersections = find_intersections(self.wires[0], self.wires[1])
        yield f"Intersections: {len(self.intersections)}"

        self.closest = closest_intersection(self.intersections)
        self.part_one = self.closest.manhattan_distance()
        yield f"Closest: {self.closest}"

        self.step_tables = [first_visit_steps(wire) for wire in self.wires]
        self.fastest = fastest_intersection(self.step_tables, self.intersections)
        self.part_two = combined_steps(self.step_tables, self.fastest)
        yield "Done"

    def report(self) -> List[str]:
        return [
            f"Part 1: distance: {self.part_one}",
            f"Part 2: steps: {self.part_two}",
        ]
