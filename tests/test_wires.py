import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent_engine.algo.wires import (
    CrossedWires, find_intersections, first_visit_steps,
    closest_distance, closest_intersection, fewest_combined_steps
)
from advent_engine.core.errors import NoIntersectionError, PathFormatError, WireInputError
from advent_engine.core.path import parse_path, rasterize
from advent_engine.core.vec2d import Vec2d, ORIGIN

EXAMPLES = [
    ("R8,U5,L5,D3", "U7,R6,D4,L4", 6, 30),
    ("R75,D30,R83,U83,L12,D49,R71,U7,L72", "U62,R66,U55,R34,D71,R55,D58,R83", 159, 610),
    ("R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51", "U98,R91,D20,R16,D67,R40,U7,R15,U6,R7", 135, 410),
]


def wires_for(first, second):
    return [rasterize(parse_path(first)), rasterize(parse_path(second))]


class TestIntersections(unittest.TestCase):
    def test_small_example_crossings(self):
        a, b = wires_for("R8,U5,L5,D3", "U7,R6,D4,L4")
        self.assertEqual(find_intersections(a, b), {Vec2d(3, 3), Vec2d(6, 5)})

    def test_origin_never_reported(self):
        a, b = wires_for("R8,U5,L5,D3", "U7,R6,D4,L4")
        self.assertNotIn(ORIGIN, find_intersections(a, b))

    def test_no_crossing(self):
        # Only the shared origin, which doesn't count
        a, b = wires_for("U2", "D2")
        intersections = find_intersections(a, b)
        self.assertEqual(intersections, set())
        with self.assertRaises(NoIntersectionError):
            closest_distance(intersections)
        with self.assertRaises(NoIntersectionError):
            fewest_combined_steps([a, b], intersections)


class TestMetrics(unittest.TestCase):
    def test_examples(self):
        for first, second, distance, steps in EXAMPLES:
            a, b = wires_for(first, second)
            intersections = find_intersections(a, b)
            self.assertEqual(closest_distance(intersections), distance, first)
            self.assertEqual(fewest_combined_steps([a, b], intersections), steps, first)

    def test_closest_point(self):
        a, b = wires_for("R8,U5,L5,D3", "U7,R6,D4,L4")
        self.assertEqual(closest_intersection(find_intersections(a, b)), Vec2d(3, 3))

    def test_first_visit_wins(self):
        # Wire one passes (2,0) at step 2 and again at step 10
        points = rasterize(parse_path("R4,U2,L2,D4"))
        self.assertEqual(points.index(Vec2d(2, 0)) + 1, 2)
        self.assertEqual(points[9], Vec2d(2, 0))

        steps = first_visit_steps(points)
        self.assertEqual(steps[Vec2d(2, 0)], 2)
        self.assertEqual(steps[Vec2d(2, -2)], 12)

        a, b = points, rasterize(parse_path("D1,R2,U1"))
        intersections = find_intersections(a, b)
        self.assertEqual(intersections, {Vec2d(2, 0), Vec2d(2, -1)})
        self.assertEqual(fewest_combined_steps([a, b], intersections), 6)
        self.assertEqual(closest_distance(intersections), 2)


class TestCrossedWires(unittest.TestCase):
    def test_run_all(self):
        puzzle = CrossedWires(["R8,U5,L5,D3", "U7,R6,D4,L4"])
        self.assertEqual(puzzle.run_all(), (6, 30))
        self.assertEqual(puzzle.closest, Vec2d(3, 3))
        self.assertEqual(puzzle.fastest, Vec2d(6, 5))

    def test_report(self):
        first, second, distance, steps = EXAMPLES[1]
        puzzle = CrossedWires([first, second])
        statuses = list(puzzle.run())
        self.assertEqual(statuses[-1], "Done")
        self.assertEqual(puzzle.step_count, len(puzzle.wires[0]) + len(puzzle.wires[1]))
        self.assertEqual(statuses[0], f"Rasterized {puzzle.step_count} cells")
        self.assertEqual(puzzle.report(), ["Part 1: distance: 159", "Part 2: steps: 610"])

    def test_malformed_input_fails_on_construction(self):
        with self.assertRaises(PathFormatError):
            CrossedWires(["R8,U5,X5,D3", "U7,R6,D4,L4"])

    def test_wrong_wire_count(self):
        with self.assertRaises(WireInputError):
            CrossedWires(["R8,U5,L5,D3"])

    def test_never_crossing(self):
        puzzle = CrossedWires(["R5,U5", "L5,D5"])
        with self.assertRaises(NoIntersectionError):
            puzzle.run_all()


if __name__ == '__main__':
    unittest.main()
