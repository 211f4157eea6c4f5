import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent_engine.core.errors import PathFormatError
from advent_engine.core.path import parse_step, parse_path, rasterize, corners
from advent_engine.core.vec2d import Vec2d, ORIGIN


class TestParser(unittest.TestCase):
    def test_parse_step(self):
        cases = [
            ("R8", Vec2d(8, 0)),
            ("U5", Vec2d(0, 5)),
            ("L5", Vec2d(-5, 0)),
            ("D3", Vec2d(0, -3)),
        ]
        for token, expected in cases:
            self.assertEqual(parse_step(token), expected)

    def test_parse_path(self):
        self.assertEqual(
            parse_path("R8,U5,L5,D3"),
            [Vec2d(8, 0), Vec2d(0, 5), Vec2d(-5, 0), Vec2d(0, -3)]
        )

    def test_multi_digit(self):
        self.assertEqual(parse_path("R75,D30,U123"), [Vec2d(75, 0), Vec2d(0, -30), Vec2d(0, 123)])

    def test_whitespace_rejected(self):
        for bad in [" R8", "R8 ", "R 8"]:
            with self.assertRaises(PathFormatError):
                parse_step(bad)
        with self.assertRaises(PathFormatError):
            parse_path("R75, D30")

    def test_malformed_tokens(self):
        for bad in ["X5", "r5", "R", "5R", "R-5", "R5.0", "", "RU5"]:
            with self.assertRaises(PathFormatError):
                parse_step(bad)

        with self.assertRaises(PathFormatError):
            parse_path("R8,,U5")
        with self.assertRaises(PathFormatError):
            parse_path("")

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_step("Q1")


class TestRasterizer(unittest.TestCase):
    def test_rasterize_example(self):
        points = rasterize(parse_path("R8,U5,L5,D3"))
        expected = [Vec2d(x, 0) for x in range(1, 9)]
        expected += [Vec2d(8, y) for y in range(1, 6)]
        expected += [Vec2d(x, 5) for x in range(7, 2, -1)]
        expected += [Vec2d(3, y) for y in range(4, 1, -1)]

        self.assertEqual(len(points), 21)
        self.assertEqual(points, expected)
        self.assertEqual(points[0], Vec2d(1, 0))
        self.assertEqual(points[-1], Vec2d(3, 2))

    def test_origin_excluded(self):
        # Wire that comes back home still doesn't start with the origin
        points = rasterize(parse_path("R1,L1"))
        self.assertEqual(points, [Vec2d(1, 0), Vec2d(0, 0)])
        self.assertNotEqual(rasterize(parse_path("U2"))[0], ORIGIN)

    def test_zero_magnitude(self):
        self.assertEqual(rasterize(parse_path("R0,U2")), [Vec2d(0, 1), Vec2d(0, 2)])

    def test_corners(self):
        self.assertEqual(
            corners(parse_path("R8,U5,L5,D3")),
            [(0, ORIGIN), (8, Vec2d(8, 0)), (13, Vec2d(8, 5)), (18, Vec2d(3, 5)), (21, Vec2d(3, 2))]
        )


if __name__ == '__main__':
    unittest.main()
