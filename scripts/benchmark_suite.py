import sys
import os
import time
import random
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent_engine.algo.wires import CrossedWires
from advent_engine.algo.passwords import PASSWORD_RANGE, SecureContainer
from advent_engine.core.errors import NoIntersectionError


def random_path(segments: int, max_len: int, rng: random.Random) -> str:
    tokens = []
    for _ in range(segments):
        tokens.append(f"{rng.choice('UDLR')}{rng.randint(1, max_len)}")
    return ",".join(tokens)


def benchmark_wires(segments: int, max_len: int, seed: int):
    rng = random.Random(seed)
    paths = [random_path(segments, max_len, rng), random_path(segments, max_len, rng)]

    t0 = time.time()
    puzzle = CrossedWires(paths)
    parse_time = time.time() - t0

    t1 = time.time()
    puzzle.run_all()
    solve_time = time.time() - t1

    cells = sum(len(wire) for wire in puzzle.wires)
    print(f"{segments:<10} | {cells:<12,} | {len(puzzle.intersections):<10} | {parse_time:<10.4f} | {solve_time:<10.4f}")


def benchmark_passwords():
    start, end = PASSWORD_RANGE
    print(f"\n--- Password range {start}-{end} ({end - start + 1:,} candidates) ---")
    for name, vectorized in (("Scalar", False), ("Numpy", True)):
        t0 = time.time()
        puzzle = SecureContainer(start, end, vectorized=vectorized)
        part_one, part_two = puzzle.run_all()
        duration = time.time() - t0
        print(f"{name:<8} | {duration:<10.4f} | {part_one:<6} | {part_two:<6}")


def run_suite():
    parser = argparse.ArgumentParser(description="Wire and password benchmark")
    parser.add_argument("--seed", type=int, default=42, help="Random Seed")
    parser.add_argument("--max-len", type=int, default=1000, help="Longest random segment")
    args = parser.parse_args()

    print(f"\n{'SEGMENTS':<10} | {'CELLS':<12} | {'CROSSINGS':<10} | {'PARSE (s)':<10} | {'SOLVE (s)':<10}")
    print("-" * 64)
    for segments in (10, 100, 300, 1000):
        try:
            benchmark_wires(segments, args.max_len, args.seed)
        except NoIntersectionError as e:
            # Random walks can miss each other entirely
            print(f"{segments:<10} | {e}")

    benchmark_passwords()


if __name__ == "__main__":
    run_suite()
