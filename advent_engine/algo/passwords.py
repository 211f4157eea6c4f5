from typing import Callable, Iterator, List
import numpy as np
from advent_engine.algo.base import Puzzle

# Puzzle input, inclusive on both ends
PASSWORD_RANGE = (138241, 674034)


def is_valid_part_one(password: int) -> bool:
    """
    Digits never decrease left to right and at least two adjacent digits match.
    Scans right to left, so a 'decrease' shows up as current > previous.
    """
    valid = False
    previous = password % 10
    password //= 10

    while password > 0:
        current = password % 10
        if current > previous:
            return False
        valid = valid or current == previous
        previous = current
        password //= 10

    return valid


def is_valid_part_two(password: int) -> bool:
    """
    Same ordering rule as part one, but the matching pair must be a run of
    exactly two digits. 111122 passes thanks to the 22, 123444 does not.
    """
    valid = False
    repeat_count = 1
    previous = password % 10
    password //= 10

    while password > 0:
        current = password % 10
        if current > previous:
            return False

        if current == previous:
            repeat_count += 1
        else:
            valid = valid or repeat_count == 2
            repeat_count = 1
        previous = current
        password //= 10

    # Most significant run is never closed by a differing digit
    return valid or repeat_count == 2


def count_valid(start: int, end: int, predicate: Callable[[int], bool]) -> int:
    return sum(1 for password in range(start, end + 1) if predicate(password))


def count_valid_vectorized(start: int, end: int, exact_pairs: bool = False) -> int:
    """
    Numpy version of count_valid. Evaluates one digit position of the whole
    range at a time instead of one candidate at a time.

    Position k is the 10**k digit. A pair (k, k+1) only exists when the number
    actually has a digit at k+1, so leading zeros never form doubles.
    """
    if end < start:
        return 0

    ids = np.arange(start, end + 1, dtype=np.int64)
    width = len(str(max(abs(start), abs(end), 1)))

    digits = [(ids // 10 ** k) % 10 for k in range(width)]

    ordered = np.ones(ids.shape, dtype=bool)
    pairs = []
    for k in range(width - 1):
        present = ids >= 10 ** (k + 1)
        ordered &= ~(present & (digits[k + 1] > digits[k]))
        pairs.append(present & (digits[k + 1] == digits[k]))

    if not pairs:
        # Single digit numbers can't contain a double
        return 0

    if exact_pairs:
        # A run of exactly two digits is an equal pair with no equal neighbour pair
        doubles = np.zeros(ids.shape, dtype=bool)
        for k, pair in enumerate(pairs):
            isolated = pair.copy()
            if k > 0:
                isolated &= ~pairs[k - 1]
            if k + 1 < len(pairs):
                isolated &= ~pairs[k + 1]
            doubles |= isolated
    else:
        doubles = np.logical_or.reduce(pairs)

    return int(np.count_nonzero(ordered & doubles))


class SecureContainer(Puzzle):
    def __init__(self, start: int = PASSWORD_RANGE[0], end: int = PASSWORD_RANGE[1], vectorized: bool = False):
        super().__init__()
        self.start = start
        self.end = end
        self.vectorized = vectorized

    def run(self) -> Iterator[str]:
        self.step_count = max(0, self.end - self.start + 1)
        yield f"Checking {self.step_count} candidates"

        if self.vectorized:
            self.part_one = count_valid_vectorized(self.start, self.end)
        else:
            self.part_one = count_valid(self.start, self.end, is_valid_part_one)
        yield f"Part one: {self.part_one}"

        if self.vectorized:
            self.part_two = count_valid_vectorized(self.start, self.end, exact_pairs=True)
        else:
            self.part_two = count_valid(self.start, self.end, is_valid_part_two)
        yield "Done"

    def report(self) -> List[str]:
        return [
            f"Part one. Count: {self.part_one}",
            f"Part two: Count: {self.part_two}",
        ]
