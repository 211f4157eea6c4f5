from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple


class Puzzle(ABC):
    def __init__(self):
        self.part_one: Optional[int] = None
        self.part_two: Optional[int] = None
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings while solving.
        Answers are stored on self.part_one / self.part_two as they become known.
        """
        pass

    def run_all(self) -> Tuple[Optional[int], Optional[int]]:
        """Helper to run the puzzle to completion."""
        for _ in self.run():
            pass
        return self.part_one, self.part_two

    @abstractmethod
    def report(self) -> List[str]:
        """The two answer lines, in output order."""
        pass
