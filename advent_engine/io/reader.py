import sys
import logging
from typing import IO, List, Optional
from advent_engine.core.errors import WireInputError

logger = logging.getLogger(__name__)


def read_lines(stream: IO[str]) -> List[str]:
    """Returns rstripped lines from the stream, minus trailing blank lines."""
    lines = [line.rstrip() for line in stream]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def load_wire_paths(source: Optional[str] = None) -> List[str]:
    """
    Reads the two wire paths from a file, or stdin when source is None or '-'.
    """
    if source is None or source == "-":
        logger.debug("Reading wire paths from stdin")
        lines = read_lines(sys.stdin)
    else:
        logger.debug(f"Reading wire paths from {source}")
        with open(source, "r") as f:
            lines = read_lines(f)

    paths = [line for line in lines if line]
    if len(paths) != 2:
        raise WireInputError(f"Expected 2 wire paths, got {len(paths)}")
    return paths
