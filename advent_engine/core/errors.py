class PuzzleError(Exception):
    """Base class for every input or solve failure the CLI reports."""


class PathFormatError(PuzzleError, ValueError):
    pass


class WireInputError(PuzzleError, ValueError):
    pass


class NoIntersectionError(PuzzleError):
    pass
