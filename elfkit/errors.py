from .types import Failure


class ElfkitError(Exception):
    """base class for problems with the puzzle input"""


class ParseError(ElfkitError):
    """the input does not match the grammar"""

    def __init__(self, failure: Failure):
        super().__init__(failure.describe())
        self.failure = failure


class StructuralError(ElfkitError):
    """the input parsed, but the parsed value breaks a precondition of the algorithm"""


class MarkerNotFoundError(StructuralError):
    """no window of pairwise distinct characters exists in the stream"""

    def __init__(self, width: int):
        super().__init__(f"no marker of {width} distinct characters found in the stream")
        self.width = width


class InvariantError(RuntimeError):
    """a state that cannot happen unless the code itself is wrong"""
