
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')

Mapper = Callable[[T], U]
CharPredicate = Callable[[str], bool]


class Failure:
    """a failed parse attempt, anchored where the failing attempt started"""

    ok = False

    def __init__(self, text: str, position: int, expected: str, contexts: Tuple[str, ...] = ()):
        self.text = text
        self.position = position
        self.expected = expected
        self.contexts = contexts  # innermost first

    @property
    def label(self) -> str:
        """the most specific name for what failed"""
        return self.contexts[0] if self.contexts else self.expected

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    def with_context(self, label: str) -> 'Failure':
        return Failure(self.text, self.position, self.expected, self.contexts + (label,))

    def describe(self) -> str:
        found = self.text[self.position:self.position + 10]
        found = repr(found) if found else "end of input"
        message = f"expected {self.expected} at line {self.line}, column {self.column}, found {found}"
        if self.contexts:
            message += f" (in {' < '.join(self.contexts)})"
        return message

    def __repr__(self) -> str:
        return f"Failure(position={self.position}, expected={self.expected!r}, contexts={self.contexts})"


class Success(Generic[T]):
    """
    a successful parse: the value produced and the index where unconsumed input starts.
    stopped_by holds the furthest failure a repetition or alternation swallowed on the way,
    used to report a deeper error when the overall parse later comes up short.
    """

    ok = True

    def __init__(self, text: str, position: int, value: T, stopped_by: Optional[Failure] = None):
        self.text = text
        self.position = position
        self.value = value
        self.stopped_by = stopped_by

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    def __repr__(self) -> str:
        return f"Success(position={self.position}, value={self.value!r})"


ParseResult = Union[Success[T], Failure]
ParseFunc = Callable[[str, int], ParseResult]


def furthest(*failures: Optional[Failure]) -> Optional[Failure]:
    """pick the failure that got furthest into the input; later arguments win ties"""
    best = None
    for failure in failures:
        if failure is not None and (best is None or failure.position >= best.position):
            best = failure
    return best
