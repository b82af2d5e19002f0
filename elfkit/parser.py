from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .errors import ParseError

# --- transformation methods ---
from .combinators.transform import _TransformOperations

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IParser(ABC, Generic[T]):
    @abstractmethod
    def __call__(self, text: str, position: int = 0) -> ParseResult[T]:
        """run the parser on text starting at position"""
        pass

# --- base parser implementation ---

class _BaseParser(IParser[T]):
    def __init__(self, parse_func: ParseFunc):
        """init with a function of (text, position) returning a success or a failure"""
        self._parse_func = parse_func

    def __call__(self, text: str, position: int = 0) -> ParseResult[T]:
        return self._parse_func(text, position)

# --- main parser class ---

class Parser(
    _BaseParser[T],
    _TransformOperations[T]
):
    """a composable parser over an in-memory string."""

    def parse(self, text: str) -> ParseResult[T]:
        """run from the start of text. the result may leave input unconsumed."""
        return self(text, 0)

    def parse_all(self, text: str) -> T:
        """
        run from the start of text and require every character to be consumed.
        returns the parsed value or raises ParseError naming the failing rule.
        """
        result = self.all_consuming()(text, 0)
        if not result.ok:
            logger.debug(f"parse failed: {result.describe()}")
            raise ParseError(result)
        return result.value
