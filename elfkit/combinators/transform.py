from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..parser import Parser

class _TransformOperations(Generic[T]):
    def map(self: 'Parser[T]', mapper: Mapper[T, U]) -> 'Parser[U]':
        """transform the value of a successful parse"""
        from ..parser import Parser
        def map_parse(text: str, position: int) -> ParseResult[U]:
            result = self(text, position)
            if not result.ok: return result
            return Success(text, result.position, mapper(result.value), result.stopped_by)
        return Parser(map_parse)

    def map_res(self: 'Parser[T]', mapper: Mapper[T, U], expected: Optional[str] = None) -> 'Parser[U]':
        """
        transform the value with a function that may fail.
        a ValueError or OverflowError from the mapper becomes a failure at the pre-attempt position.
        """
        from ..parser import Parser
        def map_res_parse(text: str, position: int) -> ParseResult[U]:
            result = self(text, position)
            if not result.ok: return result
            try:
                value = mapper(result.value)
            except (ValueError, OverflowError) as e:
                return Failure(text, position, expected or f"convertible value ({e})")
            return Success(text, result.position, value, result.stopped_by)
        return Parser(map_res_parse)

    def value(self: 'Parser[T]', constant: U) -> 'Parser[U]':
        """replace the parsed value with a constant"""
        return self.map(lambda _: constant)

    def context(self: 'Parser[T]', label: str) -> 'Parser[T]':
        """name this rule so failures inside it report where they happened"""
        from ..parser import Parser
        def context_parse(text: str, position: int) -> ParseResult[T]:
            result = self(text, position)
            if not result.ok:
                return result.with_context(label)
            if result.stopped_by is not None:
                return Success(text, result.position, result.value, result.stopped_by.with_context(label))
            return result
        return Parser(context_parse)

    def optional(self: 'Parser[T]', default: Optional[T] = None) -> 'Parser[Optional[T]]':
        """succeed with default, consuming nothing, when this parser fails"""
        from ..parser import Parser
        def optional_parse(text: str, position: int) -> ParseResult[Optional[T]]:
            result = self(text, position)
            if result.ok: return result
            return Success(text, position, default, result)
        return Parser(optional_parse)

    def all_consuming(self: 'Parser[T]') -> 'Parser[T]':
        """require that no input is left over after this parser succeeds"""
        from ..parser import Parser
        def all_consuming_parse(text: str, position: int) -> ParseResult[T]:
            result = self(text, position)
            if not result.ok or result.position == len(text):
                return result
            # a swallowed failure that got at least this far explains the leftover better
            deeper = result.stopped_by
            if deeper is not None and deeper.position >= result.position:
                return deeper
            return Failure(text, result.position, "end of input")
        return Parser(all_consuming_parse)
