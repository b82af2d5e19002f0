from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..parser import Parser


def many1(parser: 'Parser[T]') -> 'Parser[List[T]]':
    """apply parser until it fails. at least one application must succeed."""
    from ..parser import Parser
    def many1_parse(text: str, position: int) -> ParseResult[List[T]]:
        first = parser(text, position)
        if not first.ok: return first

        values = [first.value]
        stopped_by = first.stopped_by
        current = first.position
        if current == position:
            return Failure(text, position, "input consumed by repeated rule")

        while True:
            result = parser(text, current)
            if not result.ok:
                return Success(text, current, values, furthest(stopped_by, result))
            # a success that consumed nothing would repeat forever
            if result.position == current:
                return Failure(text, current, "input consumed by repeated rule")
            values.append(result.value)
            stopped_by = furthest(stopped_by, result.stopped_by)
            current = result.position

    return Parser(many1_parse)


def separated_list1(separator: 'Parser[Any]', parser: 'Parser[T]') -> 'Parser[List[T]]':
    """
    parser, then any number of (separator, parser). at least one element is required.
    a separator that is not followed by an element is left unconsumed.
    """
    from ..parser import Parser
    def separated_list1_parse(text: str, position: int) -> ParseResult[List[T]]:
        first = parser(text, position)
        if not first.ok: return first

        values = [first.value]
        stopped_by = first.stopped_by
        current = first.position

        while True:
            sep = separator(text, current)
            if not sep.ok:
                return Success(text, current, values, furthest(stopped_by, sep))
            element = parser(text, sep.position)
            if not element.ok:
                # backtrack to before the separator
                return Success(text, current, values, furthest(stopped_by, element))
            if element.position == current:
                return Failure(text, current, "input consumed by repeated rule")
            values.append(element.value)
            stopped_by = furthest(stopped_by, sep.stopped_by, element.stopped_by)
            current = element.position

    return Parser(separated_list1_parse)
