from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..parser import Parser


def one_of(*alternatives: 'Parser[T]') -> 'Parser[T]':
    """
    ordered choice. every alternative starts from the same position and the first
    success wins, even if a later alternative would consume more.
    fails with the last alternative's failure when none match.
    """
    from ..parser import Parser
    if not alternatives:
        raise ValueError("one_of requires at least one alternative")

    def one_of_parse(text: str, position: int) -> ParseResult[T]:
        swallowed = None
        result = None
        for alternative in alternatives:
            result = alternative(text, position)
            if result.ok:
                return Success(text, result.position, result.value, furthest(swallowed, result.stopped_by))
            swallowed = furthest(swallowed, result)
        return result

    return Parser(one_of_parse)
