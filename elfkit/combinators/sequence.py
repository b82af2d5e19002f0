from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..parser import Parser


def sequence(*parsers: 'Parser[Any]') -> 'Parser[Tuple[Any, ...]]':
    """run parsers one after another, collecting their values into a tuple"""
    from ..parser import Parser
    if not parsers:
        raise ValueError("sequence requires at least one parser")

    def sequence_parse(text: str, position: int) -> ParseResult[Tuple[Any, ...]]:
        values = []
        stopped_by = None
        current = position
        for parser in parsers:
            result = parser(text, current)
            if not result.ok: return result
            values.append(result.value)
            stopped_by = furthest(stopped_by, result.stopped_by)
            current = result.position
        return Success(text, current, tuple(values), stopped_by)

    return Parser(sequence_parse)


def pair(first: 'Parser[T]', second: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
    """two parsers in order, both values kept"""
    return sequence(first, second)


def separated_pair(first: 'Parser[T]', separator: 'Parser[Any]', second: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
    """two parsers around a separator whose value is dropped"""
    return sequence(first, separator, second).map(lambda values: (values[0], values[2]))


def preceded(prefix: 'Parser[Any]', parser: 'Parser[T]') -> 'Parser[T]':
    """match prefix then parser, keep only the parser's value"""
    return sequence(prefix, parser).map(lambda values: values[1])


def terminated(parser: 'Parser[T]', suffix: 'Parser[Any]') -> 'Parser[T]':
    """match parser then suffix, keep only the parser's value"""
    return sequence(parser, suffix).map(lambda values: values[0])


def delimited(opening: 'Parser[Any]', parser: 'Parser[T]', closing: 'Parser[Any]') -> 'Parser[T]':
    """match parser between opening and closing, keep only the middle value"""
    return sequence(opening, parser, closing).map(lambda values: values[1])
