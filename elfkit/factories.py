import typing
from .types import *

if typing.TYPE_CHECKING:
    from .parser import Parser


def _is_ascii_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_ascii_letter(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'


def literal(tag: str) -> 'Parser[str]':
    """match the exact string tag"""
    from .parser import Parser
    if not tag:
        raise ValueError("literal tag must not be empty")
    expected = repr(tag)
    def literal_parse(text: str, position: int) -> ParseResult[str]:
        if text.startswith(tag, position):
            return Success(text, position + len(tag), tag)
        return Failure(text, position, expected)
    return Parser(literal_parse)


def satisfy(predicate: CharPredicate, expected: str) -> 'Parser[str]':
    """match a single character accepted by predicate"""
    from .parser import Parser
    def satisfy_parse(text: str, position: int) -> ParseResult[str]:
        if position < len(text) and predicate(text[position]):
            return Success(text, position + 1, text[position])
        return Failure(text, position, expected)
    return Parser(satisfy_parse)


def take_while1(predicate: CharPredicate, expected: str) -> 'Parser[str]':
    """match the longest non-empty run of characters accepted by predicate"""
    from .parser import Parser
    def take_while1_parse(text: str, position: int) -> ParseResult[str]:
        end = position
        while end < len(text) and predicate(text[end]):
            end += 1
        if end == position:
            return Failure(text, position, expected)
        return Success(text, end, text[position:end])
    return Parser(take_while1_parse)


def digits() -> 'Parser[str]':
    """one or more ascii digits"""
    return take_while1(_is_ascii_digit, "digits")


def letters() -> 'Parser[str]':
    """one or more ascii letters"""
    return take_while1(_is_ascii_letter, "letters")


def space() -> 'Parser[str]':
    """one or more spaces or tabs"""
    return take_while1(lambda char: char in " \t", "whitespace")


def newline() -> 'Parser[str]':
    return literal("\n")


def eof() -> 'Parser[None]':
    """succeed only at the end of the input"""
    from .parser import Parser
    def eof_parse(text: str, position: int) -> ParseResult[None]:
        if position >= len(text):
            return Success(text, position, None)
        return Failure(text, position, "end of input")
    return Parser(eof_parse)


def integer(bits: int = 64, signed: bool = False) -> 'Parser[int]':
    """
    a decimal integer that must fit in the given width.
    signed integers accept a leading '-' and range over [-2**(bits-1), 2**(bits-1)).
    """
    from .combinators import sequence
    if bits <= 0:
        raise ValueError("integer width must be positive")

    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        source = sequence(literal("-").optional(""), digits()).map(lambda parts: parts[0] + parts[1])
    else:
        low, high = 0, (1 << bits) - 1
        source = digits()

    kind = f"{'i' if signed else 'u'}{bits}"

    def convert(raw: str) -> int:
        number = int(raw)
        if not low <= number <= high:
            raise OverflowError(f"{raw} does not fit in {kind}")
        return number

    return source.map_res(convert, expected=f"{kind} integer")


def unsigned(bits: int = 64) -> 'Parser[int]':
    return integer(bits, signed=False)


# --- aliases ---
tag = literal
