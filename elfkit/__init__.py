r"""
'   ___ _    ___ _  _____ _____
'  | __| |  | __| |/ /_ _|_   _|
'  | _|| |__| _|| ' < | |  | |
'  |___|____|_| |_|\_\___| |_|
'
"""

# expose the parser class
from .parser import Parser

# expose the primitive factories
from .factories import (
    literal,
    tag,
    satisfy,
    take_while1,
    digits,
    letters,
    space,
    newline,
    eof,
    integer,
    unsigned
)

# expose the combinators
from .combinators import (
    sequence,
    pair,
    separated_pair,
    preceded,
    terminated,
    delimited,
    one_of,
    many1,
    separated_list1
)

# expose supporting data classes
from .types import (
    Success,
    Failure,
    ParseResult
)

from .errors import (
    ElfkitError,
    ParseError,
    StructuralError,
    MarkerNotFoundError,
    InvariantError
)

from .config import PuzzleConfig, DEFAULT_CONFIG

# define what `import *` does
__all__ = [
    "Parser",
    "literal",
    "tag",
    "satisfy",
    "take_while1",
    "digits",
    "letters",
    "space",
    "newline",
    "eof",
    "integer",
    "unsigned",
    "sequence",
    "pair",
    "separated_pair",
    "preceded",
    "terminated",
    "delimited",
    "one_of",
    "many1",
    "separated_list1",
    "Success",
    "Failure",
    "ParseResult",
    "ElfkitError",
    "ParseError",
    "StructuralError",
    "MarkerNotFoundError",
    "InvariantError",
    "PuzzleConfig",
    "DEFAULT_CONFIG"
]
