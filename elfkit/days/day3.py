"""rucksack reorganization: priorities of items shared between compartments"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from itertools import batched
from typing import Iterator, List, Optional, Tuple

from ..combinators import separated_list1, terminated
from ..config import DEFAULT_CONFIG, PuzzleConfig
from ..errors import StructuralError
from ..factories import letters, newline

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 52


def item_index(item: str) -> int:
    """'a'..'z' -> 0..25, 'A'..'Z' -> 26..51"""
    if 'a' <= item <= 'z':
        return ord(item) - ord('a')
    if 'A' <= item <= 'Z':
        return ord(item) - ord('A') + 26
    raise ValueError(f"not an item kind: {item!r}")


class Compartment:
    """the set of item kinds present in a string, stored as a 52-bit mask"""

    __slots__ = ('bits',)

    def __init__(self, bits: int = 0):
        self.bits = bits

    @classmethod
    def from_items(cls, items: str) -> 'Compartment':
        bits = 0
        for item in items:
            bits |= 1 << item_index(item)
        return cls(bits)

    def __and__(self, other: 'Compartment') -> 'Compartment':
        return Compartment(self.bits & other.bits)

    def __or__(self, other: 'Compartment') -> 'Compartment':
        return Compartment(self.bits | other.bits)

    def __contains__(self, index: int) -> bool:
        return 0 <= index < ALPHABET_SIZE and bool(self.bits >> index & 1)

    def __iter__(self) -> Iterator[int]:
        return (index for index in range(ALPHABET_SIZE) if self.bits >> index & 1)

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Compartment) and self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    @property
    def priority(self) -> int:
        """sum of 1-indexed alphabet positions of every kind present"""
        return sum(index + 1 for index in self)

    def __repr__(self) -> str:
        return f"Compartment(kinds={len(self)}, priority={self.priority})"


@dataclass(frozen=True)
class Rucksack:
    first: Compartment
    second: Compartment

    @classmethod
    def from_line(cls, line: str) -> 'Rucksack':
        if len(line) % 2:
            raise StructuralError(f"rucksack {line!r} cannot be split into two equal compartments")
        middle = len(line) // 2
        return cls(Compartment.from_items(line[:middle]), Compartment.from_items(line[middle:]))

    def priority(self) -> int:
        return (self.first & self.second).priority


@dataclass(frozen=True)
class Group:
    members: Tuple[Compartment, ...]

    def priority(self) -> int:
        return reduce(lambda acc, member: acc & member, self.members).priority


# --- grammar ---

rucksack_lines = terminated(separated_list1(newline(), letters().context("rucksack")), newline().optional())


def parse_rucksacks(text: str) -> List[Rucksack]:
    rucksacks = [Rucksack.from_line(line) for line in rucksack_lines.parse_all(text)]
    logger.debug(f"parsed {len(rucksacks)} rucksacks")
    return rucksacks


def parse_groups(text: str, config: Optional[PuzzleConfig] = None) -> List[Group]:
    config = config or DEFAULT_CONFIG
    lines = rucksack_lines.parse_all(text)
    if len(lines) % config.group_size:
        raise StructuralError(f"{len(lines)} rucksacks cannot be split into groups of {config.group_size}")
    groups = [Group(tuple(Compartment.from_items(line) for line in chunk))
              for chunk in batched(lines, config.group_size)]
    logger.debug(f"parsed {len(groups)} groups")
    return groups


# --- solvers ---

def solve_part1(rucksacks: List[Rucksack], config: Optional[PuzzleConfig] = None) -> int:
    return sum(r.priority() for r in rucksacks)


def solve_part2(groups: List[Group], config: Optional[PuzzleConfig] = None) -> int:
    return sum(g.priority() for g in groups)
