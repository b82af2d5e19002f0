"""camp cleanup: containment and overlap of section ranges"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..combinators import separated_list1, separated_pair, terminated
from ..config import PuzzleConfig
from ..factories import newline, tag, unsigned

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range:
    """closed range [low, high]. low <= high is assumed, not checked."""
    low: int
    high: int

    def contains(self, other: 'Range') -> bool:
        return self.low <= other.low and self.high >= other.high

    def overlaps(self, other: 'Range') -> bool:
        return max(self.low, other.low) <= min(self.high, other.high)


RangePair = Tuple[Range, Range]


def fully_contains(lhs: Range, rhs: Range) -> bool:
    """one range encloses the other, in either direction"""
    return lhs.contains(rhs) or rhs.contains(lhs)


# --- grammar ---

section_range = separated_pair(unsigned(), tag("-"), unsigned()).map(lambda bounds: Range(*bounds)).context("range")
range_pair = separated_pair(section_range, tag(","), section_range).context("range_pair")
assignments = terminated(separated_list1(newline(), range_pair), newline().optional())


def parse_assignments(text: str) -> List[RangePair]:
    pairs = assignments.parse_all(text)
    logger.debug(f"parsed {len(pairs)} range pairs")
    return pairs


# --- solvers ---

def solve_part1(pairs: List[RangePair], config: Optional[PuzzleConfig] = None) -> int:
    return sum(1 for lhs, rhs in pairs if fully_contains(lhs, rhs))


def solve_part2(pairs: List[RangePair], config: Optional[PuzzleConfig] = None) -> int:
    return sum(1 for lhs, rhs in pairs if lhs.overlaps(rhs))
