"""calorie counting: sum each payload, then report the largest totals"""

from __future__ import annotations

import heapq
import logging
from typing import List, Optional

from ..combinators import many1, one_of, separated_list1, terminated
from ..config import DEFAULT_CONFIG, PuzzleConfig
from ..errors import StructuralError
from ..factories import eof, newline, unsigned

logger = logging.getLogger(__name__)

# --- grammar ---

calories = terminated(unsigned(), one_of(newline(), eof())).context("calories")
payload = many1(calories).context("payload")
payloads = terminated(separated_list1(newline(), payload), newline().optional()).context("payloads")


def parse_payloads(text: str) -> List[List[int]]:
    groups = payloads.parse_all(text)
    logger.debug(f"parsed {len(groups)} payloads")
    return groups


# --- solvers ---

def payload_totals(groups: List[List[int]]) -> List[int]:
    return [sum(group) for group in groups]


def top_totals(groups: List[List[int]], count: int) -> List[int]:
    """the count largest payload totals, largest first"""
    if len(groups) < count:
        raise StructuralError(f"need at least {count} payloads, got {len(groups)}")
    return heapq.nlargest(count, payload_totals(groups))


def solve_part1(groups: List[List[int]], config: Optional[PuzzleConfig] = None) -> int:
    return top_totals(groups, 1)[0]


def solve_part2(groups: List[List[int]], config: Optional[PuzzleConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    return sum(top_totals(groups, config.top_n))
