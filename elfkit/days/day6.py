"""tuning trouble: find the first window of pairwise distinct characters"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..combinators import one_of, terminated
from ..config import DEFAULT_CONFIG, PuzzleConfig
from ..errors import MarkerNotFoundError
from ..factories import newline, tag, take_while1

logger = logging.getLogger(__name__)

datastream = terminated(take_while1(lambda char: char not in "\r\n", "datastream characters"),
                        one_of(tag("\r\n"), newline()).optional()).context("datastream")


def parse_datastream(text: str) -> str:
    stream = datastream.parse_all(text)
    logger.debug(f"parsed a datastream of {len(stream)} characters")
    return stream


def marker_position(stream: str, width: int) -> Optional[int]:
    """
    1-indexed position of the last character of the first window of `width`
    pairwise distinct characters, or None if the stream has no such window.
    single pass: the window start jumps past the previous copy of a repeated character.
    """
    if width <= 0:
        raise ValueError("marker width must be positive")
    last_seen: Dict[str, int] = {}
    start = 0
    for index, char in enumerate(stream):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        if index - start + 1 >= width:
            return index + 1
    return None


def find_marker(stream: str, width: int) -> int:
    position = marker_position(stream, width)
    if position is None:
        raise MarkerNotFoundError(width)
    return position


def solve_part1(stream: str, config: Optional[PuzzleConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    return find_marker(stream, config.packet_marker_width)


def solve_part2(stream: str, config: Optional[PuzzleConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    return find_marker(stream, config.message_marker_width)
