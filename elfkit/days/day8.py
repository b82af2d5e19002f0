"""treetop tree house: visibility and viewing distance across a height grid"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import product
from typing import Iterator, List, NamedTuple, Optional

import numpy as np

from ..combinators import many1, separated_list1, terminated
from ..config import PuzzleConfig
from ..errors import StructuralError
from ..factories import newline, satisfy

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Forest:
    """a read-only height x width grid of tree heights, addressed by (x, y)"""

    def __init__(self, heights: np.ndarray):
        heights = np.array(heights, dtype=np.int8)
        if heights.ndim != 2 or heights.size == 0:
            raise StructuralError("a forest needs a non-empty rectangular grid")
        heights.setflags(write=False)
        self.heights = heights

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> 'Forest':
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise StructuralError(f"forest rows have differing widths: {sorted(widths)}")
        return cls(np.array(rows))

    @property
    def height(self) -> int:
        return self.heights.shape[0]

    @property
    def width(self) -> int:
        return self.heights.shape[1]

    def tree(self, position: Position) -> int:
        return int(self.heights[position.y, position.x])

    def positions(self) -> Iterator[Position]:
        return (Position(x, y) for y, x in product(range(self.height), range(self.width)))

    def scan(self, position: Position, direction: Direction) -> np.ndarray:
        """heights from the neighbour of position outward to the edge, nearest first"""
        x, y = position
        if direction is Direction.UP:
            return self.heights[:y, x][::-1]
        if direction is Direction.DOWN:
            return self.heights[y + 1:, x]
        if direction is Direction.LEFT:
            return self.heights[y, :x][::-1]
        return self.heights[y, x + 1:]

    def is_edge(self, position: Position) -> bool:
        return (position.x == 0 or position.x == self.width - 1
                or position.y == 0 or position.y == self.height - 1)

    def is_visible(self, position: Position) -> bool:
        """visible when some direction has no tree of equal or greater height up to the edge"""
        if self.is_edge(position):
            return True
        tree_height = self.tree(position)
        return any(not (self.scan(position, direction) >= tree_height).any() for direction in Direction)

    def viewing_distance(self, position: Position) -> int:
        """product over the four directions of trees seen up to and including the first blocker"""
        tree_height = self.tree(position)
        total = 1
        for direction in Direction:
            scanned = self.scan(position, direction)
            blockers = np.flatnonzero(scanned >= tree_height)
            seen = int(blockers[0]) + 1 if blockers.size else len(scanned)
            if seen == 0:
                return 0
            total *= seen
        return total

    def visible_count(self) -> int:
        return sum(1 for position in self.positions() if self.is_visible(position))

    def best_viewing_distance(self) -> int:
        return max(self.viewing_distance(position) for position in self.positions())

    def __repr__(self) -> str:
        return f"Forest(height={self.height}, width={self.width})"


# --- grammar ---

tree_height = satisfy(lambda char: '0' <= char <= '9', "tree height").map(int)
forest_row = many1(tree_height).context("forest_row")
forest_grid = terminated(separated_list1(newline(), forest_row), newline().optional()).context("forest")


def parse_forest(text: str) -> Forest:
    forest = Forest.from_rows(forest_grid.parse_all(text))
    logger.debug(f"parsed {forest!r}")
    return forest


# --- solvers ---

def solve_part1(forest: Forest, config: Optional[PuzzleConfig] = None) -> int:
    return forest.visible_count()


def solve_part2(forest: Forest, config: Optional[PuzzleConfig] = None) -> int:
    return forest.best_viewing_distance()
