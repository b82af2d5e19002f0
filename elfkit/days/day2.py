"""rock paper scissors scoring"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..combinators import one_of, separated_list1, separated_pair, terminated
from ..config import PuzzleConfig
from ..errors import InvariantError
from ..factories import newline, space, tag

logger = logging.getLogger(__name__)


class Pick(Enum):
    ROCK = 1
    PAPER = 2
    SCISSOR = 3

    @property
    def score(self) -> int:
        return self.value


class Outcome(Enum):
    WIN = 6
    LOSE = 0
    DRAW = 3

    @property
    def points(self) -> int:
        return self.value


# the strategy column uses the same three values as an outcome
Strategy = Outcome

_OUTCOME_BY_DIFFERENCE: Dict[int, Outcome] = {
    0: Outcome.DRAW,
    1: Outcome.WIN,
    -2: Outcome.WIN,
    -1: Outcome.LOSE,
    2: Outcome.LOSE,
}

_COUNTERPARTS: Dict[Tuple[Pick, Outcome], Pick] = {
    (Pick.ROCK, Outcome.WIN): Pick.PAPER,
    (Pick.PAPER, Outcome.WIN): Pick.SCISSOR,
    (Pick.SCISSOR, Outcome.WIN): Pick.ROCK,
    (Pick.ROCK, Outcome.LOSE): Pick.SCISSOR,
    (Pick.PAPER, Outcome.LOSE): Pick.ROCK,
    (Pick.SCISSOR, Outcome.LOSE): Pick.PAPER,
    (Pick.ROCK, Outcome.DRAW): Pick.ROCK,
    (Pick.PAPER, Outcome.DRAW): Pick.PAPER,
    (Pick.SCISSOR, Outcome.DRAW): Pick.SCISSOR,
}


def outcome(us: Pick, them: Pick) -> Outcome:
    """the outcome of a round from our side, derived from the score difference on the 3-cycle"""
    difference = us.score - them.score
    try:
        return _OUTCOME_BY_DIFFERENCE[difference]
    except KeyError:
        raise InvariantError(f"impossible score difference {difference} between {us} and {them}") from None


def counterpart(them: Pick, desired: Outcome) -> Pick:
    """the pick we must play against them to get the desired outcome"""
    return _COUNTERPARTS[(them, desired)]


@dataclass(frozen=True)
class Round:
    them: Pick
    us: Pick

    def outcome(self) -> Outcome:
        return outcome(self.us, self.them)

    def score(self) -> int:
        return self.us.score + self.outcome().points


@dataclass(frozen=True)
class StrategizedRound:
    them: Pick
    strategy: Strategy

    def score(self) -> int:
        return Round(them=self.them, us=counterpart(self.them, self.strategy)).score()


# --- grammar ---

pick = one_of(
    tag("A").value(Pick.ROCK),
    tag("B").value(Pick.PAPER),
    tag("C").value(Pick.SCISSOR),
    tag("X").value(Pick.ROCK),
    tag("Y").value(Pick.PAPER),
    tag("Z").value(Pick.SCISSOR),
).context("pick")

strategy = one_of(
    tag("X").value(Strategy.LOSE),
    tag("Y").value(Strategy.DRAW),
    tag("Z").value(Strategy.WIN),
).context("strategy")

round_ = separated_pair(pick, space(), pick).map(
    lambda picks: Round(them=picks[0], us=picks[1])).context("round")

strategized_round = separated_pair(pick, space(), strategy).map(
    lambda parts: StrategizedRound(them=parts[0], strategy=parts[1])).context("strategized_round")

game = terminated(separated_list1(newline(), round_), newline().optional()).context("game")
strategized_game = terminated(separated_list1(newline(), strategized_round), newline().optional()).context("strategized_game")


def parse_game(text: str) -> List[Round]:
    rounds = game.parse_all(text)
    logger.debug(f"parsed {len(rounds)} rounds")
    return rounds


def parse_strategized_game(text: str) -> List[StrategizedRound]:
    rounds = strategized_game.parse_all(text)
    logger.debug(f"parsed {len(rounds)} strategized rounds")
    return rounds


# --- solvers ---

def solve_part1(rounds: List[Round], config: Optional[PuzzleConfig] = None) -> int:
    return sum(r.score() for r in rounds)


def solve_part2(rounds: List[StrategizedRound], config: Optional[PuzzleConfig] = None) -> int:
    return sum(r.score() for r in rounds)
