"""supply stacks: replay crate moves over a columnar stack diagram"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..combinators import delimited, one_of, preceded, separated_list1, sequence, terminated
from ..config import DEFAULT_CONFIG, PuzzleConfig
from ..errors import StructuralError
from ..factories import letters, newline, space, tag, unsigned

logger = logging.getLogger(__name__)

Crate = str
Stack = List[Crate]


class Action(Enum):
    MOVE = "move"


class MoveMode(Enum):
    ONE_AT_A_TIME = "one_at_a_time"  # reverses the moved crates
    BLOCK = "block"                  # keeps their order


@dataclass(frozen=True)
class Instruction:
    action: Action
    quantity: int
    source: int  # 1-indexed
    target: int  # 1-indexed


class Storage:
    """an ordered row of stacks. the last crate of each list is the top of that stack."""

    def __init__(self, stacks: List[Stack]):
        self.stacks = stacks

    @classmethod
    def from_rows(cls, rows: List[List[Optional[Crate]]], indices: List[int]) -> 'Storage':
        """build stacks from diagram rows listed top to bottom"""
        stacks: List[Stack] = [[] for _ in indices]
        for row in reversed(rows):
            if len(row) > len(stacks):
                raise StructuralError(f"diagram row has {len(row)} columns but only {len(stacks)} stacks are named")
            for column, crate in enumerate(row):
                if crate is not None:
                    stacks[column].append(crate)
        return cls(stacks)

    def copy(self) -> 'Storage':
        return Storage([list(stack) for stack in self.stacks])

    def _stack(self, number: int) -> Stack:
        if not 1 <= number <= len(self.stacks):
            raise StructuralError(f"stack {number} does not exist (have {len(self.stacks)})")
        return self.stacks[number - 1]

    def apply(self, instruction: Instruction, mode: MoveMode, strict: bool = False) -> None:
        """apply one instruction in place"""
        source = self._stack(instruction.source)
        target = self._stack(instruction.target)

        available = min(instruction.quantity, len(source))
        if available < instruction.quantity:
            message = (f"cannot move {instruction.quantity} crates from stack {instruction.source}, "
                       f"it holds {len(source)}")
            if strict:
                raise StructuralError(message)
            logger.warning(f"{message}; skipping the missing crates")

        if available == 0:
            return
        if mode is MoveMode.ONE_AT_A_TIME:
            for _ in range(available):
                target.append(source.pop())
        else:
            moved = source[-available:]
            del source[-available:]
            target.extend(moved)

    def tops(self) -> str:
        """top crate label of every non-empty stack, in stack order"""
        return "".join(stack[-1] for stack in self.stacks if stack)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Storage) and self.stacks == other.stacks

    def __repr__(self) -> str:
        return f"Storage(stacks={len(self.stacks)}, crates={sum(len(s) for s in self.stacks)})"


def simulate(storage: Storage, instructions: Iterable[Instruction], mode: MoveMode,
             strict: bool = False) -> Storage:
    """replay instructions in order on a copy of storage"""
    result = storage.copy()
    for instruction in instructions:
        result.apply(instruction, mode, strict)
    return result


# --- grammar ---

crate = delimited(tag("["), letters(), tag("]")).context("crate")
slot = one_of(tag("   ").value(None), crate).context("slot")
storage_line = separated_list1(tag(" "), slot).context("storage_line")
index_row = delimited(tag(" "), separated_list1(tag("   "), unsigned()), tag(" ").optional()).context("index_row")

storage = sequence(
    terminated(separated_list1(newline(), storage_line), newline()),
    terminated(index_row, newline()),
).map(lambda parts: Storage.from_rows(parts[0], parts[1])).context("storage")

action = tag("move").value(Action.MOVE).context("action")
instruction = sequence(
    terminated(action, space()),
    unsigned(),
    preceded(delimited(space(), tag("from"), space()), unsigned()),
    preceded(delimited(space(), tag("to"), space()), unsigned()),
).map(lambda parts: Instruction(*parts)).context("instruction")

procedure = sequence(
    terminated(storage, newline()),
    terminated(separated_list1(newline(), instruction), newline().optional()),
).context("procedure")


def parse_procedure(text: str) -> Tuple[Storage, List[Instruction]]:
    parsed_storage, instructions = procedure.parse_all(text)
    logger.debug(f"parsed {len(parsed_storage.stacks)} stacks and {len(instructions)} instructions")
    return parsed_storage, instructions


# --- solvers ---

def solve_part1(procedure_input: Tuple[Storage, List[Instruction]], config: Optional[PuzzleConfig] = None) -> str:
    config = config or DEFAULT_CONFIG
    initial, instructions = procedure_input
    return simulate(initial, instructions, MoveMode.ONE_AT_A_TIME, config.strict_moves).tops()


def solve_part2(procedure_input: Tuple[Storage, List[Instruction]], config: Optional[PuzzleConfig] = None) -> str:
    config = config or DEFAULT_CONFIG
    initial, instructions = procedure_input
    return simulate(initial, instructions, MoveMode.BLOCK, config.strict_moves).tops()
