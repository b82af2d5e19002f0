'''
.------..------..------..------..------..------.
|e.--. ||l.--. ||f.--. ||g.--. ||e.--. ||n.--. |
| (\/) || :/\: || :(): || :/\: || (\/) || :(): |
| :\/: || (__) || ()() || :\/: || :\/: || ()() |
| '--'e|| '--'l|| '--'f|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'`------'`------'
'''

import string
import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional, Tuple


class Generator:
    """seeded generator of random, well-formed puzzle inputs."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _int(self, low: int, high: int) -> int:
        # numpy's integers result converted to a native python int
        return int(self._rng.integers(low, high, endpoint=True))

    def _name(self) -> str:
        return self._fake.word().lower()

    # --- day 1 ---

    def payloads(self, count: int, max_items: int = 6, max_calories: int = 9000) -> Tuple[str, List[List[int]]]:
        groups = [[self._int(1, max_calories) for _ in range(self._int(1, max_items))] for _ in range(count)]
        text = "\n".join("".join(f"{c}\n" for c in group) for group in groups)
        return text, groups

    # --- day 2 ---

    def strategy_guide(self, count: int) -> str:
        lines = [f"{self._rng.choice(list('ABC'))} {self._rng.choice(list('XYZ'))}" for _ in range(count)]
        return "\n".join(lines) + "\n"

    # --- day 3 ---

    def rucksacks(self, count: int, half: int = 12) -> Tuple[str, List[str]]:
        """rucksacks whose two halves share exactly one known item kind"""
        lines, shared = [], []
        for _ in range(count):
            kinds = list(self._rng.choice(list(string.ascii_letters), size=2 * half - 1, replace=False))
            common = kinds.pop()
            first, second = kinds[:half - 1] + [common], kinds[half - 1:] + [common]
            self._rng.shuffle(first)
            self._rng.shuffle(second)
            lines.append("".join(first) + "".join(second))
            shared.append(common)
        return "\n".join(lines) + "\n", shared

    # --- day 4 ---

    def assignments(self, count: int, max_section: int = 99) -> str:
        lines = []
        for _ in range(count):
            a, b = sorted((self._int(1, max_section), self._int(1, max_section)))
            c, d = sorted((self._int(1, max_section), self._int(1, max_section)))
            lines.append(f"{a}-{b},{c}-{d}")
        return "\n".join(lines) + "\n"

    # --- day 5 ---

    def crate_diagram(self, stacks: int, max_height: int = 6) -> Tuple[str, List[List[str]]]:
        """a diagram and the stacks it describes, bottom crate first"""
        columns = [[self._rng.choice(list(string.ascii_uppercase)) for _ in range(self._int(1, max_height))]
                   for _ in range(stacks)]
        tallest = max((len(column) for column in columns), default=0)
        rows = []
        for level in reversed(range(tallest)):
            cells = [f"[{column[level]}]" if level < len(column) else "   " for column in columns]
            rows.append(" ".join(cells))
        index_row = " " + "   ".join(str(i + 1) for i in range(stacks)) + " "
        return "\n".join(rows + [index_row]) + "\n", columns

    def moves(self, columns: List[List[str]], count: int) -> str:
        """legal move lines for the given stacks, simulated one crate at a time"""
        stacks = [list(column) for column in columns]
        lines = []
        for _ in range(count):
            sources = [i for i, stack in enumerate(stacks) if stack]
            if not sources or len(stacks) < 2:
                break
            source = int(self._rng.choice(sources))
            target = int(self._rng.choice([i for i in range(len(stacks)) if i != source]))
            quantity = self._int(1, len(stacks[source]))
            for _ in range(quantity):
                stacks[target].append(stacks[source].pop())
            lines.append(f"move {quantity} from {source + 1} to {target + 1}")
        return "\n".join(lines) + "\n"

    # --- day 6 ---

    def datastream(self, length: int, alphabet: str = "abc") -> str:
        return "".join(self._rng.choice(list(alphabet), size=length))

    # --- day 7 ---

    def terminal_log(self, max_depth: int = 3, max_entries: int = 4) -> Tuple[str, int]:
        """a shell transcript exploring a random tree, and the total size of its files"""
        lines = ["$ cd /"]
        total = self._explore(lines, 0, max_depth, max_entries)
        return "\n".join(lines) + "\n", total

    def _explore(self, lines: List[str], depth: int, max_depth: int, max_entries: int) -> int:
        files: Dict[str, int] = {}
        directories: List[str] = []
        for _ in range(self._int(1, max_entries)):
            name = self._name()
            if name in files or name in directories:
                continue
            if depth < max_depth and self._rng.random() < 0.4:
                directories.append(name)
            else:
                files[name] = self._int(1, 300_000)

        lines.append("$ ls")
        lines.extend(f"dir {name}" for name in directories)
        lines.extend(f"{size} {name}.{self._rng.choice(['txt', 'dat', 'log'])}" for name, size in files.items())

        total = sum(files.values())
        for name in directories:
            lines.append(f"$ cd {name}")
            total += self._explore(lines, depth + 1, max_depth, max_entries)
            lines.append("$ cd ..")
        return total

    # --- day 8 ---

    def forest(self, height: int, width: int) -> Tuple[str, np.ndarray]:
        grid = self._rng.integers(0, 9, size=(height, width), endpoint=True)
        text = "\n".join("".join(str(h) for h in row) for row in grid) + "\n"
        return text, grid


def from_seed(seed: Optional[int] = None) -> Generator:
    return Generator(seed)
