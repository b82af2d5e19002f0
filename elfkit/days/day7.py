"""no space left on device: rebuild a directory tree from a shell transcript"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

import pandas as pd

from ..combinators import one_of, pair, preceded, separated_list1, separated_pair, terminated
from ..config import DEFAULT_CONFIG, PuzzleConfig
from ..errors import StructuralError
from ..factories import newline, space, tag, take_while1, unsigned

logger = logging.getLogger(__name__)

ROOT = 0


# --- log lines ---

@dataclass(frozen=True)
class ChangeDirectory:
    target: str


@dataclass(frozen=True)
class ListDirectory:
    pass


@dataclass(frozen=True)
class FileEntry:
    size: int
    name: str


@dataclass(frozen=True)
class DirectoryEntry:
    name: str


Command = Union[ChangeDirectory, ListDirectory]
Entry = Union[FileEntry, DirectoryEntry]
LogLine = Union[Command, Entry]


# --- arena-backed tree ---

@dataclass
class FsNode:
    name: str
    size: int
    is_dir: bool
    parent: Optional[int]
    children: List[int] = field(default_factory=list)


class Filesystem:
    """
    a rooted tree held in a flat list. nodes refer to their parent and children by index,
    so moving the cursor up never needs an owning back-reference.
    """

    def __init__(self):
        self.nodes: List[FsNode] = [FsNode("/", 0, True, None)]

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, index: int) -> FsNode:
        return self.nodes[index]

    def add_child(self, parent: int, name: str, size: int = 0, is_dir: bool = False) -> int:
        index = len(self.nodes)
        self.nodes.append(FsNode(name, size, is_dir, parent))
        self.nodes[parent].children.append(index)
        return index

    def find_child(self, parent: int, name: str) -> Optional[int]:
        for child in self.nodes[parent].children:
            if self.nodes[child].name == name:
                return child
        return None

    def parent_of(self, index: int) -> Optional[int]:
        return self.nodes[index].parent

    def is_directory(self, index: int) -> bool:
        """a node counts as a directory for the size queries when it has children"""
        return bool(self.nodes[index].children)

    def path_of(self, index: int) -> str:
        parts = []
        while index != ROOT:
            parts.append(self.nodes[index].name)
            index = self.nodes[index].parent
        return "/" + "/".join(reversed(parts))

    def traverse_pre_order(self, start: int = ROOT) -> Iterator[Tuple[int, int]]:
        """yield (index, depth) parent-first, children in insertion order"""
        stack = [(start, 0)]
        while stack:
            index, depth = stack.pop()
            yield index, depth
            for child in reversed(self.nodes[index].children):
                stack.append((child, depth + 1))

    def size_at(self, index: int = ROOT) -> int:
        """own size plus the cumulative size of every descendant"""
        node = self.nodes[index]
        return node.size + sum(self.size_at(child) for child in node.children)

    def directory_sizes(self) -> pd.Series:
        """
        cumulative size of every directory node, indexed by full path, in pre-order.
        one pre-order pass, then the sizes are folded bottom-up by walking it backwards.
        """
        order = [index for index, _ in self.traverse_pre_order()]
        totals = [node.size for node in self.nodes]
        # reversed pre-order visits every child before its parent
        for index in reversed(order):
            parent = self.nodes[index].parent
            if parent is not None:
                totals[parent] += totals[index]

        directories = [index for index in order if self.is_directory(index)]
        return pd.Series([totals[i] for i in directories],
                         index=[self.path_of(i) for i in directories],
                         dtype="int64", name="size")

    def render(self) -> str:
        """indented listing in the style of the puzzle text"""
        lines = []
        for index, depth in self.traverse_pre_order():
            node = self.node(index)
            detail = "dir" if node.is_dir else f"file, size={node.size}"
            lines.append(f"{'  ' * depth}- {node.name} ({detail})")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Filesystem(nodes={len(self.nodes)}, size={self.size_at()})"


def execute_log(lines: List[LogLine]) -> Filesystem:
    """replay the transcript, moving a cursor through the tree as it goes"""
    fs = Filesystem()
    cursor = ROOT

    for line in lines:
        if isinstance(line, ChangeDirectory):
            if line.target == "/":
                cursor = ROOT
            elif line.target == "..":
                parent = fs.parent_of(cursor)
                if parent is None:
                    raise StructuralError("cannot move above the root directory")
                cursor = parent
            else:
                child = fs.find_child(cursor, line.target)
                if child is None:
                    child = fs.add_child(cursor, line.target, is_dir=True)
                cursor = child
        elif isinstance(line, DirectoryEntry):
            if fs.find_child(cursor, line.name) is None:
                fs.add_child(cursor, line.name, is_dir=True)
        elif isinstance(line, FileEntry):
            # listing the same directory twice must not count its files twice
            if fs.find_child(cursor, line.name) is None:
                fs.add_child(cursor, line.name, size=line.size)

    logger.debug(f"replayed {len(lines)} log lines into {len(fs)} nodes")
    return fs


# --- grammar ---

path = take_while1(lambda char: char.isalnum() or char in "/.", "path").context("path")

cd = preceded(pair(tag("cd"), space()), path).map(ChangeDirectory).context("cd")
ls = tag("ls").value(ListDirectory()).context("ls")
command = preceded(terminated(tag("$"), space()), one_of(cd, ls)).context("command")

dir_entry = preceded(pair(tag("dir"), space()), path).map(DirectoryEntry).context("dir_entry")
file_entry = separated_pair(unsigned(), space(), path).map(lambda parts: FileEntry(*parts)).context("file")
entry = one_of(file_entry, dir_entry).context("entry")

log_line = one_of(command, entry).context("log_line")
transcript = terminated(separated_list1(newline(), log_line), newline().optional())


def parse_log(text: str) -> List[LogLine]:
    lines = transcript.parse_all(text)
    logger.debug(f"parsed {len(lines)} log lines")
    return lines


# --- solvers ---

def small_directories_total(fs: Filesystem, limit: int) -> int:
    sizes = fs.directory_sizes()
    return int(sizes[sizes <= limit].sum())


def smallest_deletion(fs: Filesystem, capacity: int, required: int) -> int:
    """size of the smallest directory whose removal leaves at least `required` free"""
    sizes = fs.directory_sizes()
    free = capacity - int(sizes.get("/", 0))
    needed = required - free
    candidates = sizes[sizes >= needed]
    if candidates.empty:
        raise StructuralError(f"no directory frees the {needed} bytes still needed")
    return int(candidates.min())


def solve_part1(lines: List[LogLine], config: Optional[PuzzleConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    fs = execute_log(lines)
    logger.debug(f"filesystem:\n{fs.render()}")
    return small_directories_total(fs, config.small_directory_limit)


def solve_part2(lines: List[LogLine], config: Optional[PuzzleConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    fs = execute_log(lines)
    logger.debug(f"filesystem:\n{fs.render()}")
    return smallest_deletion(fs, config.disk_capacity, config.required_free_space)
