import suite
from elfkit import ParseError, StructuralError, PuzzleConfig
from elfkit.days import day7
from elfkit.days.day7 import ChangeDirectory, DirectoryEntry, FileEntry, ListDirectory

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

SAMPLE = """$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


@test("parses commands and listing entries")
def test_parse_lines():
    lines = day7.parse_log("$ cd /\n$ ls\ndir a\n14848514 b.txt\n$ cd ..")
    assert_equal(lines, [ChangeDirectory("/"), ListDirectory(), DirectoryEntry("a"),
                         FileEntry(14848514, "b.txt"), ChangeDirectory("..")], "log lines")


@test("directory sizes are cumulative and keyed by path")
def test_directory_sizes():
    fs = day7.execute_log(day7.parse_log(SAMPLE))
    sizes = fs.directory_sizes()
    assert_equal(list(sizes.index), ["/", "/a", "/a/e", "/d"], "pre-order paths")
    assert_equal(int(sizes["/a/e"]), 584, "e")
    assert_equal(int(sizes["/a"]), 94853, "a")
    assert_equal(int(sizes["/d"]), 24933642, "d")
    assert_equal(int(sizes["/"]), 48381165, "root")
    assert_equal(fs.size_at(), 48381165, "recursive size agrees")


@test("sample answers")
def test_sample():
    lines = day7.parse_log(SAMPLE)
    assert_equal(day7.solve_part1(lines), 95437, "part 1")
    assert_equal(day7.solve_part2(lines), 24933642, "part 2")


@test("render lists the tree parent first")
def test_render():
    fs = day7.execute_log(day7.parse_log(SAMPLE))
    lines = fs.render().split("\n")
    assert_equal(lines[:4], ["- / (dir)", "  - a (dir)", "    - e (dir)", "      - i (file, size=584)"],
                 "head of the listing")
    assert_that("    - h.lst (file, size=62596)" in lines, "nested file")
    assert_equal(lines[-1], "    - k (file, size=7214296)", "last entry")
    assert_equal(len(lines), len(fs), "one line per node")


@test("pre-order traversal reports depth")
def test_traversal_depths():
    fs = day7.execute_log(day7.parse_log(SAMPLE))
    depths = {fs.path_of(index): depth for index, depth in fs.traverse_pre_order()}
    assert_equal((depths["/"], depths["/a"], depths["/a/e/i"]), (0, 1, 3), "depths")


@test("moving above the root is a structural error")
def test_cd_above_root():
    assert_raises(StructuralError, day7.execute_log, day7.parse_log("$ cd /\n$ cd ..\n"))


@test("cd / returns to the root from anywhere")
def test_cd_root_resets():
    fs = day7.execute_log(day7.parse_log("$ cd a\n$ cd b\n$ cd /\n$ ls\n5 top\n"))
    assert_equal(fs.path_of(fs.find_child(0, "top")), "/top", "file lands in root")


@test("listing a directory twice does not count its files twice")
def test_double_listing():
    fs = day7.execute_log(day7.parse_log("$ cd /\n$ ls\n10 x\ndir y\n$ ls\n10 x\ndir y\n"))
    assert_equal(int(fs.directory_sizes()["/"]), 10, "root size")
    assert_equal(len(fs), 3, "no duplicate nodes")


@test("cd into a listed directory reuses its node")
def test_cd_reuses_listed_directory():
    fs = day7.execute_log(day7.parse_log("$ ls\ndir a\n$ cd a\n$ ls\n7 f\n"))
    root = fs.node(0)
    assert_equal((root.name, root.is_dir, len(root.children)), ("/", True, 1), "root with a single child")
    assert_equal(int(fs.directory_sizes()["/a"]), 7, "file under a")


@test("when enough space is already free the smallest directory is chosen")
def test_enough_space_free():
    lines = day7.parse_log(SAMPLE)
    config = PuzzleConfig(disk_capacity=100_000_000, required_free_space=30_000_000)
    assert_equal(day7.solve_part2(lines, config), 584, "smallest directory")


@test("no directory to delete is a structural error")
def test_no_candidate():
    lines = day7.parse_log("$ cd /\n$ ls\n")
    assert_equal(day7.solve_part1(lines), 0, "nothing small")
    assert_raises(StructuralError, day7.solve_part2, lines)


@test("unknown commands are parse errors")
def test_parse_errors():
    assert_raises(ParseError, day7.parse_log, "$ rm -rf /\n")
    error = assert_raises(ParseError, day7.parse_log, "$ ls\nabc def\n")
    assert_equal(error.failure.line, 2, "line of the bad entry")


if __name__ == "__main__":
    suite.run(title="elfkit day 7 tests")
