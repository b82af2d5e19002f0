import suite
from elfkit import ParseError, StructuralError
from elfkit.days import day8
from elfkit.days.day8 import Direction, Forest, Position

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

SAMPLE = "30373\n25512\n65332\n33549\n35390\n"


@test("parses a rectangular digit grid")
def test_parse():
    forest = day8.parse_forest(SAMPLE)
    assert_equal((forest.height, forest.width), (5, 5), "shape")
    assert_equal(forest.tree(Position(2, 1)), 5, "height at (2, 1)")
    assert_equal(forest.tree(Position(4, 3)), 9, "height at (4, 3)")


@test("scan walks outward from the neighbour")
def test_scan():
    forest = day8.parse_forest(SAMPLE)
    assert_equal(list(forest.scan(Position(2, 3), Direction.UP)), [3, 5, 3], "up")
    assert_equal(list(forest.scan(Position(2, 3), Direction.LEFT)), [3, 3], "left")
    assert_equal(list(forest.scan(Position(2, 3), Direction.RIGHT)), [4, 9], "right")
    assert_equal(list(forest.scan(Position(2, 4), Direction.DOWN)), [], "down from the edge")


@test("sample answers")
def test_sample():
    forest = day8.parse_forest(SAMPLE)
    assert_equal(day8.solve_part1(forest), 21, "part 1")
    assert_equal(day8.solve_part2(forest), 8, "part 2")


@test("viewing distance of the worked positions")
def test_viewing_distance():
    forest = day8.parse_forest(SAMPLE)
    assert_equal(forest.viewing_distance(Position(2, 1)), 4, "(2, 1)")
    assert_equal(forest.viewing_distance(Position(2, 3)), 8, "(2, 3)")


@test("edge trees are always visible and see nothing in one direction")
def test_edges():
    forest = day8.parse_forest(SAMPLE)
    for position in forest.positions():
        if forest.is_edge(position):
            assert_that(forest.is_visible(position), f"{position} should be visible")
            assert_equal(forest.viewing_distance(position), 0, f"distance at {position}")


@test("visibility depends on a clear line to some edge")
def test_monotonic_rows():
    rising = Forest.from_rows([[9, 9, 9, 9, 9], [1, 2, 3, 4, 9], [9, 9, 9, 9, 9]])
    assert_equal(rising.visible_count(), 15, "every interior tree seen from the left")
    falling = Forest.from_rows([[9, 9, 9, 9, 9], [4, 3, 2, 1, 9], [9, 9, 9, 9, 9]])
    assert_equal(falling.visible_count(), 12, "only the edges")


@test("a single row forest is all edge")
def test_single_row():
    forest = day8.parse_forest("12321")
    assert_equal(day8.solve_part1(forest), 5, "all visible")
    assert_equal(day8.solve_part2(forest), 0, "no tree sees in every direction")


@test("the grid is read-only")
def test_read_only():
    forest = day8.parse_forest(SAMPLE)
    assert_raises(ValueError, forest.heights.__setitem__, (0, 0), 1)


@test("ragged rows are structural errors, non-digits are parse errors")
def test_errors():
    assert_raises(StructuralError, day8.parse_forest, "123\n45\n")
    assert_raises(StructuralError, Forest, [])
    error = assert_raises(ParseError, day8.parse_forest, "123\n4a6\n")
    assert_equal((error.failure.line, error.failure.column), (2, 2), "position of the bad height")


if __name__ == "__main__":
    suite.run(title="elfkit day 8 tests")
