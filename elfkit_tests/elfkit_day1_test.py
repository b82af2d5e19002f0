import suite
from elfkit import ParseError, StructuralError, PuzzleConfig
from elfkit.days import day1

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

SAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"


@test("parses blank-line separated payloads")
def test_parse_sample():
    groups = day1.parse_payloads(SAMPLE)
    assert_equal(groups, [[1000, 2000, 3000], [4000], [5000, 6000], [7000, 8000, 9000], [10000]], "payloads")


@test("the last number may end without a newline")
def test_parse_without_trailing_newline():
    assert_equal(day1.parse_payloads("1\n2\n\n3"), [[1, 2], [3]], "payloads")


@test("a single trailing blank line is tolerated")
def test_parse_trailing_blank_line():
    assert_equal(day1.parse_payloads("1\n\n2\n\n"), [[1], [2]], "payloads")


@test("sample answers")
def test_sample_answers():
    groups = day1.parse_payloads(SAMPLE)
    assert_equal(day1.solve_part1(groups), 24000, "part 1")
    assert_equal(day1.solve_part2(groups), 45000, "part 2")


@test("max and top-three totals for uneven groups")
def test_uneven_groups():
    groups = [[5, 4], [9], [1, 1, 1, 8]]
    assert_equal(day1.payload_totals(groups), [9, 9, 11], "group totals")
    assert_equal(day1.solve_part1(groups), 11, "max total")
    assert_equal(day1.solve_part2(groups), 29, "top three")


@test("totals do not depend on group order")
def test_order_independent():
    groups = [[1, 1, 1, 8], [9], [5, 4], [2]]
    assert_equal(day1.top_totals(groups, 3), [11, 9, 9], "largest first")
    assert_equal(day1.solve_part2(list(reversed(groups))), 29, "reversed input")


@test("fewer groups than the top count is a structural error")
def test_too_few_groups():
    assert_raises(StructuralError, day1.solve_part2, [[1], [2]])
    assert_equal(day1.solve_part2([[1], [2]], PuzzleConfig(top_n=2)), 3, "top_n from config")


@test("malformed numbers are parse errors")
def test_parse_errors():
    error = assert_raises(ParseError, day1.parse_payloads, "100\n2x0\n")
    assert_equal(error.failure.label, "calories", "failing rule")
    assert_raises(ParseError, day1.parse_payloads, "18446744073709551616\n")
    assert_raises(ParseError, day1.parse_payloads, "")


if __name__ == "__main__":
    suite.run(title="elfkit day 1 tests")
