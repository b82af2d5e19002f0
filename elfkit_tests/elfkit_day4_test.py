from itertools import product

import suite
from elfkit import ParseError
from elfkit.days import day4
from elfkit.days.day4 import Range

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

SAMPLE = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"


@test("parses range pairs")
def test_parse():
    pairs = day4.parse_assignments("2-4,6-8\n10-20,15-15")
    assert_equal(pairs, [(Range(2, 4), Range(6, 8)), (Range(10, 20), Range(15, 15))], "pairs")


@test("disjoint ranges neither contain nor overlap")
def test_disjoint():
    pairs = day4.parse_assignments("2-4,6-8")
    assert_equal((day4.solve_part1(pairs), day4.solve_part2(pairs)), (0, 0), "counts")


@test("sample answers")
def test_sample():
    pairs = day4.parse_assignments(SAMPLE)
    assert_equal(day4.solve_part1(pairs), 2, "part 1")
    assert_equal(day4.solve_part2(pairs), 4, "part 2")


@test("equal ranges contain each other")
def test_equal_ranges():
    a = Range(3, 5)
    assert_that(a.contains(Range(3, 5)) and day4.fully_contains(a, Range(3, 5)), "mutual containment")


@test("containment implies overlap, overlap is symmetric")
def test_containment_and_overlap():
    ranges = [Range(low, high) for low, high in product(range(1, 6), repeat=2) if low <= high]
    for a, b in product(ranges, repeat=2):
        if day4.fully_contains(a, b):
            assert_that(a.overlaps(b), f"{a} contains {b} but does not overlap it")
        assert_equal(a.overlaps(b), b.overlaps(a), f"overlap symmetry for {a}, {b}")
    # overlap without containment
    assert_that(Range(1, 3).overlaps(Range(3, 5)) and not day4.fully_contains(Range(1, 3), Range(3, 5)),
                "touching ranges overlap without containment")


@test("malformed ranges are parse errors")
def test_parse_errors():
    error = assert_raises(ParseError, day4.parse_assignments, "2-4;6-8\n")
    assert_equal(error.failure.position, 3, "points at the bad separator")
    assert_raises(ParseError, day4.parse_assignments, "2-4\n")


if __name__ == "__main__":
    suite.run(title="elfkit day 4 tests")
