from . import day1, day2, day3, day4, day5, day6, day7, day8

__all__ = ["day1", "day2", "day3", "day4", "day5", "day6", "day7", "day8"]
