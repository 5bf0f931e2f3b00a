"""Unit constants for rfcduration.

Base time unit constants represent durations in nanoseconds.
Calendar-relative units use fixed average hour counts and are kept as
exact rationals so parsed values never pick up binary float error.
"""

from fractions import Fraction

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

# Average Gregorian approximations, not tied to any calendar date
HOURS_PER_DAY = Fraction(24)
HOURS_PER_WEEK = Fraction(168)
HOURS_PER_MONTH = Fraction("730.4841667")
HOURS_PER_YEAR = Fraction("8765.81")
