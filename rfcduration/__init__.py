from .duration import ZERO, Duration
from .errors import DurationError, InvalidStringError, UnsupportedFormatError
from .parser import parse
from .util import HOURS_PER_DAY, HOURS_PER_MONTH, HOURS_PER_WEEK, HOURS_PER_YEAR

__all__ = [
    "parse",
    "Duration",
    "ZERO",
    "DurationError",
    "InvalidStringError",
    "UnsupportedFormatError",
    "HOURS_PER_DAY",
    "HOURS_PER_WEEK",
    "HOURS_PER_MONTH",
    "HOURS_PER_YEAR",
]
