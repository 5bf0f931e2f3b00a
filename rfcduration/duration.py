import math
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Literal, TypeAlias

from typing_extensions import override

from rfcduration.util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    WEEK,
)

Unit: TypeAlias = Literal[
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
]

Number: TypeAlias = int | float | Decimal | Fraction

SCALES: dict[Unit, int] = {
    "nanoseconds": NANOSECOND,
    "microseconds": MICROSECOND,
    "milliseconds": MILLISECOND,
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}


def _exact(value: Number) -> Fraction:
    # Floats go through their shortest repr so 0.3 means 0.3, not 0.29999...
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


@dataclass(frozen=True, kw_only=True, order=True)
class Duration:
    """Signed elapsed time held as a whole number of nanoseconds."""

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise TypeError(
                f"Duration nanoseconds must be an int.\n"
                f"Got {type(self.nanoseconds).__name__!r}: {self.nanoseconds!r}\n"
                f"Hint: Use Duration.of(seconds=1.5) for fractional values"
            )

    @classmethod
    def of(
        cls,
        *,
        weeks: Number = 0,
        days: Number = 0,
        hours: Number = 0,
        minutes: Number = 0,
        seconds: Number = 0,
        milliseconds: Number = 0,
        microseconds: Number = 0,
        nanoseconds: Number = 0,
    ) -> "Duration":
        """Build a duration from unit amounts.

        The amounts are summed exactly and the result is truncated toward
        zero to whole nanoseconds.

        Example:
            >>> Duration.of(hours=1, minutes=30).seconds()
            5400.0
        """
        parts: dict[Unit, Number] = {
            "weeks": weeks,
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds,
            "milliseconds": milliseconds,
            "microseconds": microseconds,
            "nanoseconds": nanoseconds,
        }
        total = sum(
            (_exact(value) * SCALES[unit] for unit, value in parts.items() if value),
            Fraction(0),
        )
        return cls(nanoseconds=int(total))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls(nanoseconds=(delta // timedelta(microseconds=1)) * MICROSECOND)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, dropping any sub-microsecond remainder."""
        micros = abs(self.nanoseconds) // MICROSECOND
        return timedelta(microseconds=-micros if self.nanoseconds < 0 else micros)

    def total(self, unit: Unit) -> float:
        """Return the value in ``unit``, or +/-inf past the float range."""
        try:
            return self.nanoseconds / SCALES[unit]
        except OverflowError:
            return math.copysign(math.inf, self.nanoseconds)

    def seconds(self) -> float:
        return self.total("seconds")

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self.nanoseconds + other.nanoseconds)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self.nanoseconds - other.nanoseconds)

    def __neg__(self) -> "Duration":
        return Duration(nanoseconds=-self.nanoseconds)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return Duration(nanoseconds=abs(self.nanoseconds))

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    @override
    def __str__(self) -> str:
        """Human-friendly string showing the value in seconds."""
        whole, frac = divmod(abs(self.nanoseconds), SECOND)
        sign = "-" if self.nanoseconds < 0 else ""
        if frac:
            return f"Duration({sign}{whole}.{frac:09d}".rstrip("0") + "s)"
        return f"Duration({sign}{whole}s)"


ZERO = Duration()
