"""Parser for RFC3339/ISO-8601 duration strings.

Accepted syntax (ASCII, case-sensitive):

    ["-"] "P" [nY] [nM] [nW] [nD] ["T" [nH] [nM] [nS]]

where each n is a run of digits and dots, e.g. ``P1Y2M3DT5H20M30.123S``.
Fields are optional but must appear in the order above, at most once each.
A leading "-" negates the whole duration.

Calendar units are converted with fixed average hour counts (see
``rfcduration.util``), so the result is a plain elapsed time that does not
depend on any calendar date.
"""

import logging
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Literal, TypeAlias

from rfcduration.duration import Duration
from rfcduration.errors import InvalidStringError, UnsupportedFormatError
from rfcduration.util import (
    HOUR,
    HOURS_PER_DAY,
    HOURS_PER_MONTH,
    HOURS_PER_WEEK,
    HOURS_PER_YEAR,
    MINUTE,
    SECOND,
)

logger = logging.getLogger(__name__)

Field: TypeAlias = Literal[
    "years", "months", "weeks", "days", "hours", "minutes", "seconds"
]
Section: TypeAlias = Literal["date", "time"]

# Grammar in field order: (field, designator, section)
_GRAMMAR: tuple[tuple[Field, str, Section], ...] = (
    ("years", "Y", "date"),
    ("months", "M", "date"),
    ("weeks", "W", "date"),
    ("days", "D", "date"),
    ("hours", "H", "time"),
    ("minutes", "M", "time"),
    ("seconds", "S", "time"),
)

_FIRST_TIME_FIELD = next(i for i, entry in enumerate(_GRAMMAR) if entry[2] == "time")

# Nanoseconds per one unit of each field
_FIELD_NANOS: dict[Field, Fraction] = {
    "years": HOURS_PER_YEAR * HOUR,
    "months": HOURS_PER_MONTH * HOUR,
    "weeks": HOURS_PER_WEEK * HOUR,
    "days": HOURS_PER_DAY * HOUR,
    "hours": Fraction(HOUR),
    "minutes": Fraction(MINUTE),
    "seconds": Fraction(SECOND),
}

_DEGENERATE = frozenset({"", "P", "PT"})
_NUMERAL_CHARS = frozenset("0123456789.")


def _scan(text: str, body: str, offset: int) -> list[tuple[Field, str]]:
    """Match ``body`` against the grammar and return its present fields.

    ``offset`` is the index of ``body`` inside ``text`` and is only used
    to report positions.
    """
    if not body.startswith("P"):
        raise UnsupportedFormatError(text, "Missing the leading 'P' designator.")

    fields: list[tuple[Field, str]] = []
    section: Section = "date"
    next_field = 0
    pos = 1

    while pos < len(body):
        if body[pos] == "T":
            if section == "time":
                raise UnsupportedFormatError(
                    text, f"Repeated 'T' separator at position {pos + offset}."
                )
            section = "time"
            next_field = max(next_field, _FIRST_TIME_FIELD)
            pos += 1
            continue

        end = pos
        while end < len(body) and body[end] in _NUMERAL_CHARS:
            end += 1
        if end == pos:
            raise UnsupportedFormatError(
                text,
                f"Expected a non-negative number at position {pos + offset}, "
                f"found {body[pos]!r}.",
            )
        if end == len(body):
            raise UnsupportedFormatError(
                text, f"Number {body[pos:end]!r} has no unit designator."
            )

        designator = body[end]
        index = next(
            (
                i
                for i in range(next_field, len(_GRAMMAR))
                if _GRAMMAR[i][1] == designator and _GRAMMAR[i][2] == section
            ),
            None,
        )
        if index is None:
            raise UnsupportedFormatError(
                text,
                f"Designator {designator!r} at position {end + offset} is out of "
                f"order, repeated, or not allowed in the {section} part.",
            )

        fields.append((_GRAMMAR[index][0], body[pos:end]))
        next_field = index + 1
        pos = end + 1

    return fields


def _field_nanos(text: str, field: Field, numeral: str, strict: bool) -> Fraction:
    # Decimal has no digit limit, unlike int(), so long numerals stay exact
    try:
        value = Fraction(Decimal(numeral))
    except InvalidOperation:
        if strict:
            raise UnsupportedFormatError(
                text, f"Malformed number {numeral!r} in the {field} field."
            ) from None
        logger.warning(
            "Ignoring malformed %s value %r in duration %r", field, numeral, text
        )
        return Fraction(0)
    return value * _FIELD_NANOS[field]


def parse(text: str, *, strict: bool = False) -> Duration:
    """Parse an RFC3339 duration string into a Duration.

    Args:
        text: Duration string such as ``"P1DT2H"`` or ``"-PT90S"``
        strict: Reject numerals that are not real numbers (``"1.2.3"``)
            instead of counting them as zero

    Raises:
        InvalidStringError: If the string is empty or nothing follows its
            'P' or 'T' marker (``""``, ``"P"``, ``"PT"``, ``"P1DT"``)
        UnsupportedFormatError: If the string does not match the grammar

    Example:
        >>> parse("PT1M65S").seconds()
        125.0
    """
    if not isinstance(text, str):
        raise UnsupportedFormatError(
            text, f"Expected a str, got {type(text).__name__!r}."
        )

    negative = text.startswith("-")
    body = text[1:] if negative else text
    if body in _DEGENERATE or text.endswith("T"):
        raise InvalidStringError(text)

    fields = _scan(text, body, offset=1 if negative else 0)

    total = sum(
        (_field_nanos(text, field, numeral, strict) for field, numeral in fields),
        Fraction(0),
    )
    nanoseconds = int(total)
    result = Duration(nanoseconds=-nanoseconds if negative else nanoseconds)
    logger.debug("Parsed duration %r as %s", text, result)
    return result
