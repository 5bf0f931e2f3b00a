"""Errors raised while parsing duration strings.

Both kinds derive from DurationError (a ValueError) so callers can catch
either one specifically or both at once.
"""


class DurationError(ValueError):
    def __init__(self, message: str, text: object):
        super().__init__(message)
        self.text: object = text


class InvalidStringError(DurationError):
    """The input is empty or stops right after a structural marker."""

    def __init__(self, text: str):
        super().__init__(
            f"Invalid duration string: {text!r}\n"
            f"The string has no fields after its 'P' or 'T' marker.\n"
            f"Examples:\n"
            f"  'P1D'      # one day\n"
            f"  'PT1H30M'  # ninety minutes",
            text,
        )


class UnsupportedFormatError(DurationError):
    """The input does not match the P[nY][nM][nW][nD][T[nH][nM][nS]] grammar."""

    def __init__(self, text: object, reason: str):
        super().__init__(
            f"Unsupported duration string format: {text!r}\n"
            f"{reason}\n"
            f"Hint: Fields must be non-negative and appear in the order\n"
            f"      Y, M, W, D, then T, then H, M, S. Example: 'P1Y2M3DT4H5M6.5S'",
            text,
        )
