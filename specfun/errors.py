"""Error conditions reported by the special functions."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Kinds of numerical failure a function can report."""

    UNKNOWN = 0
    DOMAIN = 1
    SING = 2
    OVERFLOW = 3
    UNDERFLOW = 4
    TLOSS = 5
    PLOSS = 6


_MESSAGES = {
    ErrorCode.UNKNOWN: "unknown",
    ErrorCode.DOMAIN: "domain",
    ErrorCode.SING: "singularity",
    ErrorCode.OVERFLOW: "overflow",
    ErrorCode.UNDERFLOW: "underflow",
    ErrorCode.TLOSS: "total loss of precision",
    ErrorCode.PLOSS: "partial loss of precision",
}


class MathError(ArithmeticError):
    """A numerical failure inside a named function.

    Codes outside the known range are reported as ``ErrorCode.UNKNOWN``.
    """

    def __init__(self, function, code):
        try:
            normalized = ErrorCode(code)
        except ValueError:
            normalized = ErrorCode.UNKNOWN
        self.function = function
        self.code = normalized
        self.description = _MESSAGES[normalized]
        super().__init__(f"{function} {self.description} error")


class DomainError(MathError, ValueError):
    """The argument lies outside the function's domain."""


class SingularityError(MathError, ZeroDivisionError):
    """The function has a singularity at the argument."""


class OverflowRangeError(MathError, OverflowError):
    """The result is too large to represent."""


class UnderflowRangeError(MathError):
    """The result is too small to represent."""


class PrecisionLossError(MathError):
    """The result has lost some or all of its precision."""