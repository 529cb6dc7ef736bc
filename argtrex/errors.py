"""Error codes reported while scanning and checking command-line options."""

from __future__ import annotations

import enum

__all__ = ["ErrorCode", "OptionError"]


class ErrorCode(enum.IntEnum):
    """Reasons an option can be rejected."""

    MINCOUNT = 1
    MAXCOUNT = 2
    BADINT = 3
    OVERFLOW = 4
    BADDOUBLE = 5
    BADDATE = 6
    REGNOMATCH = 7

    @property
    def description(self) -> str:
        """Short human-readable text for the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.MINCOUNT: "missing option",
    ErrorCode.MAXCOUNT: "excess option",
    ErrorCode.BADINT: "invalid integer value",
    ErrorCode.OVERFLOW: "integer overflow",
    ErrorCode.BADDOUBLE: "invalid double value",
    ErrorCode.BADDATE: "invalid date value",
    ErrorCode.REGNOMATCH: "illegal value",
}


class OptionError(Exception):
    """Raised when an option value or occurrence count is not acceptable."""

    def __init__(self, code: ErrorCode | int, argval: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.argval = argval
        text = self.code.description
        if argval:
            text = f"{text} {argval!r}"
        super().__init__(text)