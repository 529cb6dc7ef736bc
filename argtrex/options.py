"""String and regular-expression command-line option types."""

from __future__ import annotations

from argtrex.errors import ErrorCode, OptionError
from argtrex.trex import TRex, TRexError
from argtrex.utils import debug_print

__all__ = [
    "StrOption",
    "RexOption",
    "str0",
    "str1",
    "strn",
    "rex0",
    "rex1",
    "rexn",
]


def _format_option(
    shortopts: str | None, longopts: str | None, datatype: str | None
) -> str:
    """Render an option as ``-x <type>``, ``--name=<type>`` or ``<type>``."""
    datatype = datatype or ""
    if shortopts:
        text = f"-{shortopts[0]}"
        return f"{text} {datatype}" if datatype else text
    if longopts:
        text = "--" + longopts.split(",", 1)[0]
        return f"{text}={datatype}" if datatype else text
    return datatype


class StrOption:
    """An option that takes arbitrary string values."""

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        datatype: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        glossary: str | None = None,
    ) -> None:
        self.shortopts = shortopts
        self.longopts = longopts
        self.datatype = datatype if datatype else "<string>"
        self.glossary = glossary
        self.mincount = mincount
        self.maxcount = max(maxcount, mincount)
        self.sval: list[str] = [""] * self.maxcount
        self.count = 0

    @property
    def values(self) -> list[str]:
        """The values recorded so far, in the order given."""
        return self.sval[: self.count]

    def reset(self) -> None:
        """Forget every value recorded so far."""
        for i in range(self.count):
            self.sval[i] = ""
        self.count = 0

    def scan(self, argval: str | None) -> None:
        """Record one occurrence; ``None`` counts it without a value."""
        if self.count == self.maxcount:
            raise OptionError(ErrorCode.MAXCOUNT, argval)
        if argval is not None:
            self.sval[self.count] = argval
        self.count += 1

    def check(self) -> None:
        """Raise OptionError if the option occurred too few times."""
        if self.count < self.mincount:
            raise OptionError(ErrorCode.MINCOUNT)

    def error_message(self, code: ErrorCode | int, argval: str | None, progname: str) -> str:
        """Text describing an error this option reported."""
        argval = argval or ""
        message = f"{progname}: "
        if code == ErrorCode.MINCOUNT:
            message += "missing option "
            message += _format_option(self.shortopts, self.longopts, self.datatype) + "\n"
        elif code == ErrorCode.MAXCOUNT:
            message += "excess option "
            message += _format_option(self.shortopts, self.longopts, argval) + "\n"
        return message


class RexOption:
    """An option whose values must match a regular expression."""

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        pattern: str,
        datatype: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        flags: int = 0,
        glossary: str | None = None,
    ) -> None:
        if pattern is None:
            raise ValueError('illegal regular expression pattern "(NULL)"')
        self.shortopts = shortopts
        self.longopts = longopts
        self.pattern = pattern
        self.flags = flags
        self.datatype = datatype if datatype else pattern
        self.glossary = glossary
        self.mincount = mincount
        self.maxcount = max(maxcount, mincount)
        self.sval: list[str] = [""] * self.maxcount
        self.count = 0
        # Compile now so a malformed pattern is reported at table build time.
        self._regex: TRex | None
        try:
            self._regex = TRex(pattern, flags)
        except TRexError as exc:
            self._regex = None
            debug_print(f'argtable: {exc} "{pattern}"\n')
            debug_print("argtable: Bad argument table.\n")

    @property
    def values(self) -> list[str]:
        """The values recorded so far, in the order given."""
        return self.sval[: self.count]

    def reset(self) -> None:
        """Reset the occurrence count."""
        self.count = 0

    def scan(self, argval: str | None) -> None:
        """Record one occurrence if its value matches the pattern.

        Raises TRexError if the pattern itself is malformed.
        """
        if self.count == self.maxcount:
            raise OptionError(ErrorCode.MAXCOUNT, argval)
        if argval is None:
            self.count += 1
            return
        regex = self._regex if self._regex is not None else TRex(self.pattern, self.flags)
        if not regex.match(argval):
            raise OptionError(ErrorCode.REGNOMATCH, argval)
        self.sval[self.count] = argval
        self.count += 1

    def check(self) -> None:
        """Raise OptionError if the option occurred too few times."""
        if self.count < self.mincount:
            raise OptionError(ErrorCode.MINCOUNT)

    def error_message(self, code: ErrorCode | int, argval: str | None, progname: str) -> str:
        """Text describing an error this option reported."""
        argval = argval or ""
        message = f"{progname}: "
        if code == ErrorCode.MINCOUNT:
            message += "missing option "
            message += _format_option(self.shortopts, self.longopts, self.datatype) + "\n"
        elif code == ErrorCode.MAXCOUNT:
            message += "excess option "
            message += _format_option(self.shortopts, self.longopts, argval) + "\n"
        elif code == ErrorCode.REGNOMATCH:
            message += "illegal value  "
            message += _format_option(self.shortopts, self.longopts, argval) + "\n"
        return message


def str0(shortopts, longopts, datatype=None, glossary=None) -> StrOption:
    """An optional string option that may occur at most once."""
    return StrOption(shortopts, longopts, datatype, 0, 1, glossary)


def str1(shortopts, longopts, datatype=None, glossary=None) -> StrOption:
    """A string option that must occur exactly once."""
    return StrOption(shortopts, longopts, datatype, 1, 1, glossary)


def strn(shortopts, longopts, datatype, mincount, maxcount, glossary=None) -> StrOption:
    """A string option that may occur between mincount and maxcount times."""
    return StrOption(shortopts, longopts, datatype, mincount, maxcount, glossary)


def rex0(shortopts, longopts, pattern, datatype=None, flags=0, glossary=None) -> RexOption:
    """An optional pattern-checked option that may occur at most once."""
    return RexOption(shortopts, longopts, pattern, datatype, 0, 1, flags, glossary)


def rex1(shortopts, longopts, pattern, datatype=None, flags=0, glossary=None) -> RexOption:
    """A pattern-checked option that must occur exactly once."""
    return RexOption(shortopts, longopts, pattern, datatype, 1, 1, flags, glossary)


def rexn(
    shortopts, longopts, pattern, datatype, mincount, maxcount, flags=0, glossary=None
) -> RexOption:
    """A pattern-checked option that may occur between mincount and maxcount times."""
    return RexOption(shortopts, longopts, pattern, datatype, mincount, maxcount, flags, glossary)