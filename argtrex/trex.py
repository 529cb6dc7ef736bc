"""A small backtracking-free regular expression engine.

Supported syntax: literals, ``.``, ``^``, ``$``, ``|``, capturing ``(...)``
and non-capturing ``(?:...)`` groups, bracket classes with ranges and
negation, the quantifiers ``*``, ``+``, ``?``, ``{n}``, ``{n,}`` and
``{n,m}``, the escapes ``\\n \\t \\r \\f \\v``, the word-boundary escapes
``\\b`` and ``\\B`` and the character classes ``\\a \\w \\s \\d \\x \\c \\p``
(with upper-case negations) plus ``\\l`` and ``\\u``.

Repetition is greedy but stops as soon as what follows it can match, and
nothing is retried afterwards.  Character classification follows the ASCII
rules of the C locale.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Any

__all__ = ["ICASE", "TRexError", "TRexMatch", "TRex", "compile"]

ICASE = 1
"""Flag that makes literal characters and ranges match regardless of case."""

_UNBOUNDED = 0xFFFF
_NUL = "\0"

_ESCAPES = {"v": "\v", "n": "\n", "t": "\t", "r": "\r", "f": "\f"}
_CLASS_LETTERS = frozenset("aAwWsSdDxXcCpPlu")

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_HEXDIGITS = frozenset(string.hexdigits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_ALPHA = _LOWER | _UPPER
_ALNUM = _ALPHA | _DIGITS
_PUNCT = frozenset(string.punctuation)


def _iscntrl(c: str) -> bool:
    return ord(c) < 0x20 or ord(c) == 0x7F


_CCLASS_TESTS = {
    "a": lambda c: c in _ALPHA,
    "A": lambda c: c not in _ALPHA,
    "w": lambda c: c in _ALNUM or c == "_",
    "W": lambda c: c not in _ALNUM and c != "_",
    "s": lambda c: c in _SPACE,
    "S": lambda c: c not in _SPACE,
    "d": lambda c: c in _DIGITS,
    "D": lambda c: c not in _DIGITS,
    "x": lambda c: c in _HEXDIGITS,
    "X": lambda c: c not in _HEXDIGITS,
    "c": _iscntrl,
    "C": lambda c: not _iscntrl(c),
    "p": lambda c: c in _PUNCT,
    "P": lambda c: c not in _PUNCT,
    "l": lambda c: c in _LOWER,
    "u": lambda c: c in _UPPER,
}


def _match_cclass(cclass: str, c: str) -> bool:
    test = _CCLASS_TESTS.get(cclass)
    return bool(test and test(c))


def _isprint(c: str) -> bool:
    return c != _NUL and c.isprintable()


def _lower(c: str) -> str:
    return c.lower() if c in _UPPER else c


def _upper(c: str) -> str:
    return c.upper() if c in _LOWER else c


class TRexError(ValueError):
    """Raised when a pattern cannot be compiled."""


@dataclass(frozen=True)
class TRexMatch:
    """A captured subexpression: start offset (None if unset), length and text."""

    begin: int | None
    length: int
    text: str


class _Op(enum.Enum):
    GREEDY = enum.auto()
    OR = enum.auto()
    EXPR = enum.auto()
    NOCAPEXPR = enum.auto()
    DOT = enum.auto()
    CLASS = enum.auto()
    CCLASS = enum.auto()
    NCLASS = enum.auto()
    RANGE = enum.auto()
    EOL = enum.auto()
    BOL = enum.auto()
    WB = enum.auto()


@dataclass
class _Node:
    type: Any  # an _Op, or a one-character string for a literal
    left: Any = None
    right: Any = None
    next: int | None = None


class TRex:
    """A compiled pattern."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = pattern
        self.flags = flags
        self._nodes: list[_Node] = []
        self._nsubexpr = 0
        self._p = 0
        self._first = self._new_node(_Op.EXPR)
        self._nodes[self._first].left = self._list()
        if self._peek() != _NUL:
            raise TRexError("unexpected character")
        self._matches: list[list[Any]] = [[None, 0] for _ in range(self._nsubexpr)]
        self._text = ""
        self._bol = 0
        self._eol = 0
        self._currsubexp = 0

    # ------------------------------------------------------------------
    # compilation

    def _peek(self) -> str:
        return self.pattern[self._p] if self._p < len(self.pattern) else _NUL

    def _new_node(self, kind: Any) -> int:
        node = _Node(kind)
        if kind is _Op.EXPR:
            node.right = self._nsubexpr
            self._nsubexpr += 1
        self._nodes.append(node)
        return len(self._nodes) - 1

    def _expect(self, ch: str) -> None:
        if self._peek() != ch:
            raise TRexError("expected paren")
        self._p += 1

    def _escapechar(self) -> str:
        c = self._peek()
        if c == "\\":
            self._p += 1
            c = self._peek()
            self._p += 1
            return _ESCAPES.get(c, c)
        if not _isprint(c):
            raise TRexError("letter expected")
        self._p += 1
        return c

    def _charnode(self, isclass: bool) -> int:
        c = self._peek()
        if c == "\\":
            self._p += 1
            c = self._peek()
            self._p += 1
            if c in _ESCAPES:
                return self._new_node(_ESCAPES[c])
            if c in _CLASS_LETTERS:
                node = self._new_node(_Op.CCLASS)
                self._nodes[node].left = c
                return node
            if c in ("b", "B") and not isclass:
                node = self._new_node(_Op.WB)
                self._nodes[node].left = c
                return node
            return self._new_node(c)
        if not _isprint(c):
            raise TRexError("letter expected")
        self._p += 1
        return self._new_node(c)

    def _class(self) -> int:
        if self._peek() == "^":
            ret = self._new_node(_Op.NCLASS)
            self._p += 1
        else:
            ret = self._new_node(_Op.CLASS)
        if self._peek() == "]":
            raise TRexError("empty class")
        chain = ret
        first: int | None = None
        while self._peek() != "]":
            if self._peek() == "-" and first is not None:
                self._p += 1
                rng = self._new_node(_Op.RANGE)
                if first > ord(self._peek()):
                    raise TRexError("invalid range")
                if self._nodes[first].type is _Op.CCLASS:
                    raise TRexError("cannot use character classes in ranges")
                self._nodes[rng].left = self._nodes[first].type
                self._nodes[rng].right = self._escapechar()
                self._nodes[chain].next = rng
                chain = rng
                first = None
            else:
                if first is not None:
                    self._nodes[chain].next = first
                    chain = first
                first = self._charnode(True)
        if first is not None:
            self._nodes[chain].next = first
        head = self._nodes[ret]
        head.left = head.next
        head.next = None
        return ret

    def _parse_number(self) -> int:
        value = int(self._peek())
        self._p += 1
        positions = 10
        while self._peek() in _DIGITS:
            value = value * 10 + int(self._peek())
            self._p += 1
            if positions == 1_000_000_000:
                raise TRexError("overflow in numeric constant")
            positions *= 10
        return value

    def _atom(self) -> int:
        c = self._peek()
        if c == "(":
            self._p += 1
            if self._peek() == "?":
                self._p += 1
                self._expect(":")
                expr = self._new_node(_Op.NOCAPEXPR)
            else:
                expr = self._new_node(_Op.EXPR)
            self._nodes[expr].left = self._list()
            self._expect(")")
            return expr
        if c == "[":
            self._p += 1
            ret = self._class()
            self._expect("]")
            return ret
        if c == "$":
            self._p += 1
            return self._new_node(_Op.EOL)
        if c == ".":
            self._p += 1
            return self._new_node(_Op.DOT)
        return self._charnode(False)

    def _quantified(self) -> int:
        ret = self._atom()
        c = self._peek()
        if c == "*":
            bounds = (0, _UNBOUNDED)
            self._p += 1
        elif c == "+":
            bounds = (1, _UNBOUNDED)
            self._p += 1
        elif c == "?":
            bounds = (0, 1)
            self._p += 1
        elif c == "{":
            self._p += 1
            if self._peek() not in _DIGITS:
                raise TRexError("number expected")
            p0 = self._parse_number() & 0xFFFF
            if self._peek() == "}":
                p1 = p0
                self._p += 1
            elif self._peek() == ",":
                self._p += 1
                p1 = _UNBOUNDED
                if self._peek() in _DIGITS:
                    p1 = self._parse_number() & 0xFFFF
                self._expect("}")
            else:
                raise TRexError(", or } expected")
            bounds = (p0, p1)
        else:
            return ret
        node = self._new_node(_Op.GREEDY)
        self._nodes[node].left = ret
        self._nodes[node].right = bounds
        return node

    def _element(self) -> int:
        head = prev = self._quantified()
        while self._peek() not in ("|", ")", "*", "+", _NUL):
            nxt = self._quantified()
            self._nodes[prev].next = nxt
            prev = nxt
        return head

    def _list(self) -> int:
        ret: int | None = None
        if self._peek() == "^":
            self._p += 1
            ret = self._new_node(_Op.BOL)
        element = self._element()
        if ret is not None:
            self._nodes[ret].next = element
        else:
            ret = element
        if self._peek() == "|":
            self._p += 1
            alt = self._new_node(_Op.OR)
            self._nodes[alt].left = ret
            self._nodes[alt].right = self._list()
            ret = alt
        return ret

    # ------------------------------------------------------------------
    # matching

    def _char(self, pos: int) -> str:
        return self._text[pos] if 0 <= pos < len(self._text) else _NUL

    def _match_class(self, idx: int, c: str) -> bool:
        icase = bool(self.flags & ICASE)
        while True:
            node = self._nodes[idx]
            if node.type is _Op.RANGE:
                if icase:
                    if _upper(node.left) <= c <= _upper(node.right):
                        return True
                    if _lower(node.left) <= c <= _lower(node.right):
                        return True
                elif node.left <= c <= node.right:
                    return True
            elif node.type is _Op.CCLASS:
                if _match_cclass(node.left, c):
                    return True
            elif icase:
                if c == _lower(node.type) or c == _upper(node.type):
                    return True
            elif c == node.type:
                return True
            if node.next is None:
                return False
            idx = node.next

    def _match_greedy(self, node: _Node, pos: int, nxt: int | None) -> int | None:
        p0, p1 = node.right
        stop_idx = node.next if node.next is not None else nxt
        nmatches = 0
        s: int | None = pos
        good = pos
        while nmatches == _UNBOUNDED or nmatches < p1:
            s = self._match_node(node.left, s, stop_idx)
            if s is None:
                break
            nmatches += 1
            good = s
            if stop_idx is not None:
                stop = self._nodes[stop_idx]
                if stop.type is not _Op.GREEDY or stop.right[0] != 0:
                    if stop.next is not None:
                        gnext = stop.next
                    elif nxt is not None and self._nodes[nxt].next is not None:
                        gnext = self._nodes[nxt].next
                    else:
                        gnext = None
                    if self._match_node(stop_idx, s, gnext) is not None:
                        if p0 == p1 == nmatches:
                            break
                        if nmatches >= p0 and p1 == _UNBOUNDED:
                            break
                        if p0 <= nmatches <= p1:
                            break
            if s >= self._eol:
                break
        if p0 == p1 == nmatches:
            return good
        if nmatches >= p0 and p1 == _UNBOUNDED:
            return good
        if p0 <= nmatches <= p1:
            return good
        return None

    def _match_sequence(self, idx: int, pos: int) -> int | None:
        cur: int | None = pos
        while True:
            cur = self._match_node(idx, cur, None)
            if cur is None:
                return None
            following = self._nodes[idx].next
            if following is None:
                return cur
            idx = following

    def _match_group(self, node: _Node, pos: int, nxt: int | None) -> int | None:
        capture: int | None = None
        if node.type is _Op.EXPR and node.right == self._currsubexp:
            capture = self._currsubexp
            self._matches[capture][0] = pos
            self._currsubexp += 1
        idx = node.left
        cur: int | None = pos
        while True:
            child = self._nodes[idx]
            subnext = child.next if child.next is not None else nxt
            cur = self._match_node(idx, cur, subnext)
            if cur is None:
                if capture is not None:
                    self._matches[capture] = [None, 0]
                return None
            if child.next is None:
                break
            idx = child.next
        if capture is not None:
            self._matches[capture][1] = cur - self._matches[capture][0]
        return cur

    def _at_word_boundary(self, pos: int) -> bool:
        c = self._char(pos)
        after = self._char(pos + 1)
        return (
            (pos == self._bol and c not in _SPACE)
            or (pos == self._eol and self._char(pos - 1) not in _SPACE)
            or (c not in _SPACE and after in _SPACE)
            or (c in _SPACE and after not in _SPACE)
        )

    def _match_node(self, idx: int, pos: int, nxt: int | None) -> int | None:
        node = self._nodes[idx]
        kind = node.type
        if kind is _Op.GREEDY:
            return self._match_greedy(node, pos, nxt)
        if kind is _Op.OR:
            for branch in (node.left, node.right):
                end = self._match_sequence(branch, pos)
                if end is not None:
                    return end
            return None
        if kind is _Op.EXPR or kind is _Op.NOCAPEXPR:
            return self._match_group(node, pos, nxt)
        if kind is _Op.WB:
            wanted = node.left == "b"
            return pos if self._at_word_boundary(pos) == wanted else None
        if kind is _Op.BOL:
            return pos if pos == self._bol else None
        if kind is _Op.EOL:
            return pos if pos == self._eol else None
        if kind is _Op.DOT:
            return pos + 1
        c = self._char(pos)
        if kind is _Op.CLASS or kind is _Op.NCLASS:
            hit = self._match_class(node.left, c)
            return pos + 1 if hit == (kind is _Op.CLASS) else None
        if kind is _Op.CCLASS:
            return pos + 1 if _match_cclass(node.left, c) else None
        if self.flags & ICASE:
            if c != _lower(kind) and c != _upper(kind):
                return None
        elif c != kind:
            return None
        return pos + 1

    # ------------------------------------------------------------------
    # public interface

    def match(self, text: str) -> bool:
        """Return True if the whole of ``text`` matches the pattern."""
        self._text = text
        self._bol = 0
        self._eol = len(text)
        self._currsubexp = 0
        end = self._match_node(self._first, 0, None)
        return end is not None and end == self._eol

    def search_range(self, text: str, begin: int, end: int) -> tuple[int, int] | None:
        """Find the first match within ``text[begin:end]``.

        Returns the (start, stop) offsets of the match, or None.
        """
        if begin >= end:
            return None
        self._text = text
        self._bol = begin
        self._eol = end
        start = begin
        while True:
            self._currsubexp = 0
            stop = self._match_sequence(self._first, start)
            if stop is not None:
                return start, stop
            start += 1
            if start == end:
                return None

    def search(self, text: str) -> tuple[int, int] | None:
        """Find the first match anywhere in ``text``."""
        return self.search_range(text, 0, len(text))

    def subexp_count(self) -> int:
        """Number of capturing subexpressions, the whole pattern included."""
        return self._nsubexpr

    def subexp(self, n: int) -> TRexMatch:
        """Return capture ``n`` from the last match; 0 is the whole pattern."""
        if n < 0 or n >= self._nsubexpr:
            raise IndexError(f"no subexpression {n}")
        begin, length = self._matches[n]
        text = "" if begin is None else self._text[begin : begin + length]
        return TRexMatch(begin, length, text)


def compile(pattern: str, flags: int = 0) -> TRex:  # noqa: A001
    """Compile ``pattern``; raises TRexError if it is malformed."""
    return TRex(pattern, flags)