# argtrex

Building blocks for command-line option handling: options that take string
values, options whose values must match a regular expression, and the compact
regular-expression engine behind them.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Modules

- `argtrex.errors`: `ErrorCode` and `OptionError`.
- `argtrex.options`: `StrOption`, `RexOption` and the helpers `str0`, `str1`,
  `strn`, `rex0`, `rex1`, `rexn`.
- `argtrex.trex`: the regex engine, `TRex`, `TRexMatch`, `TRexError`, `ICASE`
  and `compile`.
- `argtrex.utils`: `mgsort`, `panic`, `set_panic` and `debug_print`.

## String options

`str0`, `str1` and `strn` create a `StrOption` that may occur at most once,
exactly once, or between `mincount` and `maxcount` times. A `maxcount` below
`mincount` is raised to `mincount`; the default datatype is `<string>`.

```python
from argtrex.options import strn

names = strn("n", "name", "<name>", 0, 3, "names to greet")
names.scan("alice")
names.scan("bob")
names.check()          # raises OptionError if fewer than mincount were seen
print(names.values)    # ['alice', 'bob']
print(names.count)     # 2
```

`scan(None)` counts an occurrence without recording a value. `reset()` clears
the recorded values and the count.

When the option occurs more than `maxcount` times, `scan` raises `OptionError`
with code `ErrorCode.MAXCOUNT`; `check` raises it with `ErrorCode.MINCOUNT`
when the option occurred too few times. The exception carries `code` and
`argval`. `error_message(code, argval, progname)` returns the line a program
would print, for example `myprog: missing option -n <name>\n`.

## Regular-expression options

`rex0`, `rex1` and `rexn` create a `RexOption` whose values must match the
pattern in full. A value that does not match raises `OptionError` with code
`ErrorCode.REGNOMATCH`. The datatype defaults to the pattern itself.

```python
from argtrex.options import rex1
from argtrex.errors import OptionError

cmd = rex1(None, None, "start|stop", "<command>", 0, "the command to run")
cmd.scan("start")
cmd.reset()
try:
    cmd.scan("restart")
except OptionError as exc:
    print(cmd.error_message(exc.code, exc.argval, "myprog"), end="")
```

The pattern is compiled when the option is created. A malformed pattern is
reported on standard error at that point, and `scan` then raises `TRexError`
when a value is given. A pattern of `None` raises `ValueError`.

## The regex engine

`argtrex.trex.compile(pattern, flags)` (or `TRex(pattern, flags)`) returns a
compiled pattern. It supports literals, `.`, `^`, `$`, bracket classes `[...]`
and `[^...]` with ranges, the class escapes `\a \w \s \d \x \c \p` and their
upper-case negations plus `\l` and `\u`, the escapes `\n \t \r \f \v`, word
boundaries `\b` and `\B`, groups `(...)` and `(?:...)`, alternation `|`, and the
quantifiers `*`, `+`, `?`, `{n}`, `{n,}` and `{n,m}`. Pass `ICASE` as the flags
to match literal characters and ranges regardless of case. Character classes
follow ASCII rules.

Repetition is greedy but stops as soon as what follows can match, and nothing
is retried afterwards, so some patterns match less than a backtracking engine
would.

```python
from argtrex.trex import compile, ICASE

rex = compile("(ab)+c", 0)
rex.match("ababc")            # True: the whole text matches
rex.search("xxababcyy")       # (start, stop) offsets of the first match, or None
rex.search_range(text, b, e)  # the same, limited to text[b:e]
rex.subexp_count()            # capturing groups, the whole pattern included
rex.subexp(1)                 # TRexMatch(begin, length, text) from the last match

compile("abc", ICASE).match("ABC")  # True
```

A malformed pattern raises `TRexError`, a subclass of `ValueError`.
`subexp` raises `IndexError` for a group number that does not exist.

## Utilities

- `mgsort(data, compare)` merge-sorts a mutable sequence in place with a
  three-way compare function. On ties the element from the right half comes
  first, so the sort is not stable.
- `panic(message)` reports a fatal error through the installed handler. The
  default handler writes the message to standard error and exits with status 1,
  or aborts if the `EF_DUMPCORE` environment variable is set and not empty.
  `set_panic(handler)` installs another handler; `set_panic(None)` restores the
  default.
- `debug_print(message)` writes the message to standard error as is.

## What this package does not do

It has no parser that walks a full argument list and dispatches words to
options, no help or usage printer, and no option types other than strings and
pattern-checked strings (no integers, doubles, dates, files or flags). Options
are driven one value at a time through `scan`, `check` and `reset`. There is no
command-line program.