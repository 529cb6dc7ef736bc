"""Diagnostic output, fatal-error handling and merge sorting."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

__all__ = ["debug_print", "set_panic", "panic", "mgsort"]

T = TypeVar("T")

PanicHandler = Callable[[str], Any]


def debug_print(message: str) -> None:
    """Write a diagnostic message to standard error as is."""
    sys.stderr.write(message)
    sys.stderr.flush()


def _default_panic(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()
    if os.environ.get("EF_DUMPCORE"):
        os.abort()
    else:
        sys.exit(1)


_panic_handler: PanicHandler = _default_panic


def set_panic(handler: PanicHandler | None) -> None:
    """Install the handler called on fatal errors; None restores the default."""
    global _panic_handler
    _panic_handler = handler if handler is not None else _default_panic


def panic(message: str) -> None:
    """Report a fatal error through the installed handler."""
    _panic_handler(message)


def _merge(
    data: MutableSequence[T], i: int, j: int, k: int, compare: Callable[[T, T], int]
) -> None:
    left = list(data[i : j + 1])
    right = list(data[j + 1 : k + 1])
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if compare(left[li], right[ri]) < 0:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    data[i : k + 1] = merged


def _mgsort(
    data: MutableSequence[T], i: int, k: int, compare: Callable[[T, T], int]
) -> None:
    if i < k:
        j = (i + k - 1) // 2
        _mgsort(data, i, j, compare)
        _mgsort(data, j + 1, k, compare)
        _merge(data, i, j, k, compare)


def mgsort(data: MutableSequence[T], compare: Callable[[T, T], int]) -> None:
    """Merge-sort ``data`` in place by a three-way ``compare`` function.

    On ties the element from the right half is taken first, so the sort
    is not stable.
    """
    _mgsort(data, 0, len(data) - 1, compare)