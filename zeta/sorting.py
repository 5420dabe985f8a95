"""Ordering policy for directory entries.

``compare_entries`` answers "does ``a`` order before ``b``" for one
``SortContext``. Time ordering is newest first without ``reverse``, the
opposite direction from every other method.
"""

from __future__ import annotations

import enum
import functools
import os
from collections.abc import Iterable
from dataclasses import dataclass

from .entries import Entry


class SortMethod(enum.Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"
    EXTENSION = "extension"


SORT_METHOD_NAMES = tuple(method.value for method in SortMethod)


def parse_sort_method(value: object, default: SortMethod = SortMethod.NAME) -> SortMethod:
    """Return the ``SortMethod`` named by ``value``, or ``default`` when unknown."""
    if not isinstance(value, str):
        return default
    try:
        return SortMethod(value.strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True)
class SortContext:
    method: SortMethod = SortMethod.NAME
    dirs_first: bool = True
    reverse: bool = False


def _name_key(entry: Entry) -> bytes:
    return os.fsencode(entry.name)


def _method_before(method: SortMethod, a: Entry, b: Entry) -> bool:
    if method is SortMethod.SIZE:
        return a.size < b.size
    if method is SortMethod.TIME:
        return a.modified_time > b.modified_time
    if method is SortMethod.EXTENSION:
        if not a.extension and b.extension:
            return True
        if a.extension and not b.extension:
            return False
        if a.extension != b.extension:
            return os.fsencode(a.extension) < os.fsencode(b.extension)
    return _name_key(a) < _name_key(b)


def _orders_before(context: SortContext, a: Entry, b: Entry) -> bool:
    if context.dirs_first and a.is_dir != b.is_dir:
        return a.is_dir
    return _method_before(context.method, a, b)


def compare_entries(context: SortContext, a: Entry, b: Entry) -> bool:
    """Return whether ``a`` orders before ``b`` under ``context``.

    ``reverse`` flips the whole decision, directory grouping included. It is
    applied by swapping the operands, so entries that tie stay tied and the
    result is still a strict weak ordering.
    """
    if context.reverse:
        return _orders_before(context, b, a)
    return _orders_before(context, a, b)


def sort_entries(entries: Iterable[Entry], context: SortContext) -> list[Entry]:
    """Return ``entries`` in ``context`` order; ties keep their input order."""

    def cmp(a: Entry, b: Entry) -> int:
        if compare_entries(context, a, b):
            return -1
        if compare_entries(context, b, a):
            return 1
        return 0

    return sorted(entries, key=functools.cmp_to_key(cmp))


__all__ = [
    "SortMethod",
    "SORT_METHOD_NAMES",
    "SortContext",
    "parse_sort_method",
    "compare_entries",
    "sort_entries",
]
