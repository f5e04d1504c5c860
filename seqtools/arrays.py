"""Order-preserving sequence helpers.

Every helper returns a new list (or dict) and leaves its arguments
untouched. Equality in :func:`uniq` and :func:`without` is SameValueZero:
values of different types never compare equal (``True`` is not ``1``),
and NaN equals NaN. Containers compare element-wise under the same
rule, so ``[1]`` and ``[True]`` are different values.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Hashable, Iterable, Sequence

_NAN = object()


def compact(values: Iterable[int]) -> list[int]:
    """Return the non-zero elements of *values*, in order.

    Only integer zero is dropped. Other falsey values are out of scope.
    """
    return [v for v in values if v != 0]


def drop(values: Sequence[Any], size: int = 1) -> list[Any]:
    """Return *values* without its first *size* elements."""
    if size < 0:
        raise ValueError(f"drop size must be non-negative, got {size}")
    return list(values[size:])


def _key(value: Any) -> tuple[type, Hashable] | None:
    """SameValueZero lookup key, or None if *value* is unhashable."""
    if isinstance(value, float) and math.isnan(value):
        return (float, _NAN)
    if isinstance(value, (tuple, frozenset)):
        inner = [_key(v) for v in value]
        if any(k is None for k in inner):
            return None
        return (type(value), tuple(inner) if isinstance(value, tuple) else frozenset(inner))
    try:
        hash(value)
    except TypeError:
        return None
    return (type(value), value)


def _same_value_zero(a: Any, b: Any) -> bool:
    """Typed equality, applied element-wise inside lists, tuples and dicts."""
    if type(a) is not type(b):
        return False
    if isinstance(a, float) and math.isnan(a):
        return math.isnan(b)
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(map(_same_value_zero, a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(_same_value_zero(v, b[k]) for k, v in a.items())
    return a == b


class _Membership:
    """Set-like container using SameValueZero; unhashables kept in a list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._keys: set[tuple[type, Hashable]] = set()
        self._unhashable: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, value: Any) -> None:
        key = _key(value)
        if key is None:
            self._unhashable.append(value)
        else:
            self._keys.add(key)

    def __contains__(self, value: Any) -> bool:
        key = _key(value)
        if key is None:
            return any(_same_value_zero(value, u) for u in self._unhashable)
        return key in self._keys


def uniq(values: Iterable[Any]) -> list[Any]:
    """Return the first occurrence of each element, in order.

    >>> uniq([False, False, True, 1, 1])
    [False, True, 1]
    """
    seen = _Membership()
    result = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        result.append(v)
    return result


def without(values: Iterable[Any], *excluded: Any) -> list[Any]:
    """Return elements of *values* not listed in *excluded*."""
    banned = _Membership(excluded)
    return [v for v in values if v not in banned]


def filter_by(values: Iterable[Any], predicate: Callable[[Any], Any]) -> list[Any]:
    return [v for v in values if predicate(v)]


def map_by(values: Iterable[Any], func: Callable[[Any], Any]) -> list[Any]:
    return [func(v) for v in values]


def find(values: Iterable[Any], predicate: Callable[[Any], Any]) -> Any:
    """Return the first element *predicate* accepts, or None."""
    for v in values:
        if predicate(v):
            return v
    return None


def find_last(values: Sequence[Any], predicate: Callable[[Any], Any]) -> Any:
    """Like :func:`find`, scanning from the right."""
    return find(reversed(values), predicate)


def assign(target: dict[Any, Any], source: dict[Any, Any]) -> dict[Any, Any]:
    """Return a copy of *target* with values overridden from *source*.

    Keys that only exist in *source* are not added.
    """
    return {key: source[key] if key in source else val for key, val in target.items()}
