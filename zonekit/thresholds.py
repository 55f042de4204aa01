"""Widening thresholds and their collection per loop head of a weak topological ordering."""

from __future__ import annotations

import bisect
import math
from typing import Hashable, Iterator, Union

from zonekit.debug import error
from zonekit.numbers import ZNumber
from zonekit.wto import Component, Wto, WtoCycle

Bound = Union[int, float]

_UINT_MAX = 2**32 - 1


def _as_bound(value: object) -> Bound:
    if isinstance(value, ZNumber):
        return int(value)
    if isinstance(value, bool):
        raise TypeError("a threshold must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isinf(value):
        return value
    raise TypeError(f"a threshold must be an integer or an infinity, not {value!r}")


def _format_bound(value: Bound) -> str:
    if value == math.inf:
        return "+oo"
    if value == -math.inf:
        return "-oo"
    return str(value)


class Thresholds:
    """A sorted set of bounds, holding -oo, 0 and +oo initially."""

    def __init__(self, size: int = _UINT_MAX) -> None:
        self._size = size
        self._values: list[Bound] = [-math.inf, 0, math.inf]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Bound]:
        return iter(self._values)

    def add(self, value: Bound | ZNumber) -> None:
        """Insert a bound while below capacity; a bound next to a neighbour replaces it."""
        if len(self._values) >= self._size:
            return
        v = _as_bound(value)
        if v in self._values:
            return
        ub = bisect.bisect_right(self._values, v)
        if v > 0:
            prev = ub - 1
            if prev != 0 and self._values[prev] + 1 == v:
                self._values[prev] = v
                return
        elif v < 0:
            if self._values[ub] - 1 == v:
                self._values[ub] = v
                return
        self._values.insert(ub, v)

    def __str__(self) -> str:
        return "{" + ",".join(_format_bound(b) for b in self._values) + "}"


class WtoThresholds:
    """Collects a set of thresholds for every cycle head of a weak topological ordering."""

    def __init__(self, wto: Wto, max_size: int) -> None:
        self._max_size = max_size
        self._by_head: dict[Hashable, Thresholds] = {}
        self._stack: list[Hashable] = []
        for component in wto:
            self.visit(component)

    def visit(self, component: Component) -> None:
        """Walk one component, creating thresholds for each cycle head met."""
        if isinstance(component, WtoCycle):
            head = component.head
            self._by_head.setdefault(head, Thresholds(self._max_size))
            self._stack.append(head)
            try:
                for inner in component:
                    self.visit(inner)
            finally:
                self._stack.pop()
            return
        if not self._stack:
            return
        if self._stack[-1] not in self._by_head:
            error("No head found while gathering thresholds")

    def __str__(self) -> str:
        try:
            heads = sorted(self._by_head)
        except TypeError:
            heads = list(self._by_head)
        return "".join(f"{head}={self._by_head[head]}\n" for head in heads)