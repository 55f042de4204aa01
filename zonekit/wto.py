"""Weak topological ordering of a control-flow graph (Bourdoncle, 1993).

For the graph

        4 --> 5 <-> 6
        ^ \\________ |
        |          vv
        3 <-------- 7
        ^           |
        |           v
  1 --> 2 --------> 8

the ordering is ``1 2 (3 4 (5 6) 7) 8``. A single vertex is a plain label and
a parenthesised group is a :class:`WtoCycle` whose first element is its head.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, Iterator, Mapping, Optional, Union

_DONE = sys.maxsize


class WtoCycle:
    """A nested component of the ordering; iteration yields its head first."""

    def __init__(self, containing_cycle: Optional[WtoCycle] = None) -> None:
        self.containing_cycle = containing_cycle
        # Stored in reverse order: the head is appended last.
        self._components: list[Component] = []

    @property
    def head(self) -> Hashable:
        """The vertex at the head of this cycle."""
        if not self._components:
            raise ValueError("cycle has no components yet")
        return self._components[-1]

    def __iter__(self) -> Iterator[Component]:
        return reversed(self._components)

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self) + ")"

    def __repr__(self) -> str:
        return f"WtoCycle{self}"


Component = Union[Hashable, WtoCycle]


class _Task(Enum):
    PUSH_SUCCESSORS = 0
    START_VISIT = 1
    CONTINUE_VISIT = 2


@dataclass
class _VertexData:
    dfn: int = 0
    head_dfn: int = 0
    cycle: Optional[WtoCycle] = None


_TaskEntry = tuple[_Task, Hashable, list, Optional[WtoCycle]]


class Wto:
    """Weak topological ordering of the vertices reachable from ``entry``.

    ``successors`` maps each label to its successor labels, in order.
    """

    def __init__(self, successors: Mapping[Hashable, Iterable[Hashable]], entry: Hashable) -> None:
        self._succs: dict[Hashable, list[Hashable]] = {
            label: list(succs) for label, succs in successors.items()
        }
        for succs in list(self._succs.values()):
            for s in succs:
                self._succs.setdefault(s, [])
        self._succs.setdefault(entry, [])

        self._data: dict[Hashable, _VertexData] = {label: _VertexData() for label in self._succs}
        self._num = 0
        self._stack: list[Hashable] = []
        self._components: list[Component] = []
        self._containing: dict[Hashable, Optional[WtoCycle]] = {}
        self._nesting: dict[Hashable, tuple[Hashable, ...]] = {}

        tasks: list[_TaskEntry] = [(_Task.PUSH_SUCCESSORS, entry, self._components, None)]
        while tasks:
            kind, vertex, partition, cycle = tasks.pop()
            if kind is _Task.PUSH_SUCCESSORS:
                self._push_successors(tasks, vertex, partition, cycle)
            elif kind is _Task.START_VISIT:
                self._start_visit(tasks, vertex, partition, cycle)
            else:
                self._continue_visit(vertex, partition, cycle)

    def _push_successors(
        self, tasks: list[_TaskEntry], vertex: Hashable, partition: list, cycle: Optional[WtoCycle]
    ) -> None:
        data = self._data[vertex]
        if data.dfn != 0:
            return
        self._num += 1
        data.dfn = self._num
        self._stack.append(vertex)
        tasks.append((_Task.START_VISIT, vertex, partition, cycle))
        for succ in reversed(self._succs[vertex]):
            if self._data[succ].dfn == 0:
                tasks.append((_Task.PUSH_SUCCESSORS, succ, partition, cycle))

    def _start_visit(
        self, tasks: list[_TaskEntry], vertex: Hashable, partition: list, containing: Optional[WtoCycle]
    ) -> None:
        vertex_data = self._data[vertex]
        head_dfn = vertex_data.dfn
        loop = False
        for succ in self._succs[vertex]:
            data = self._data[succ]
            if data.head_dfn != 0 and data.dfn != _DONE:
                min_dfn = data.head_dfn
            else:
                min_dfn = data.dfn
            if min_dfn <= head_dfn:
                head_dfn = min_dfn
                loop = True

        if head_dfn == vertex_data.dfn:
            vertex_data.dfn = _DONE
            element = self._stack.pop()
            if loop:
                while element != vertex:
                    self._data[element].dfn = 0
                    self._data[element].head_dfn = 0
                    element = self._stack.pop()
                vertex_data.head_dfn = head_dfn

                cycle = WtoCycle(containing)
                vertex_data.cycle = cycle
                tasks.append((_Task.CONTINUE_VISIT, vertex, partition, cycle))
                for succ in reversed(self._succs[vertex]):
                    if self._data[succ].dfn == 0:
                        tasks.append((_Task.PUSH_SUCCESSORS, succ, cycle._components, cycle))
                return
            partition.append(vertex)
            self._containing.setdefault(vertex, containing)
        vertex_data.head_dfn = head_dfn

    def _continue_visit(self, vertex: Hashable, partition: list, cycle: Optional[WtoCycle]) -> None:
        assert cycle is not None
        cycle._components.append(vertex)
        partition.append(cycle)
        self._containing.setdefault(vertex, cycle)

    def __iter__(self) -> Iterator[Component]:
        """Top-level components in order."""
        return reversed(self._components)

    def dfn(self, label: Hashable) -> int:
        """The depth-first number left on ``label``; 0 if it was never reached."""
        return self._data[label].dfn

    def head(self, label: Hashable) -> Optional[Hashable]:
        """Head of the innermost component containing ``label``, or None at top level.

        For the head of a cycle, the head of the enclosing cycle is returned.
        """
        cycle = self._containing.get(label)
        if cycle is None:
            return None
        first = cycle.head
        if first != label:
            return first
        parent = cycle.containing_cycle
        if parent is None:
            return None
        return parent.head

    def nesting(self, label: Hashable) -> tuple[Hashable, ...]:
        """Heads of the components containing ``label``, innermost first."""
        cached = self._nesting.get(label)
        if cached is not None:
            return cached
        heads: list[Hashable] = []
        h = self.head(label)
        while h is not None:
            heads.append(h)
            h = self.head(h)
        result = tuple(heads)
        self._nesting[label] = result
        return result

    def __str__(self) -> str:
        return " ".join(str(c) for c in self)