"""Read-mostly views of a graph: permuted, with one vertex hidden, or reversed."""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Sequence

from zonekit.numbers import ZNumber
from zonekit.safeint import SafeInt64
from zonekit.sparse_graph import Edge

Weight = SafeInt64 | ZNumber | int


class GraphLike(Protocol):
    """The read interface shared by graphs and graph views."""

    def elem(self, s: int, d: int) -> bool: ...

    def lookup(self, s: int, d: int) -> SafeInt64 | None: ...

    def edge_val(self, s: int, d: int) -> SafeInt64: ...

    def size(self) -> int: ...

    def verts(self) -> Iterable[int]: ...

    def succs(self, v: int) -> Iterable[int]: ...

    def preds(self, v: int) -> Iterable[int]: ...

    def e_succs(self, v: int) -> Iterable[Edge]: ...

    def e_preds(self, v: int) -> Iterable[Edge]: ...


class MutableGraphLike(GraphLike, Protocol):
    def add_edge(self, s: int, w: Weight, d: int) -> None: ...

    def set_edge(self, s: int, w: Weight, d: int) -> None: ...

    def update_edge(self, s: int, w: Weight, d: int) -> None: ...

    def clear_edges(self) -> None: ...


class GraphPerm:
    """A graph seen through a possibly partial renaming of its vertices.

    View vertex ``i`` stands for vertex ``perm[i]`` of the underlying graph;
    ``-1`` marks a view vertex with no counterpart. The entries of ``perm``
    other than ``-1`` must be distinct.
    """

    def __init__(self, perm: Sequence[int], g: GraphLike) -> None:
        self.g = g
        self.perm = list(perm)
        self.inv = [-1] * g.size()
        for vi, p in enumerate(self.perm):
            if p == -1:
                continue
            if self.inv[p] != -1:
                raise ValueError(f"vertex {p} appears twice in the permutation")
            self.inv[p] = vi

    def _mapped(self, v: int) -> int | None:
        p = self.perm[v]
        if p < 0 or p >= self.g.size():
            return None
        return p

    def elem(self, x: int, y: int) -> bool:
        px, py = self._mapped(x), self._mapped(y)
        if px is None or py is None:
            return False
        return self.g.elem(px, py)

    def lookup(self, x: int, y: int) -> SafeInt64 | None:
        px, py = self._mapped(x), self._mapped(y)
        if px is None or py is None:
            return None
        return self.g.lookup(px, py)

    def edge_val(self, x: int, y: int) -> SafeInt64:
        """Weight of x -> y; the edge must exist."""
        return self.g.edge_val(self.perm[x], self.perm[y])

    def size(self) -> int:
        return len(self.perm)

    def verts(self) -> Iterator[int]:
        return iter(range(len(self.perm)))

    def _rename(self, vs: Iterable[int]) -> list[int]:
        return [self.inv[v] for v in vs if self.inv[v] != -1]

    def _rename_edges(self, edges: Iterable[Edge]) -> list[Edge]:
        return [Edge(self.inv[e.vert], e.val) for e in edges if self.inv[e.vert] != -1]

    def succs(self, v: int) -> list[int]:
        p = self.perm[v]
        return [] if p == -1 else self._rename(self.g.succs(p))

    def preds(self, v: int) -> list[int]:
        p = self.perm[v]
        return [] if p == -1 else self._rename(self.g.preds(p))

    def e_succs(self, v: int) -> list[Edge]:
        p = self.perm[v]
        return [] if p == -1 else self._rename_edges(self.g.e_succs(p))

    def e_preds(self, v: int) -> list[Edge]:
        p = self.perm[v]
        return [] if p == -1 else self._rename_edges(self.g.e_preds(p))


class SubGraph:
    """A graph with one vertex hidden; edits pass through to the graph."""

    def __init__(self, g: MutableGraphLike, excluded: int) -> None:
        self.g = g
        self.excluded = excluded

    def elem(self, x: int, y: int) -> bool:
        return x != self.excluded and y != self.excluded and self.g.elem(x, y)

    def lookup(self, x: int, y: int) -> SafeInt64 | None:
        if x == self.excluded or y == self.excluded:
            return None
        return self.g.lookup(x, y)

    def edge_val(self, x: int, y: int) -> SafeInt64:
        return self.g.edge_val(x, y)

    def size(self) -> int:
        return self.g.size()

    def add_edge(self, s: int, w: Weight, d: int) -> None:
        self.g.add_edge(s, w, d)

    def set_edge(self, s: int, w: Weight, d: int) -> None:
        self.g.set_edge(s, w, d)

    def update_edge(self, s: int, w: Weight, d: int) -> None:
        self.g.update_edge(s, w, d)

    def clear_edges(self) -> None:
        self.g.clear_edges()

    def verts(self) -> Iterator[int]:
        return (v for v in self.g.verts() if v != self.excluded)

    def succs(self, v: int) -> list[int]:
        return [d for d in self.g.succs(v) if d != self.excluded]

    def preds(self, v: int) -> list[int]:
        return [s for s in self.g.preds(v) if s != self.excluded]

    def e_succs(self, v: int) -> list[Edge]:
        return [e for e in self.g.e_succs(v) if e.vert != self.excluded]

    def e_preds(self, v: int) -> list[Edge]:
        return [e for e in self.g.e_preds(v) if e.vert != self.excluded]


class GraphRev:
    """A graph with every edge reversed."""

    def __init__(self, g: GraphLike) -> None:
        self.g = g

    def elem(self, x: int, y: int) -> bool:
        return self.g.elem(y, x)

    def lookup(self, x: int, y: int) -> SafeInt64 | None:
        return self.g.lookup(y, x)

    def edge_val(self, x: int, y: int) -> SafeInt64:
        return self.g.edge_val(y, x)

    def size(self) -> int:
        return self.g.size()

    def verts(self) -> Iterable[int]:
        return self.g.verts()

    def succs(self, v: int) -> Iterable[int]:
        return self.g.preds(v)

    def preds(self, v: int) -> Iterable[int]:
        return self.g.succs(v)

    def e_succs(self, v: int) -> Iterable[Edge]:
        return self.g.e_preds(v)

    def e_preds(self, v: int) -> Iterable[Edge]:
        return self.g.e_succs(v)