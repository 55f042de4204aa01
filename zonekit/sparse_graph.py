"""A sparse weighted directed graph with recyclable vertices and edge slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol

from zonekit.numbers import ZNumber
from zonekit.safeint import SafeInt64


class TreeSMap:
    """An ordered map from vertex ids to edge-slot indices."""

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def keys(self) -> list[int]:
        """Keys in increasing order."""
        return sorted(self._map)

    def items(self) -> list[tuple[int, int]]:
        """(key, value) pairs in increasing key order."""
        return sorted(self._map.items())

    def lookup(self, key: int) -> int | None:
        return self._map.get(key)

    def remove(self, key: int) -> None:
        self._map.pop(key, None)

    def add(self, key: int, value: int) -> None:
        self._map[key] = value

    def clear(self) -> None:
        self._map.clear()


@dataclass(frozen=True)
class Edge:
    """An edge seen from one endpoint: the other vertex and the weight."""

    vert: int
    val: SafeInt64


class _Graph(Protocol):
    def size(self) -> int: ...

    def verts(self) -> Iterator[int]: ...

    def e_succs(self, v: int) -> list[Edge]: ...


class AdaptGraph:
    """Weighted digraph whose weights are checked signed 64-bit integers."""

    def __init__(self) -> None:
        self._preds: list[TreeSMap] = []
        self._succs: list[TreeSMap] = []
        self._ws: list[SafeInt64] = []
        self._edge_count = 0
        self._is_free: list[bool] = []
        self._free_id: list[int] = []
        self._free_widx: list[int] = []

    @classmethod
    def copy(cls, other: _Graph) -> AdaptGraph:
        """Build a graph with the same vertices and edges as ``other``."""
        g = cls()
        g.grow_to(other.size())
        for s in other.verts():
            for e in other.e_succs(s):
                g.add_edge(s, e.val, e.vert)
        return g

    def verts(self) -> Iterator[int]:
        """Live vertex ids in increasing order."""
        return (v for v, free in enumerate(self._is_free) if not free)

    def succs(self, v: int) -> list[int]:
        return self._succs[v].keys()

    def preds(self, v: int) -> list[int]:
        return self._preds[v].keys()

    def e_succs(self, v: int) -> list[Edge]:
        return [Edge(k, self._ws[i]) for k, i in self._succs[v].items()]

    def e_preds(self, v: int) -> list[Edge]:
        return [Edge(k, self._ws[i]) for k, i in self._preds[v].items()]

    def is_empty(self) -> bool:
        return self._edge_count == 0

    def size(self) -> int:
        return len(self._succs)

    def num_edges(self) -> int:
        return self._edge_count

    def new_vertex(self) -> int:
        """Allocate a vertex, reusing a forgotten one when available."""
        if self._free_id:
            v = self._free_id.pop()
            self._is_free[v] = False
        else:
            v = len(self._succs)
            self._is_free.append(False)
            self._succs.append(TreeSMap())
            self._preds.append(TreeSMap())
        return v

    def grow_to(self, n: int) -> None:
        while self.size() < n:
            self.new_vertex()

    def forget(self, v: int) -> None:
        """Remove every edge touching ``v`` and free the vertex."""
        if self._is_free[v]:
            return
        for key, idx in self._succs[v].items():
            self._free_widx.append(idx)
            self._preds[key].remove(v)
        self._edge_count -= len(self._succs[v])
        self._succs[v].clear()

        for key, idx in self._preds[v].items():
            self._free_widx.append(idx)
            self._succs[key].remove(v)
        self._edge_count -= len(self._preds[v])
        self._preds[v].clear()

        self._is_free[v] = True
        self._free_id.append(v)

    def clear_edges(self) -> None:
        self._ws.clear()
        self._free_widx.clear()
        for v in self.verts():
            self._succs[v].clear()
            self._preds[v].clear()
        self._edge_count = 0

    def clear(self) -> None:
        self._ws.clear()
        self._succs.clear()
        self._preds.clear()
        self._is_free.clear()
        self._free_id.clear()
        self._free_widx.clear()
        self._edge_count = 0

    def elem(self, s: int, d: int) -> bool:
        return d in self._succs[s]

    def edge_val(self, s: int, d: int) -> SafeInt64:
        idx = self._succs[s].lookup(d)
        if idx is None:
            raise KeyError((s, d))
        return self._ws[idx]

    def lookup(self, s: int, d: int) -> SafeInt64 | None:
        idx = self._succs[s].lookup(d)
        return None if idx is None else self._ws[idx]

    def add_edge(self, s: int, w: SafeInt64 | ZNumber | int, d: int) -> None:
        """Add the edge s -> d, which must not exist yet."""
        weight = SafeInt64(w)
        if self._free_widx:
            idx = self._free_widx.pop()
            self._ws[idx] = weight
        else:
            idx = len(self._ws)
            self._ws.append(weight)
        self._succs[s].add(d, idx)
        self._preds[d].add(s, idx)
        self._edge_count += 1

    def update_edge(self, s: int, w: SafeInt64 | ZNumber | int, d: int) -> None:
        """Add s -> d, or lower its weight to ``w`` if that is smaller."""
        idx = self._succs[s].lookup(d)
        if idx is None:
            self.add_edge(s, w, d)
            return
        weight = SafeInt64(w)
        if weight < self._ws[idx]:
            self._ws[idx] = weight

    def set_edge(self, s: int, w: SafeInt64 | ZNumber | int, d: int) -> None:
        """Add s -> d, or overwrite its weight."""
        idx = self._succs[s].lookup(d)
        if idx is None:
            self.add_edge(s, w, d)
        else:
            self._ws[idx] = SafeInt64(w)

    def __str__(self) -> str:
        parts = []
        for v in self.verts():
            edges = self.e_succs(v)
            if edges:
                body = ", ".join(f"({e.val}:{e.vert})" for e in edges)
                parts.append(f"[v{v} -> {body}]")
        return "[|" + ", ".join(parts) + "|]"