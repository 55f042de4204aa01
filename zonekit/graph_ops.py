"""Algorithms over weighted difference graphs: join, meet, widening and closure."""

from __future__ import annotations

from typing import Collection, Iterable, MutableSequence, Sequence

from zonekit.graph_views import GraphLike, GraphRev, MutableGraphLike
from zonekit.heap import Heap
from zonekit.safeint import SafeInt64
from zonekit.sparse_graph import AdaptGraph

EdgeTriple = tuple[int, int, SafeInt64]

# Edge colours for the chromatic Dijkstra.
_E_LEFT = 1
_E_RIGHT = 2
_E_BOTH = _E_LEFT | _E_RIGHT

# Vertex stability during widening.
_V_UNSTABLE = 0
_V_STABLE = 1

# Vertex states during Bellman-Ford.
_BF_SCC = 1
_BF_QUEUED = 2


def _check_same_size(left: GraphLike, right: GraphLike) -> int:
    size = left.size()
    if size != right.size():
        raise ValueError(f"graph sizes differ: {size} and {right.size()}")
    return size


def join(left: GraphLike, right: GraphLike) -> AdaptGraph:
    """Edges present in both graphs, each with the larger of its two weights."""
    size = _check_same_size(left, right)
    g = AdaptGraph()
    g.grow_to(size)
    for s in left.verts():
        for e in left.e_succs(s):
            wr = right.lookup(s, e.vert)
            if wr is not None:
                g.add_edge(s, max(e.val, wr), e.vert)
    return g


def meet(left: GraphLike, right: GraphLike) -> AdaptGraph:
    """Edges of either graph, each with the smaller weight; the result is not closed."""
    _check_same_size(left, right)
    g = AdaptGraph.copy(left)
    for s in right.verts():
        for e in right.e_succs(s):
            wg = g.lookup(s, e.vert)
            if wg is None:
                g.add_edge(s, e.val, e.vert)
            elif e.val < wg:
                g.set_edge(s, e.val, e.vert)
    return g


def widen(left: GraphLike, right: GraphLike) -> tuple[AdaptGraph, list[int]]:
    """Keep the edges of ``left`` that ``right`` does not loosen.

    Returns the widened graph and the vertices that lost an edge.
    """
    size = _check_same_size(left, right)
    g = AdaptGraph()
    g.grow_to(size)
    unstable: list[int] = []
    for s in right.verts():
        for e in right.e_succs(s):
            wl = left.lookup(s, e.vert)
            if wl is not None and e.val <= wl:
                g.add_edge(s, wl, e.vert)
        if any(not g.elem(s, d) for d in left.succs(s)):
            unstable.append(s)
    return g, unstable


def compute_sccs(g: GraphLike) -> list[list[int]]:
    """Strongly connected components, in reverse topological order."""
    index: dict[int, int] = {}
    low: dict[int, int] = {}
    on_stack: set[int] = set()
    stack: list[int] = []
    sccs: list[list[int]] = []
    counter = 1

    def enter(v: int) -> None:
        nonlocal counter
        index[v] = low[v] = counter
        counter += 1
        stack.append(v)
        on_stack.add(v)

    for root in g.verts():
        if root in index:
            continue
        enter(root)
        work = [(root, iter(g.succs(root)))]
        while work:
            v, successors = work[-1]
            descended = False
            for w in successors:
                if w not in index:
                    enter(w)
                    work.append((w, iter(g.succs(w))))
                    descended = True
                    break
                if w in on_stack:
                    low[v] = min(low[v], index[w])
            if descended:
                continue
            work.pop()
            if low[v] == index[v]:
                scc: list[int] = []
                while True:
                    w = stack.pop()
                    on_stack.discard(w)
                    scc.append(w)
                    if w == v:
                        break
                sccs.append(scc)
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[v])
    return sccs


def select_potentials(g: GraphLike, potentials: MutableSequence) -> bool:
    """Run Bellman-Ford per component, lowering ``potentials`` in place.

    Returns False if the graph has a negative cycle. On success every edge
    s -> d with weight w satisfies potentials[d] <= potentials[s] + w.
    """
    if len(potentials) < g.size():
        raise ValueError("not enough potentials for the graph")
    marks: dict[int, int] = {}
    for scc in reversed(compute_sccs(g)):
        queue = list(scc)
        for v in scc:
            marks[v] = _BF_SCC | _BF_QUEUED
        for _ in range(len(scc)):
            pending: list[int] = []
            while queue:
                s = queue.pop()
                marks[s] = _BF_SCC
                s_pot = potentials[s]
                for e in g.e_succs(s):
                    d = e.vert
                    sd_pot = s_pot + e.val
                    if sd_pot < potentials[d]:
                        potentials[d] = sd_pot
                        if marks.get(d) == _BF_SCC:
                            pending.append(d)
                            marks[d] = _BF_SCC | _BF_QUEUED
            queue = pending
            if not queue:
                break
        while queue:
            s = queue.pop()
            s_pot = potentials[s]
            if any(s_pot + e.val < potentials[e.vert] for e in g.e_succs(s)):
                return False
    return True


def _chrome_dijkstra(
    g: GraphLike,
    p: Sequence,
    colour_succs: dict[int, tuple[list[int], list[int]]],
    edge_marks: dict[tuple[int, int], int],
    src: int,
) -> list[tuple[int, SafeInt64]]:
    out: list[tuple[int, SafeInt64]] = []
    if g.size() == 0:
        return out
    dists: dict[int, SafeInt64] = {src: SafeInt64(0)}
    vmarks: dict[int, int] = {}
    heap = Heap(lambda x, y: dists[x] < dists[y])

    for e in g.e_succs(src):
        dest = e.vert
        dists[dest] = p[src] + e.val - p[dest]
        vmarks[dest] = edge_marks.get((src, dest), 0)
        heap.insert(dest)

    while len(heap):
        es = heap.remove_min()
        es_cost = dists[es] + p[es]
        es_val = es_cost - p[src]
        w = g.lookup(src, es)
        if w is None or w > es_val:
            out.append((es, es_val))

        mark = vmarks.get(es, 0)
        if mark == _E_BOTH:
            continue
        left_only, right_only = colour_succs.get(es, ([], []))
        successors = right_only if mark == _E_LEFT else left_only
        for ed in successors:
            v = es_cost + g.edge_val(es, ed) - p[ed]
            edge_mark = edge_marks.get((es, ed), 0)
            if ed not in dists or v < dists[ed]:
                dists[ed] = v
                vmarks[ed] = edge_mark
                if ed in heap:
                    heap.decrease(ed)
                else:
                    heap.insert(ed)
            elif v == dists[ed]:
                vmarks[ed] = vmarks.get(ed, 0) | edge_mark
    return out


def close_after_meet(g: GraphLike, potentials: Sequence, left: GraphLike, right: GraphLike) -> list[EdgeTriple]:
    """Edges that restore closure of ``g``, the syntactic meet of ``left`` and ``right``.

    ``potentials`` must be a valid model of ``g``.
    """
    _check_same_size(left, right)
    colour_succs: dict[int, tuple[list[int], list[int]]] = {}
    edge_marks: dict[tuple[int, int], int] = {}
    for s in g.verts():
        for e in g.e_succs(s):
            d = e.vert
            mark = 0
            wl = left.lookup(s, d)
            if wl is not None and wl == e.val:
                mark |= _E_LEFT
            wr = right.lookup(s, d)
            if wr is not None and wr == e.val:
                mark |= _E_RIGHT
            if mark == _E_LEFT:
                colour_succs.setdefault(s, ([], []))[0].append(d)
            elif mark == _E_RIGHT:
                colour_succs.setdefault(s, ([], []))[1].append(d)
            edge_marks[(s, d)] = mark

    delta: list[EdgeTriple] = []
    for v in g.verts():
        for d, w in _chrome_dijkstra(g, potentials, colour_succs, edge_marks, v):
            delta.append((v, d, w))
    return delta


def apply_delta(g: MutableGraphLike, delta: Iterable[EdgeTriple]) -> None:
    """Set each edge (s, d, w) of ``delta`` in ``g``."""
    for s, d, w in delta:
        g.set_edge(s, w, d)


def dijkstra_recover(
    g: GraphLike, potentials: Sequence, is_stable: Collection[int], src: int
) -> list[tuple[int, SafeInt64]]:
    """Shortest paths from ``src`` that improve on its edges, not expanding past stable vertices."""
    out: list[tuple[int, SafeInt64]] = []
    if g.size() == 0 or src in is_stable:
        return out
    p = potentials
    dists: dict[int, SafeInt64] = {src: SafeInt64(0)}
    vmarks: dict[int, int] = {}
    heap = Heap(lambda x, y: dists[x] < dists[y])

    for e in g.e_succs(src):
        dest = e.vert
        dists[dest] = p[src] + e.val - p[dest]
        vmarks[dest] = _V_UNSTABLE
        heap.insert(dest)

    while len(heap):
        es = heap.remove_min()
        es_cost = dists[es] + p[es]
        es_val = es_cost - p[src]
        w = g.lookup(src, es)
        if w is None or w > es_val:
            out.append((es, es_val))
        if vmarks.get(es, _V_UNSTABLE) == _V_STABLE:
            continue

        es_mark = _V_STABLE if es in is_stable else _V_UNSTABLE
        for e in g.e_succs(es):
            ed = e.vert
            v = es_cost + e.val - p[ed]
            if ed not in dists or v < dists[ed]:
                dists[ed] = v
                vmarks[ed] = es_mark
                if ed in heap:
                    heap.decrease(ed)
                else:
                    heap.insert(ed)
            elif v == dists[ed]:
                vmarks[ed] = vmarks.get(ed, _V_UNSTABLE) | es_mark
    return out


def repair_potential(g: GraphLike, potentials: MutableSequence, ii: int, jj: int) -> bool:
    """Restore ``potentials`` after the edge ii -> jj was added or tightened.

    Returns False, leaving ``potentials`` unchanged, if the edge closes a negative cycle.
    """
    p = potentials
    verts = list(g.verts())
    dists: dict[int, SafeInt64] = {v: SafeInt64(0) for v in verts}
    dists_alt = {v: p[v] for v in verts}
    dists[jj] = p[ii] + g.edge_val(ii, jj) - p[jj]
    if dists[jj] >= 0:
        return True

    heap = Heap(lambda x, y: dists[x] < dists[y])
    heap.insert(jj)
    while len(heap):
        es = heap.remove_min()
        dists_alt[es] = p[es] + dists[es]
        for e in g.e_succs(es):
            ed = e.vert
            if dists_alt[ed] == p[ed]:
                gnext = dists_alt[es] + e.val - dists_alt[ed]
                if gnext < dists[ed]:
                    dists[ed] = gnext
                    if ed in heap:
                        heap.decrease(ed)
                    else:
                        heap.insert(ed)
    if dists[ii] < 0:
        return False
    for v in verts:
        p[v] = dists_alt[v]
    return True


def close_after_widen(g: GraphLike, potentials: Sequence, is_stable: Collection[int]) -> list[EdgeTriple]:
    """Edges that restore closure from every vertex not in ``is_stable``."""
    delta: list[EdgeTriple] = []
    for v in g.verts():
        if v not in is_stable:
            for d, w in dijkstra_recover(g, potentials, is_stable, v):
                delta.append((v, d, w))
    return delta


class _Negated:
    """Potentials with every value negated, for walking a reversed graph."""

    def __init__(self, p: Sequence) -> None:
        self._p = p

    def __getitem__(self, v: int) -> SafeInt64:
        return -SafeInt64(self._p[v])


def _close_after_assign_fwd(g: GraphLike, p: Sequence, v: int) -> list[tuple[int, SafeInt64]]:
    queued = {v}
    dists: dict[int, SafeInt64] = {v: SafeInt64(0)}
    adjacent: list[int] = []
    for e in g.e_succs(v):
        queued.add(e.vert)
        dists[e.vert] = e.val
        adjacent.append(e.vert)

    adjacent.sort(key=lambda d: dists[d] - p[d])

    reached = list(adjacent)
    for d in adjacent:
        d_wt = dists[d]
        for edge in g.e_succs(d):
            e = edge.vert
            e_wt = d_wt + edge.val
            if e not in queued:
                dists[e] = e_wt
                queued.add(e)
                reached.append(e)
            else:
                dists[e] = min(e_wt, dists[e])
    return [(d, dists[d]) for d in reached]


def close_after_assign(g: GraphLike, potentials: Sequence, v: int) -> list[EdgeTriple]:
    """Edges into and out of ``v`` that close the graph, given that it is closed without ``v``."""
    delta: list[EdgeTriple] = [(v, d, w) for d, w in _close_after_assign_fwd(g, potentials, v)]
    reverse = _close_after_assign_fwd(GraphRev(g), _Negated(potentials), v)
    delta.extend((d, v, w) for d, w in reverse)
    return delta