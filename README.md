# zonekit

Building blocks for numeric static analysis of programs: checked integers,
sparse weighted difference graphs with the algorithms that keep them closed,
weak topological orderings of control-flow graphs, and widening thresholds.

## What is inside

- `zonekit.numbers.ZNumber`: arbitrary-precision integers with range checks
  (`fits_sint64`, `fits_uint64`, ...), casts to fixed widths
  (`cast_to_sint64`, `cast_to_sint32`, `cast_to_finite_width`) and division
  that truncates toward zero.
- `zonekit.safeint.SafeInt64`: signed 64-bit integers whose arithmetic raises
  `CrabError` on overflow.
- `zonekit.heap.Heap`: a binary min-heap of non-negative integer ids, ordered
  by a caller-supplied predicate, with `insert`, `remove_min` and `decrease`.
- `zonekit.sparse_graph.AdaptGraph`: a sparse weighted directed graph with
  reusable vertices, plus its `TreeSMap` adjacency map and `Edge` records.
- `zonekit.graph_views`: `GraphPerm`, `SubGraph` and `GraphRev`, views that
  renumber, hide one vertex of, or reverse a graph without copying it.
- `zonekit.graph_ops`: syntactic `join`, `meet` and `widen`; `compute_sccs`;
  `select_potentials` (Bellman-Ford per component); `repair_potential`; and
  `close_after_meet`, `close_after_widen`, `close_after_assign`, which return
  edge lists to pass to `apply_delta`.
- `zonekit.wto`: `Wto`, a weak topological ordering of the vertices reachable
  from an entry label, with `head`, `nesting` and `dfn` queries; cycles are
  `WtoCycle` objects whose iteration yields the head first.
- `zonekit.thresholds`: `Thresholds`, a sorted bounded set of widening
  thresholds, and `WtoThresholds`, which creates one set per cycle head of a
  `Wto`.
- `zonekit.variables`: `VariableRegistry` interns variable names into
  `Variable` objects, predefines register variables, and builds register,
  stack-cell and kind variables from a `DataKind`.
- `zonekit.stats`: `Stats` with named counters and `Stopwatch` timers
  (user CPU time by default, or any clock you pass), a `scoped` context
  manager and text reports.
- `zonekit.debug`: `CrabError`, `error`, `warn`, `enable_warnings`,
  `enable_log` and `log_enabled`.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## A short tour

Closing a difference graph after adding edges out of a vertex:

```python
from zonekit.sparse_graph import AdaptGraph
from zonekit import graph_ops

g = AdaptGraph()
g.grow_to(3)
g.add_edge(0, 5, 1)      # x1 - x0 <= 5
g.add_edge(1, 2, 2)      # x2 - x1 <= 2

potentials = [0, 0, 0]
assert graph_ops.select_potentials(g, potentials)

delta = graph_ops.close_after_assign(g, potentials, 0)
graph_ops.apply_delta(g, delta)
print(g.lookup(0, 2))    # 7
```

Computing a weak topological ordering from a successor mapping:

```python
from zonekit.wto import Wto

succ = {1: [2], 2: [3, 8], 3: [4], 4: [5, 7], 5: [6], 6: [5, 7], 7: [3, 8], 8: []}
wto = Wto(succ, 1)
print(wto)               # 1 2 (3 4 (5 6) 7) 8
print(wto.nesting(6))    # (5, 3)
```

Arithmetic on `SafeInt64` raises on overflow:

```python
from zonekit.debug import CrabError
from zonekit.safeint import SafeInt64

try:
    SafeInt64(2**63 - 1) + SafeInt64(1)
except CrabError as exc:
    print(exc)
```

## What it does not do

zonekit is a library of parts. It has no abstract domain built from them
(no relational domain object with assign, join or entailment operations), no
fixpoint analyzer, no program loader or verifier, and no command-line tool.
`WtoThresholds` records a threshold set per loop head but gathers no
constants from program instructions, so those sets keep their initial
`{-oo,0,+oo}` unless you add to them yourself.