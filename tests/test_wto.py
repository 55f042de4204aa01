from collections import deque

from hypothesis import given, strategies as st

from zonekit.wto import Wto, WtoCycle

PAPER_GRAPH = {
    1: [2],
    2: [3, 8],
    3: [4],
    4: [5, 7],
    5: [6],
    6: [5, 7],
    7: [3, 8],
    8: [],
}


def flatten(components):
    out = []
    for c in components:
        if isinstance(c, WtoCycle):
            out.extend(flatten(c))
        else:
            out.append(c)
    return out


def cycles(components):
    out = []
    for c in components:
        if isinstance(c, WtoCycle):
            out.append(c)
            out.extend(cycles(c))
    return out


def reachable(succ, entry):
    seen = {entry}
    todo = deque([entry])
    while todo:
        v = todo.popleft()
        for s in succ.get(v, []):
            if s not in seen:
                seen.add(s)
                todo.append(s)
    return seen


def test_paper_example_ordering():
    assert str(Wto(PAPER_GRAPH, 1)) == "1 2 (3 4 (5 6) 7) 8"


def test_paper_example_heads():
    wto = Wto(PAPER_GRAPH, 1)
    assert wto.head(6) == 5
    assert wto.head(5) == 3
    assert wto.head(7) == 3
    assert wto.head(3) is None
    assert wto.head(1) is None


def test_paper_example_nesting():
    wto = Wto(PAPER_GRAPH, 1)
    assert wto.nesting(6) == (5, 3)
    assert wto.nesting(4) == (3,)
    assert wto.nesting(8) == ()
    assert wto.nesting(6) == (5, 3)


def test_cycle_iteration_starts_with_head():
    wto = Wto(PAPER_GRAPH, 1)
    outer = [c for c in wto if isinstance(c, WtoCycle)]
    assert len(outer) == 1
    assert outer[0].head == 3
    assert list(outer[0])[0] == 3
    assert flatten(outer[0]) == [3, 4, 5, 6, 7]


def test_chain_is_in_order():
    wto = Wto({"a": ["b"], "b": ["c"], "c": []}, "a")
    assert list(wto) == ["a", "b", "c"]


def test_self_loop_forms_cycle():
    wto = Wto({1: [1]}, 1)
    (component,) = list(wto)
    assert isinstance(component, WtoCycle)
    assert component.head == 1


def test_unreachable_vertex_is_left_out():
    wto = Wto({0: [1], 1: [], 2: [0]}, 0)
    assert flatten(wto) == [0, 1]
    assert wto.dfn(2) == 0
    assert wto.dfn(0) == wto.dfn(1)
    assert wto.dfn(0) > 0


@st.composite
def graphs(draw):
    n = draw(st.integers(1, 8))
    return {
        v: draw(st.lists(st.integers(0, n - 1), max_size=3, unique=True)) for v in range(n)
    }


@given(graphs())
def test_every_reachable_vertex_appears_once(succ):
    wto = Wto(succ, 0)
    flat = flatten(wto)
    assert sorted(flat) == sorted(reachable(succ, 0))


@given(graphs())
def test_heads_are_cycle_heads(succ):
    wto = Wto(succ, 0)
    cycle_heads = {c.head for c in cycles(wto)}
    for v in flatten(wto):
        h = wto.head(v)
        assert h is None or h in cycle_heads
        for outer in wto.nesting(v):
            assert outer in cycle_heads


@given(graphs())
def test_dfn_zero_only_for_unreached(succ):
    wto = Wto(succ, 0)
    reached = reachable(succ, 0)
    for v in succ:
        if v in reached:
            assert wto.dfn(v) > 0
        else:
            assert wto.dfn(v) == 0