import pytest

from zonekit.debug import CrabError
from zonekit.safeint import SafeInt64
from zonekit.sparse_graph import AdaptGraph, Edge, TreeSMap


def make_graph(n):
    g = AdaptGraph()
    g.grow_to(n)
    return g


def test_treesmap_basic_operations():
    m = TreeSMap()
    m.add(5, 50)
    m.add(1, 10)
    m.add(3, 30)
    assert len(m) == 3
    assert 3 in m and 4 not in m
    assert m.keys() == [1, 3, 5]
    assert m.items() == [(1, 10), (3, 30), (5, 50)]
    assert m.lookup(5) == 50
    assert m.lookup(7) is None


def test_treesmap_add_overwrites_and_remove():
    m = TreeSMap()
    m.add(2, 20)
    m.add(2, 21)
    assert m.lookup(2) == 21
    m.remove(2)
    assert 2 not in m
    m.add(9, 1)
    m.clear()
    assert len(m) == 0


def test_new_vertices_are_sequential():
    g = make_graph(4)
    assert g.size() == 4
    assert list(g.verts()) == [0, 1, 2, 3]
    assert g.is_empty()


def test_add_edge_and_lookup():
    g = make_graph(3)
    g.add_edge(0, 7, 2)
    assert g.elem(0, 2)
    assert not g.elem(2, 0)
    assert g.edge_val(0, 2) == 7
    assert g.lookup(0, 2) == SafeInt64(7)
    assert g.lookup(1, 2) is None
    assert g.num_edges() == 1
    assert not g.is_empty()
    assert g.succs(0) == [2]
    assert g.preds(2) == [0]


def test_edge_val_missing_raises():
    g = make_graph(2)
    with pytest.raises(KeyError):
        g.edge_val(0, 1)


def test_e_succs_and_e_preds():
    g = make_graph(3)
    g.add_edge(0, 4, 2)
    g.add_edge(0, -3, 1)
    g.add_edge(1, 8, 2)
    assert g.e_succs(0) == [Edge(1, SafeInt64(-3)), Edge(2, SafeInt64(4))]
    assert g.e_preds(2) == [Edge(0, SafeInt64(4)), Edge(1, SafeInt64(8))]


def test_update_edge_keeps_minimum():
    g = make_graph(2)
    g.update_edge(0, 10, 1)
    g.update_edge(0, 15, 1)
    assert g.edge_val(0, 1) == 10
    g.update_edge(0, 4, 1)
    assert g.edge_val(0, 1) == 4
    assert g.num_edges() == 1


def test_set_edge_overwrites():
    g = make_graph(2)
    g.set_edge(0, 3, 1)
    g.set_edge(0, 9, 1)
    assert g.edge_val(0, 1) == 9
    assert g.num_edges() == 1


def test_forget_removes_all_edges_and_recycles_vertex():
    g = make_graph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 0)
    g.forget(1)
    assert g.num_edges() == 1
    assert not g.elem(0, 1)
    assert 1 not in list(g.verts())
    assert g.succs(0) == []
    assert g.preds(2) == []
    assert g.new_vertex() == 1
    assert g.size() == 3


def test_forget_twice_is_harmless():
    g = make_graph(2)
    g.add_edge(0, 1, 1)
    g.forget(1)
    g.forget(1)
    assert g.num_edges() == 0


def test_weight_slots_reused_after_forget():
    g = make_graph(3)
    g.add_edge(0, 5, 1)
    g.forget(1)
    g.new_vertex()
    g.add_edge(0, 11, 2)
    g.add_edge(2, 12, 1)
    assert g.edge_val(0, 2) == 11
    assert g.edge_val(2, 1) == 12
    assert g.num_edges() == 2


def test_copy_preserves_edges():
    g = make_graph(3)
    g.add_edge(0, 2, 1)
    g.add_edge(1, -1, 2)
    h = AdaptGraph.copy(g)
    assert h.size() == g.size()
    assert str(h) == str(g)
    h.set_edge(0, 100, 1)
    assert g.edge_val(0, 1) == 2


def test_str_format():
    g = make_graph(2)
    g.add_edge(0, 5, 1)
    assert str(g) == "[|[v0 -> (5:1)]|]"
    assert str(make_graph(2)) == "[||]"


def test_clear_edges_and_clear():
    g = make_graph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 1, 2)
    g.clear_edges()
    assert g.is_empty()
    assert g.size() == 3
    g.add_edge(2, 6, 0)
    assert g.edge_val(2, 0) == 6
    g.clear()
    assert g.size() == 0
    assert list(g.verts()) == []


def test_weight_out_of_range_raises():
    g = make_graph(2)
    with pytest.raises(CrabError):
        g.add_edge(0, 2**63, 1)