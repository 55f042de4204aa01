import pytest

from zonekit.variables import DataKind, Variable, VariableRegistry


@pytest.fixture
def registry():
    return VariableRegistry()


def test_first_predefined_variable(registry):
    v = registry.make("r0.value")
    assert v.index == 0
    assert registry.reg(DataKind.VALUES, 0) == v


def test_reg_names(registry):
    assert registry.reg(DataKind.TYPES, 10).name == "r10.type"
    assert str(registry.reg(DataKind.STACK_NUMERIC_SIZES, 3)) == "r3.stack_numeric_size"


def test_make_interns_names(registry):
    a = registry.make("custom")
    b = registry.make("custom")
    assert a == b
    assert a.index == registry.make("meta_size").index + 1
    c = registry.make("another")
    assert c.index == a.index + 1
    assert a < c


def test_cell_var_names(registry):
    assert registry.cell_var(DataKind.STACK_OFFSETS, 4, 8).name == "s[4...11].stack_offset"
    assert registry.cell_var(DataKind.VALUES, 4, 1).name == "s[4].value"


def test_stack_membership(registry):
    assert registry.cell_var(DataKind.TYPES, 0, 4).is_in_stack()
    assert not registry.reg(DataKind.TYPES, 0).is_in_stack()


def test_kind_var_shares_prefix(registry):
    t = registry.reg(DataKind.TYPES, 3)
    assert registry.kind_var(DataKind.PACKET_OFFSETS, t) == registry.reg(DataKind.PACKET_OFFSETS, 3)
    cell = registry.cell_var(DataKind.TYPES, 8, 8)
    assert registry.kind_var(DataKind.VALUES, cell) == registry.cell_var(DataKind.VALUES, 8, 8)


def test_kind_var_without_dot(registry):
    plain = registry.make("plain")
    assert registry.kind_var(DataKind.MAP_FDS, plain).name == str(DataKind.MAP_FDS)


def test_type_variables(registry):
    expected = [registry.reg(DataKind.TYPES, i) for i in range(11)]
    assert registry.type_variables() == expected
    extra = registry.cell_var(DataKind.TYPES, 16, 8)
    types = registry.type_variables()
    assert types[-1] == extra
    assert all(v.name.endswith(".type") for v in types)


def test_special_variables(registry):
    assert registry.meta_offset().name == "meta_offset"
    assert registry.packet_size().name == "packet_size"
    assert registry.instruction_count().name == "instruction_count"


def test_clear_forgets_new_names(registry):
    before = registry.make("temp").index
    registry.make("other")
    registry.clear()
    assert registry.make("other").index == before
    assert registry.make("data_size").index == registry.make("meta_size").index - 1


def test_variable_equality_uses_index():
    assert Variable(5, "a") == Variable(5, "b")
    assert hash(Variable(5, "a")) == hash(Variable(5, "b"))
    assert Variable(2, "z") < Variable(3, "a")


def test_data_kind_str():
    assert str(DataKind.MAP_FDS) == "map_fd"
    assert DataKind("shared_region_size") is DataKind.SHARED_REGION_SIZES