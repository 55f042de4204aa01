"""Named analysis variables and the registry that interns their names."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DataKind(Enum):
    """The kinds of data tracked for registers and stack cells."""

    CTX_OFFSETS = "ctx_offset"
    MAP_FDS = "map_fd"
    PACKET_OFFSETS = "packet_offset"
    SHARED_OFFSETS = "shared_offset"
    SHARED_REGION_SIZES = "shared_region_size"
    STACK_NUMERIC_SIZES = "stack_numeric_size"
    STACK_OFFSETS = "stack_offset"
    TYPES = "type"
    VALUES = "value"

    def __str__(self) -> str:
        return self.value


_REGISTER_KINDS = (
    DataKind.VALUES,
    DataKind.CTX_OFFSETS,
    DataKind.MAP_FDS,
    DataKind.PACKET_OFFSETS,
    DataKind.SHARED_OFFSETS,
    DataKind.STACK_OFFSETS,
    DataKind.TYPES,
    DataKind.SHARED_REGION_SIZES,
    DataKind.STACK_NUMERIC_SIZES,
)
_REGISTER_COUNT = 11


def _initial_names() -> list[str]:
    names = [f"r{i}.{kind.value}" for i in range(_REGISTER_COUNT) for kind in _REGISTER_KINDS]
    names += ["data_size", "meta_size"]
    return names


@dataclass(frozen=True, order=True)
class Variable:
    """An interned variable; identity and ordering follow its index."""

    index: int
    name: str = field(compare=False)

    def is_in_stack(self) -> bool:
        return self.name.startswith("s")

    def __str__(self) -> str:
        return self.name


class VariableRegistry:
    """Assigns a stable index to each variable name."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._index: dict[str, int] = {}
        self.clear()

    def make(self, name: str) -> Variable:
        """Return the variable with this name, creating it if needed."""
        index = self._index.get(name)
        if index is None:
            index = len(self._names)
            self._names.append(name)
            self._index[name] = index
        return Variable(index, name)

    def clear(self) -> None:
        """Forget every name except the predefined register variables."""
        self._names = _initial_names()
        self._index = {name: i for i, name in enumerate(self._names)}

    def reg(self, kind: DataKind, i: int) -> Variable:
        return self.make(f"r{i}.{kind.value}")

    def cell_var(self, kind: DataKind, offset: int, size: int) -> Variable:
        offset, size = int(offset), int(size)
        span = f"{offset}" if size == 1 else f"{offset}...{offset + size - 1}"
        return self.make(f"s[{span}].{kind.value}")

    def kind_var(self, kind: DataKind, type_variable: Variable) -> Variable:
        """The variable of ``kind`` that shares a prefix with ``type_variable``."""
        name = type_variable.name
        return self.make(name[: name.rfind(".") + 1] + kind.value)

    def meta_offset(self) -> Variable:
        return self.make("meta_offset")

    def packet_size(self) -> Variable:
        return self.make("packet_size")

    def instruction_count(self) -> Variable:
        return self.make("instruction_count")

    def type_variables(self) -> list[Variable]:
        return [self.make(name) for name in list(self._names) if name.endswith(".type")]