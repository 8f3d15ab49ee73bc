"""Operand layouts for Universal Machine instructions.

Each opcode reads a fixed subset of the standard fields. The layout classes
below declare that subset in FIELDS as (attribute, role, Field) triples; the
renderer and the bit highlighter both work from these tables.

Layouts:
    ThreeRegister: a, b, c (CMOV, LOAD, STORE, ADD, MUL, DIV, NAND)
    TwoRegister: b, c (MAP_SEGMENT, LOAD_PROGRAM)
    OneRegister: c (UNMAP_SEGMENT, OUTPUT, INPUT)
    Halt: no operands (HALT)
    Immediate: reg, value (LOAD_VALUE)
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple, Type, Union

from .fields import Field, RA, RB, RC, RL, VL, extract
from .opcodes import Opcode, Unrecognized


@dataclass(frozen=True)
class Layout:
    """Base class for decoded operand layouts."""

    FIELDS: ClassVar[Tuple[Tuple[str, str, Field], ...]] = ()

    @classmethod
    def from_word(cls, word: int) -> "Layout":
        """Extract this layout's fields from an instruction word."""
        return cls(**{attr: extract(field, word) for attr, _, field in cls.FIELDS})


@dataclass(frozen=True)
class ThreeRegister(Layout):
    a: int
    b: int
    c: int

    FIELDS: ClassVar[Tuple[Tuple[str, str, Field], ...]] = (
        ("a", "ra", RA),
        ("b", "rb", RB),
        ("c", "rc", RC),
    )


@dataclass(frozen=True)
class TwoRegister(Layout):
    b: int
    c: int

    FIELDS: ClassVar[Tuple[Tuple[str, str, Field], ...]] = (
        ("b", "rb", RB),
        ("c", "rc", RC),
    )


@dataclass(frozen=True)
class OneRegister(Layout):
    c: int

    FIELDS: ClassVar[Tuple[Tuple[str, str, Field], ...]] = (
        ("c", "rc", RC),
    )


@dataclass(frozen=True)
class Halt(Layout):
    pass


@dataclass(frozen=True)
class Immediate(Layout):
    """Load Value operands: RL and VL overlap other layouts' bits."""
    reg: int
    value: int

    FIELDS: ClassVar[Tuple[Tuple[str, str, Field], ...]] = (
        ("reg", "rl", RL),
        ("value", "value", VL),
    )


_LAYOUTS: Dict[Opcode, Type[Layout]] = {
    Opcode.CMOV: ThreeRegister,
    Opcode.LOAD: ThreeRegister,
    Opcode.STORE: ThreeRegister,
    Opcode.ADD: ThreeRegister,
    Opcode.MUL: ThreeRegister,
    Opcode.DIV: ThreeRegister,
    Opcode.NAND: ThreeRegister,
    Opcode.HALT: Halt,
    Opcode.MAP_SEGMENT: TwoRegister,
    Opcode.LOAD_PROGRAM: TwoRegister,
    Opcode.UNMAP_SEGMENT: OneRegister,
    Opcode.OUTPUT: OneRegister,
    Opcode.INPUT: OneRegister,
    Opcode.LOAD_VALUE: Immediate,
}


def layout_for(opcode: Union[Opcode, Unrecognized]) -> Type[Layout]:
    """Get the layout class used by `opcode`.

    Raises:
        TypeError: If opcode is Unrecognized (it has no layout)
    """
    if not isinstance(opcode, Opcode):
        raise TypeError(f"No layout for unrecognized opcode: {opcode!r}")
    return _LAYOUTS[opcode]


def decode_layout(opcode: Opcode, word: int) -> Layout:
    """Resolve the layout of `opcode` and extract its fields from `word`."""
    return layout_for(opcode).from_word(word)
