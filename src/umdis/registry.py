"""MnemonicRegistry: verified text formatters for umdis.

Each opcode maps to exactly one formatter that turns the operand layout
into a line of assembly text. The registry is frozen after initialization,
so the opcode -> text mapping cannot change at runtime.

Rendered forms:
    CMOV: if (rC != 0) rA := rB;
    LOAD: rA := m[rB][rC];
    STORE: m[rA][rB] := rC;
    ADD / MUL / DIV: rA := rB {+,*,/} rC;
    NAND: rA := rB nand rC;
    HALT: halt
    MAP_SEGMENT: rB := map segment (rC words);
    UNMAP_SEGMENT: unmap rC;
    OUTPUT: output rC;
    INPUT: rC := input();
    LOAD_PROGRAM: goto rC in program m[rB];
    LOAD_VALUE: rL := value;

Words with an unrecognized opcode render as a data directive:
    .data 0xe0000000
"""

from typing import Callable, Dict, Optional

from .decoder import DecodeResult, decode
from .layout import Immediate, Layout, OneRegister, ThreeRegister, TwoRegister
from .opcodes import Opcode


Formatter = Callable[[Layout], str]

DATA_DIRECTIVE = ".data"


def format_data(word: int) -> str:
    """Render a raw word as a data directive."""
    return f"{DATA_DIRECTIVE} 0x{word:08x}"


class MnemonicRegistry:
    """Verified registry of per-opcode formatters.

    Attributes:
        _formatters: Dictionary mapping opcodes to formatter functions
        _frozen: Whether the registry is locked against modifications
    """

    def __init__(self):
        """Initialize registry with formatters for every opcode."""
        self._formatters: Dict[Opcode, Formatter] = {}
        self._frozen = False
        self._register_all_formatters()
        self.freeze()

    def _register_all_formatters(self) -> None:
        """Register the formatter of each opcode."""
        # Three-register
        self.register(Opcode.CMOV, self._fmt_cmov)
        self.register(Opcode.LOAD, self._fmt_load)
        self.register(Opcode.STORE, self._fmt_store)
        self.register(Opcode.ADD, self._binary("+"))
        self.register(Opcode.MUL, self._binary("*"))
        self.register(Opcode.DIV, self._binary("/"))
        # possible enhancement: render nand with rB == rC as a complement
        self.register(Opcode.NAND, self._binary("nand"))

        # Machine control
        self.register(Opcode.HALT, self._fmt_halt)
        self.register(Opcode.MAP_SEGMENT, self._fmt_map_segment)
        self.register(Opcode.UNMAP_SEGMENT, self._fmt_unmap_segment)
        self.register(Opcode.OUTPUT, self._fmt_output)
        self.register(Opcode.INPUT, self._fmt_input)
        self.register(Opcode.LOAD_PROGRAM, self._fmt_load_program)

        # Immediate
        self.register(Opcode.LOAD_VALUE, self._fmt_load_value)

    def register(self, opcode: Opcode, formatter: Formatter) -> None:
        """Register a formatter for an opcode.

        Args:
            opcode: Opcode to format
            formatter: Function that takes a layout and returns assembly text

        Raises:
            RuntimeError: If registry is frozen
            ValueError: If opcode already registered
        """
        if self._frozen:
            raise RuntimeError("Cannot register formatters: registry is frozen")
        if opcode in self._formatters:
            raise ValueError(f"Formatter already registered: {opcode.name}")
        self._formatters[opcode] = formatter

    def freeze(self) -> None:
        """Freeze the registry to prevent further modifications."""
        self._frozen = True

    def is_frozen(self) -> bool:
        """Check if registry is frozen."""
        return self._frozen

    def get_opcodes(self) -> set:
        """Get set of all opcodes with a formatter."""
        return set(self._formatters.keys())

    def format(self, opcode: Opcode, layout: Layout) -> str:
        """Format a decoded instruction.

        Raises:
            KeyError: If opcode has no formatter
        """
        if opcode not in self._formatters:
            raise KeyError(f"No formatter for opcode: {opcode!r}")
        return self._formatters[opcode](layout)

    def render_decoded(self, result: DecodeResult) -> str:
        """Render a DecodeResult as assembly text or a data directive."""
        if not result.valid:
            return format_data(result.word)
        return self.format(result.opcode, result.layout)

    def render(self, word: int) -> str:
        """Decode and render an instruction word."""
        return self.render_decoded(decode(word))

    # =========================================================================
    # Three-Register Formatters
    # =========================================================================

    def _fmt_cmov(self, layout: ThreeRegister) -> str:
        return f"if (r{layout.c} != 0) r{layout.a} := r{layout.b};"

    def _fmt_load(self, layout: ThreeRegister) -> str:
        return f"r{layout.a} := m[r{layout.b}][r{layout.c}];"

    def _fmt_store(self, layout: ThreeRegister) -> str:
        return f"m[r{layout.a}][r{layout.b}] := r{layout.c};"

    @staticmethod
    def _binary(operator: str) -> Formatter:
        """Build a formatter for `rA := rB <operator> rC;`."""
        def fmt(layout: ThreeRegister) -> str:
            return f"r{layout.a} := r{layout.b} {operator} r{layout.c};"
        return fmt

    # =========================================================================
    # Machine Control Formatters
    # =========================================================================

    def _fmt_halt(self, layout: Layout) -> str:
        return "halt"

    def _fmt_map_segment(self, layout: TwoRegister) -> str:
        return f"r{layout.b} := map segment (r{layout.c} words);"

    def _fmt_unmap_segment(self, layout: OneRegister) -> str:
        return f"unmap r{layout.c};"

    def _fmt_output(self, layout: OneRegister) -> str:
        return f"output r{layout.c};"

    def _fmt_input(self, layout: OneRegister) -> str:
        return f"r{layout.c} := input();"

    def _fmt_load_program(self, layout: TwoRegister) -> str:
        return f"goto r{layout.c} in program m[r{layout.b}];"

    # =========================================================================
    # Immediate Formatters
    # =========================================================================

    def _fmt_load_value(self, layout: Immediate) -> str:
        """LOAD_VALUE reads RL/VL, never RA/RB/RC."""
        return f"r{layout.reg} := {layout.value};"


# Singleton registry instance
_registry: Optional[MnemonicRegistry] = None


def get_registry() -> MnemonicRegistry:
    """Get the singleton mnemonic registry instance.

    Returns:
        The frozen MnemonicRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = MnemonicRegistry()
    return _registry


def render(word: int) -> str:
    """Render an instruction word as a single line of assembly text.

    Args:
        word: 32-bit instruction word

    Returns:
        Assembly text, or a `.data` directive for unrecognized opcodes
    """
    return get_registry().render(word)
