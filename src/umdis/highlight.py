"""Bit-level view of instruction words.

Splits the 32-character binary form of a word (MSB first) into spans
labelled by the field they belong to, then optionally wraps each span in
a colorama style. Span computation uses the same classifier and layout
field tables as the renderer, so both always agree on how a word is read.

Roles:
    opcode: bits 31..28
    ra, rb, rc: three-register operand fields
    rl, value: Load Value register and immediate
    unused: bits the layout does not read
    data: a whole word with an unrecognized opcode
"""

from dataclasses import dataclass
from typing import Dict, List

from colorama import Fore, Style

from .fields import OP, WORD_BITS
from .layout import layout_for
from .opcodes import Unrecognized, classify


RESET = Style.RESET_ALL

ROLE_COLORS: Dict[str, str] = {
    "opcode": Style.BRIGHT + Fore.MAGENTA,
    "unused": Style.DIM,
    "ra": Style.BRIGHT + Fore.RED,
    "rb": Style.BRIGHT + Fore.GREEN,
    "rc": Style.BRIGHT + Fore.BLUE,
    "rl": Style.BRIGHT + Fore.YELLOW,
    "value": Fore.LIGHTCYAN_EX,
}


@dataclass(frozen=True)
class BitSpan:
    """A run of bits sharing one role.

    Attributes:
        role: Field role (see module docstring)
        msb: Index of the leftmost bit of the span
        lsb: Index of the rightmost bit of the span
        bits: The span's characters of the binary string
    """
    role: str
    msb: int
    lsb: int
    bits: str


def _span(role: str, binary: str, msb: int, lsb: int) -> BitSpan:
    return BitSpan(role, msb, lsb, binary[WORD_BITS - 1 - msb:WORD_BITS - lsb])


def highlight_spans(word: int) -> List[BitSpan]:
    """Partition a word's binary string into role-labelled spans.

    Args:
        word: 32-bit instruction word

    Returns:
        Spans ordered from bit 31 down to bit 0
    """
    binary = format(word, f"0{WORD_BITS}b")
    opcode = classify(word)
    if isinstance(opcode, Unrecognized):
        return [_span("data", binary, WORD_BITS - 1, 0)]

    spans = [_span("opcode", binary, OP.msb, OP.lsb)]
    next_bit = OP.lsb - 1
    fields = sorted(layout_for(opcode).FIELDS, key=lambda entry: entry[2].msb, reverse=True)
    for _, role, field in fields:
        if field.msb < next_bit:
            spans.append(_span("unused", binary, next_bit, field.msb + 1))
        spans.append(_span(role, binary, field.msb, field.lsb))
        next_bit = field.lsb - 1
    if next_bit >= 0:
        spans.append(_span("unused", binary, next_bit, 0))
    return spans


def colorize(spans: List[BitSpan]) -> str:
    """Join spans, wrapping each colored role in its colorama style."""
    parts = []
    for span in spans:
        color = ROLE_COLORS.get(span.role)
        if color:
            parts.append(f"{color}{span.bits}{RESET}")
        else:
            parts.append(span.bits)
    return "".join(parts)


def highlight(word: int, color: bool = True) -> str:
    """Render a word's binary string, colored by field when `color` is set.

    Without color the result is exactly the 32-character binary string.
    """
    spans = highlight_spans(word)
    if not color:
        return "".join(span.bits for span in spans)
    return colorize(spans)
