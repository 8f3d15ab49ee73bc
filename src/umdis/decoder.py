"""Instruction decode for umdis.

Combines opcode classification and layout resolution into a single
DecodeResult per word:

    word -> classify -> Opcode | Unrecognized -> layout_for -> fields

Decoding is total: unrecognized opcodes produce a result with no layout
instead of raising.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .layout import Layout, decode_layout
from .opcodes import Opcode, Unrecognized, classify


@dataclass(frozen=True)
class DecodeResult:
    """Result of decoding one instruction word.

    Attributes:
        word: Raw 32-bit instruction word
        opcode: Classified opcode, or Unrecognized
        layout: Extracted operand fields (None when unrecognized)
    """
    word: int
    opcode: Union[Opcode, Unrecognized]
    layout: Optional[Layout] = None

    @property
    def valid(self) -> bool:
        """Whether the word carries a recognized opcode."""
        return isinstance(self.opcode, Opcode)


def decode(word: int) -> DecodeResult:
    """Decode an instruction word.

    Args:
        word: 32-bit instruction word

    Returns:
        DecodeResult with opcode and, for recognized opcodes, the layout
    """
    opcode = classify(word)
    if isinstance(opcode, Unrecognized):
        return DecodeResult(word=word, opcode=opcode)
    return DecodeResult(word=word, opcode=opcode, layout=decode_layout(opcode, word))


def decode_all(words: Iterable[int]) -> List[DecodeResult]:
    """Decode a sequence of words, preserving order."""
    return [decode(word) for word in words]
