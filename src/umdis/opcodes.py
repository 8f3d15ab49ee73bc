"""Opcode classification for Universal Machine instruction words.

The top four bits of a word select one of 14 operations. The two remaining
codes (14, 15) have no operation assigned; words carrying them classify as
Unrecognized and are rendered as raw data rather than rejected.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Union

from .fields import opcode_bits


class Opcode(IntEnum):
    """The 14 Universal Machine operations and their 4-bit codes."""
    CMOV = 0
    LOAD = 1
    STORE = 2
    ADD = 3
    MUL = 4
    DIV = 5
    NAND = 6
    HALT = 7
    MAP_SEGMENT = 8
    UNMAP_SEGMENT = 9
    OUTPUT = 10
    INPUT = 11
    LOAD_PROGRAM = 12
    LOAD_VALUE = 13


@dataclass(frozen=True)
class Unrecognized:
    """Classification of a word whose opcode has no assigned operation.

    Attributes:
        word: The raw instruction word
        code: Its 4-bit opcode value
    """
    word: int
    code: int


# Read-only lookup from 4-bit code to operation
_OPCODES_BY_CODE: Dict[int, Opcode] = {op.value: op for op in Opcode}


def classify(word: int) -> Union[Opcode, Unrecognized]:
    """Classify an instruction word by its opcode field.

    Args:
        word: 32-bit instruction word

    Returns:
        The matching Opcode, or Unrecognized carrying the raw word
    """
    code = opcode_bits(word)
    opcode = _OPCODES_BY_CODE.get(code)
    if opcode is None:
        return Unrecognized(word=word, code=code)
    return opcode
