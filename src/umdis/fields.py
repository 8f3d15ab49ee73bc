"""Bitfield descriptors for Universal Machine instruction words.

Every instruction is a 32-bit word. Operands live in fixed bit ranges
described by a Field (width, lsb); the standard fields below are the only
ones the machine uses.

Standard Fields:
    RA: Register A of a three-register instruction (bits 8..6)
    RB: Register B (bits 5..3)
    RC: Register C (bits 2..0)
    RL: Register of a Load Value instruction (bits 27..25)
    VL: 25-bit immediate of a Load Value instruction (bits 24..0)
    OP: Opcode (bits 31..28)
"""

from dataclasses import dataclass


WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1


@dataclass(frozen=True)
class Field:
    """A bitfield of an instruction word.

    Attributes:
        width: Number of bits in the field
        lsb: Offset of the least significant bit
    """
    width: int
    lsb: int

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Field width must be positive: {self.width}")
        if self.lsb < 0 or self.width + self.lsb > WORD_BITS:
            raise ValueError(
                f"Field (width={self.width}, lsb={self.lsb}) does not fit in a {WORD_BITS}-bit word"
            )

    @property
    def msb(self) -> int:
        """Index of the most significant bit of the field."""
        return self.lsb + self.width - 1


# Registers A, B, C of a normal instruction
RA = Field(width=3, lsb=6)
RB = Field(width=3, lsb=3)
RC = Field(width=3, lsb=0)

# Load Value register and immediate
RL = Field(width=3, lsb=25)
VL = Field(width=25, lsb=0)

OP = Field(width=4, lsb=28)


def mask(bits: int) -> int:
    """Create a mask of `bits` one bits."""
    return (1 << bits) - 1


def extract(field: Field, word: int) -> int:
    """Extract `field` from an instruction word as an unsigned integer.

    Args:
        field: Field descriptor
        word: 32-bit instruction word

    Returns:
        Field value in [0, 2**field.width)
    """
    return (word >> field.lsb) & mask(field.width)


def opcode_bits(word: int) -> int:
    """Return the raw 4-bit opcode of `word`."""
    return extract(OP, word)
