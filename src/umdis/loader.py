"""Program loading for umdis.

Universal Machine programs are flat sequences of 32-bit big-endian words.
Bytes left over after the last whole word are dropped with a warning.
"""

import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from .fields import WORD_MASK


logger = logging.getLogger(__name__)

WORD_BYTES = 4

HEX_WORD = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")


def words_from_bytes(data: bytes) -> List[int]:
    """Split raw bytes into big-endian 32-bit words.

    Args:
        data: Program bytes

    Returns:
        List of instruction words, in file order
    """
    remainder = len(data) % WORD_BYTES
    if remainder:
        logger.warning("Ignoring %d trailing byte(s) after the last whole word", remainder)
    return [
        int.from_bytes(data[i:i + WORD_BYTES], "big")
        for i in range(0, len(data) - remainder, WORD_BYTES)
    ]


def load(path: Optional[str] = None) -> List[int]:
    """Load a program from a file, or from stdin.

    Args:
        path: Path to the program file; None or "-" reads binary stdin

    Returns:
        List of instruction words

    Raises:
        FileNotFoundError: If path does not exist
    """
    if path is None or path == "-":
        data = sys.stdin.buffer.read()
        source = "<stdin>"
    else:
        program_path = Path(path)
        if not program_path.is_file():
            raise FileNotFoundError(f"Program file not found: {path}")
        data = program_path.read_bytes()
        source = str(program_path)

    words = words_from_bytes(data)
    logger.debug("Loaded %d words from %s", len(words), source)
    return words


def parse_hex_words(text: str) -> List[int]:
    """Parse whitespace- or comma-separated hex words.

    Args:
        text: Words such as "d0000007, 0x70000000"

    Returns:
        List of instruction words

    Raises:
        ValueError: If a token is not hex or exceeds 32 bits
    """
    words = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if not HEX_WORD.fullmatch(token):
            raise ValueError(f"Not a hex word: {token!r}")
        value = int(token, 16)
        if value > WORD_MASK:
            raise ValueError(f"Word does not fit in 32 bits: {token!r}")
        words.append(value)
    return words
