"""Disassembler: listing orchestrator for umdis.

Runs every word of a program through the decode pipeline, in input order:

    WORDS -> DECODE -> REGISTRY (mnemonic) -> HIGHLIGHT (optional) -> LISTING

Each word produces one ListingEntry; format_listing() turns the entries
into the textual report, one line per word.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .decoder import DecodeResult, decode, decode_all
from .highlight import highlight
from .registry import get_registry


logger = logging.getLogger(__name__)


@dataclass
class ListingEntry:
    """One line of a disassembly listing.

    Attributes:
        index: Position of the word in the program
        word: Raw instruction word
        text: Mnemonic or data directive
        bits: Highlighted binary view (None when bits are not shown)
        valid: Whether the opcode was recognized
        opcode_name: Opcode name, or DATA for unrecognized words
    """
    index: int
    word: int
    text: str
    bits: Optional[str] = None
    valid: bool = True
    opcode_name: str = "DATA"


class Disassembler:
    """Disassemble a sequence of Universal Machine words.

    Attributes:
        show_bits: Include the highlighted binary view in each line
        color: Color the binary view with ANSI escapes
        entries: Entries of the last disassembled program
    """

    MIN_INDEX_WIDTH = 4

    def __init__(self, show_bits: bool = False, color: bool = False):
        """Initialize the disassembler.

        Args:
            show_bits: Include the binary view of each word
            color: Color the binary view (ignored without show_bits)
        """
        self.show_bits = show_bits
        self.color = color
        self.registry = get_registry()
        self.entries: List[ListingEntry] = []

    def disassemble_word(self, index: int, word: int) -> ListingEntry:
        """Disassemble a single word into a listing entry."""
        return self._entry(index, decode(word))

    def _entry(self, index: int, result: DecodeResult) -> ListingEntry:
        word = result.word
        if not result.valid:
            logger.debug("Word %d (0x%08x) has unrecognized opcode %d",
                         index, word, result.opcode.code)

        return ListingEntry(
            index=index,
            word=word,
            text=self.registry.render_decoded(result),
            bits=highlight(word, color=self.color) if self.show_bits else None,
            valid=result.valid,
            opcode_name=result.opcode.name if result.valid else "DATA",
        )

    def disassemble(self, words: Iterable[int]) -> List[ListingEntry]:
        """Disassemble a program, replacing any previous listing.

        Args:
            words: Instruction words in program order

        Returns:
            Listing entries, one per word, in the same order
        """
        self.entries = [self._entry(i, result) for i, result in enumerate(decode_all(words))]
        return self.entries

    def index_width(self) -> int:
        """Digits used for the index column of the current listing."""
        if not self.entries:
            return self.MIN_INDEX_WIDTH
        return max(self.MIN_INDEX_WIDTH, len(str(self.entries[-1].index)))

    def format_entry(self, entry: ListingEntry, index_width: Optional[int] = None) -> str:
        """Format one listing line: `index: [hex] [bits ]text`."""
        width = index_width if index_width is not None else self.index_width()
        line = f"{entry.index:0{width}d}: [{entry.word:08x}] "
        if entry.bits is not None:
            line += f"{entry.bits} "
        return line + entry.text

    def format_listing(self, header: bool = True) -> str:
        """Format the whole listing.

        Args:
            header: Start with an `<N> instructions` line

        Returns:
            Listing text, lines separated by newlines
        """
        width = self.index_width()
        lines = [f"{len(self.entries)} instructions"] if header else []
        lines.extend(self.format_entry(entry, width) for entry in self.entries)
        return "\n".join(lines)

    def print_listing(self, header: bool = True) -> None:
        """Print the listing to stdout."""
        if header:
            print(f"{len(self.entries)} instructions")
        width = self.index_width()
        for entry in self.entries:
            print(self.format_entry(entry, width))

    def get_summary(self) -> Dict:
        """Get listing summary.

        Returns:
            Dictionary with instruction count, unrecognized count and
            per-opcode counts
        """
        counts = Counter(entry.opcode_name for entry in self.entries if entry.valid)
        return {
            "instructions": len(self.entries),
            "unrecognized": sum(1 for entry in self.entries if not entry.valid),
            "opcodes": dict(counts),
        }
