"""umdis: Universal Machine disassembler.

This package decodes 32-bit Universal Machine instruction words into
readable assembly text, with an optional binary view that highlights which
bits belong to which instruction field.

Architecture:
    WORD -> CLASSIFY -> LAYOUT -> REGISTRY -> TEXT
               |          |
          [Opcode or  [Operand
         Unrecognized] fields] -> HIGHLIGHT -> colored bits

Modules:
    fields: Bitfield descriptors and extraction
    opcodes: Opcode enum and classifier
    layout: Per-opcode operand layouts
    decoder: DecodeResult (classification + layout)
    registry: Frozen per-opcode text formatters and render()
    highlight: Field-highlighted binary view
    loader: Big-endian program loading
    disassembler: Listing orchestrator
    cli: Command line entry point
"""

__version__ = "0.1.0"
__author__ = "umdis Project"

from .fields import Field, extract
from .opcodes import Opcode, Unrecognized, classify
from .layout import layout_for
from .decoder import DecodeResult, decode
from .registry import MnemonicRegistry, render
from .highlight import BitSpan, highlight, highlight_spans
from .disassembler import Disassembler, ListingEntry

__all__ = [
    "Field", "extract",
    "Opcode", "Unrecognized", "classify",
    "layout_for",
    "DecodeResult", "decode",
    "MnemonicRegistry", "render",
    "BitSpan", "highlight", "highlight_spans",
    "Disassembler", "ListingEntry",
]
