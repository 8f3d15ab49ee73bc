"""umdis Interactive Demo.

A Gradio web interface for disassembling Universal Machine words.

Usage:
    cd /path/to/umdis
    python demo/gradio_app.py

Features:
    - Paste hex words or load an example program
    - See the disassembly listing
    - Inspect the field layout of any word, bit by bit
"""

import sys
from pathlib import Path
from typing import Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import gradio as gr
from umdis import Disassembler, highlight_spans
from umdis.loader import parse_hex_words


# =============================================================================
# Example Programs
# =============================================================================

EXAMPLE_PROGRAMS = {
    "Hello": """d2000048  ; r1 := 72 ('H')
    a0000001  ; output r1
    d2000069  ; r1 := 105 ('i')
    a0000001  ; output r1
    d200000a  ; r1 := 10 (newline)
    a0000001  ; output r1
    70000000  ; halt""",

    "Arithmetic": """d0000006  ; r0 := 6
    d2000007  ; r1 := 7
    30000081  ; r2 := r0 + r1
    40000081  ; r2 := r0 * r1
    50000081  ; r2 := r0 / r1
    600000c9  ; r3 := r1 nand r1
    70000000  ; halt""",

    "Segments": """d4000010  ; r2 := 16
    80000002  ; r0 := map segment (r2 words)
    2000000a  ; m[r0][r1] := r2
    10000081  ; r2 := m[r0][r1]
    90000000  ; unmap r0
    c0000001  ; goto r1 in program m[r0]""",

    "Data Words": """e0000000
    f00dcafe
    70000000""",

    "Custom": ""
}


# =============================================================================
# Disassembly Functions
# =============================================================================

def strip_comments(source: str) -> str:
    """Drop `;` comments from each line."""
    return "\n".join(line.split(";", 1)[0] for line in source.splitlines())


def disassemble_program(source: str, show_bits: bool) -> tuple:
    """Disassemble hex source and return results.

    Args:
        source: Hex words, one or more per line, with optional `;` comments
        show_bits: Include the binary view in the listing

    Returns:
        Tuple of (summary_text, listing_text)
    """
    if not source.strip():
        return "Error: No words provided", ""

    try:
        words = parse_hex_words(strip_comments(source))
    except ValueError as e:
        return f"Error: {e}", ""

    disassembler = Disassembler(show_bits=show_bits, color=False)
    disassembler.disassemble(words)

    summary = disassembler.get_summary()
    summary_lines = [
        "LISTING SUMMARY",
        "=" * 40,
        f"Instructions: {summary['instructions']}",
        f"Unrecognized: {summary['unrecognized']}",
    ]
    if summary['opcodes']:
        summary_lines.append("\nOpcodes:")
        for name, count in sorted(summary['opcodes'].items()):
            summary_lines.append(f"  {name}: {count}")

    return "\n".join(summary_lines), disassembler.format_listing()


def inspect_word(source: str, index: Optional[int]) -> list:
    """Return the labelled bit spans of one word for HighlightedText."""
    try:
        words = parse_hex_words(strip_comments(source))
    except ValueError:
        return []
    if not words:
        return []

    position = int(index) if index is not None else 0
    word = words[min(max(position, 0), len(words) - 1)]
    return [(span.bits, span.role) for span in highlight_spans(word)]


def load_example(example_name: str) -> str:
    """Load an example program."""
    return EXAMPLE_PROGRAMS.get(example_name, "")


# =============================================================================
# Gradio Interface
# =============================================================================

ROLE_COLOR_MAP = {
    "opcode": "#c678dd",
    "unused": "#5c6370",
    "ra": "#e06c75",
    "rb": "#98c379",
    "rc": "#61afef",
    "rl": "#e5c07b",
    "value": "#56b6c2",
    "data": "#abb2bf",
}


def create_demo():
    """Create and return the Gradio demo interface."""

    with gr.Blocks(title="umdis Demo", theme=gr.themes.Soft()) as demo:
        gr.Markdown("""
        # umdis: Universal Machine Disassembler

        Decode 32-bit Universal Machine words into readable assembly, and see
        which bits of each word belong to which instruction field.

        **Pipeline**: `word -> classify -> layout -> text`
        """)

        with gr.Row():
            with gr.Column(scale=2):
                gr.Markdown("### Program Words")

                example_dropdown = gr.Dropdown(
                    choices=list(EXAMPLE_PROGRAMS.keys()),
                    value="Hello",
                    label="Load Example"
                )

                program_input = gr.Textbox(
                    value=EXAMPLE_PROGRAMS["Hello"],
                    label="Hex Words",
                    lines=15,
                    placeholder="Enter hex words here..."
                )

                gr.Markdown("### Settings")

                show_bits = gr.Checkbox(
                    value=False,
                    label="Show binary view in listing"
                )

                run_button = gr.Button("Disassemble", variant="primary")

            with gr.Column(scale=3):
                with gr.Row():
                    summary_output = gr.Textbox(
                        label="Summary",
                        lines=10,
                        interactive=False
                    )

                listing_output = gr.Textbox(
                    label="Listing",
                    lines=20,
                    interactive=False
                )

                word_index = gr.Number(
                    value=0,
                    precision=0,
                    label="Inspect word at index"
                )
                bits_output = gr.HighlightedText(
                    label="Field Layout",
                    color_map=ROLE_COLOR_MAP,
                    combine_adjacent=False
                )

        # ISA Reference
        with gr.Accordion("ISA Reference", open=False):
            gr.Markdown("""
            | Code | Instruction | Rendered as |
            |------|-------------|-------------|
            | 0 | Conditional move | `if (rC != 0) rA := rB;` |
            | 1 | Segmented load | `rA := m[rB][rC];` |
            | 2 | Segmented store | `m[rA][rB] := rC;` |
            | 3 | Add | `rA := rB + rC;` |
            | 4 | Multiply | `rA := rB * rC;` |
            | 5 | Divide | `rA := rB / rC;` |
            | 6 | Nand | `rA := rB nand rC;` |
            | 7 | Halt | `halt` |
            | 8 | Map segment | `rB := map segment (rC words);` |
            | 9 | Unmap segment | `unmap rC;` |
            | 10 | Output | `output rC;` |
            | 11 | Input | `rC := input();` |
            | 12 | Load program | `goto rC in program m[rB];` |
            | 13 | Load value | `rL := value;` |
            | 14, 15 | (unassigned) | `.data 0x........` |

            **Fields**: opcode 31..28, A 8..6, B 5..3, C 2..0;
            Load Value uses register 27..25 and a 25-bit value 24..0.
            """)

        # Event handlers
        example_dropdown.change(
            fn=load_example,
            inputs=[example_dropdown],
            outputs=[program_input]
        )

        run_button.click(
            fn=disassemble_program,
            inputs=[program_input, show_bits],
            outputs=[summary_output, listing_output]
        )

        run_button.click(
            fn=inspect_word,
            inputs=[program_input, word_index],
            outputs=[bits_output]
        )

        word_index.change(
            fn=inspect_word,
            inputs=[program_input, word_index],
            outputs=[bits_output]
        )

    return demo


# =============================================================================
# Main
# =============================================================================

if __name__ == "__main__":
    demo = create_demo()
    demo.launch(
        share=False,
        server_name="0.0.0.0",
        server_port=7861,
        show_error=True
    )
