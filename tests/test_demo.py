"""Tests for the Gradio demo callbacks."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "demo"))

import pytest

gr = pytest.importorskip("gradio")

from gradio_app import EXAMPLE_PROGRAMS, disassemble_program, inspect_word, strip_comments


class TestDemoCallbacks:
    """Test the functions wired into the demo interface."""

    def test_strip_comments(self):
        assert strip_comments("70000000 ; halt\ne0000000").split() == ["70000000", "e0000000"]

    def test_hello_example(self):
        summary, listing = disassemble_program(EXAMPLE_PROGRAMS["Hello"], show_bits=False)
        assert "Instructions: 7" in summary
        assert "0000: [d2000048] r1 := 72;" in listing
        assert listing.endswith("0006: [70000000] halt")

    @pytest.mark.parametrize("name", ["Hello", "Arithmetic", "Segments"])
    def test_examples_fully_recognized(self, name):
        summary, _ = disassemble_program(EXAMPLE_PROGRAMS[name], show_bits=False)
        assert "Unrecognized: 0" in summary

    def test_data_words_example(self):
        summary, listing = disassemble_program(EXAMPLE_PROGRAMS["Data Words"], show_bits=True)
        assert "Unrecognized: 2" in summary
        assert ".data 0xf00dcafe" in listing

    def test_empty_source(self):
        summary, listing = disassemble_program("   ", show_bits=False)
        assert summary.startswith("Error")
        assert listing == ""

    def test_bad_hex(self):
        summary, _ = disassemble_program("xyz", show_bits=False)
        assert "Not a hex word" in summary

    def test_inspect_word(self):
        spans = inspect_word("70000000\nd0000007", 1)
        assert spans == [("1101", "opcode"), ("000", "rl"), ("0" * 22 + "111", "value")]

    def test_inspect_word_clamps_index(self):
        assert inspect_word("70000000", 5)[0] == ("0111", "opcode")

    def test_inspect_word_invalid(self):
        assert inspect_word("zzz", 0) == []

    def test_inspect_word_cleared_index(self):
        """A cleared index field arrives as None and shows the first word."""
        assert inspect_word("70000000\nd0000007", None)[0] == ("0111", "opcode")
