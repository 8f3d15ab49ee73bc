"""Integration tests for listings and the command line."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from umdis import Disassembler
from umdis.cli import main, use_color


HELLO = [
    0xD2000048,  # r1 := 72
    0xA0000001,  # output r1
    0xD2000069,  # r1 := 105
    0xA0000001,  # output r1
    0x70000000,  # halt
]


class TestListing:
    """Test listing entries and formatting."""

    @pytest.fixture
    def disassembler(self):
        return Disassembler()

    def test_entries_in_order(self, disassembler):
        entries = disassembler.disassemble(HELLO)
        assert [e.index for e in entries] == [0, 1, 2, 3, 4]
        assert [e.text for e in entries] == [
            "r1 := 72;", "output r1;", "r1 := 105;", "output r1;", "halt",
        ]
        assert all(e.bits is None for e in entries)

    def test_format_listing(self, disassembler):
        disassembler.disassemble([0x00000000, 0xE0000000])
        assert disassembler.format_listing() == (
            "2 instructions\n"
            "0000: [00000000] if (r0 != 0) r0 := r0;\n"
            "0001: [e0000000] .data 0xe0000000"
        )

    def test_format_listing_without_header(self, disassembler):
        disassembler.disassemble([0x70000000])
        assert disassembler.format_listing(header=False) == "0000: [70000000] halt"

    def test_index_width_grows(self, disassembler):
        disassembler.disassemble([0x70000000] * 12345)
        assert disassembler.index_width() == 5
        assert disassembler.format_entry(disassembler.entries[-1]).startswith("12344: ")

    def test_empty_program(self, disassembler):
        disassembler.disassemble([])
        assert disassembler.format_listing() == "0 instructions"

    def test_disassemble_replaces_listing(self, disassembler):
        disassembler.disassemble(HELLO)
        disassembler.disassemble([0x70000000])
        assert len(disassembler.entries) == 1

    def test_bits_plain(self):
        disassembler = Disassembler(show_bits=True, color=False)
        disassembler.disassemble([0x70000000])
        assert disassembler.format_listing(header=False) == (
            "0000: [70000000] 01110000000000000000000000000000 halt"
        )

    def test_bits_colored(self):
        disassembler = Disassembler(show_bits=True, color=True)
        entry = disassembler.disassemble([0xA0000003])[0]
        assert "\033[" in entry.bits
        assert entry.text == "output r3;"

    def test_summary(self, disassembler):
        disassembler.disassemble(HELLO + [0xF0000000, 0xE0000000])
        summary = disassembler.get_summary()
        assert summary["instructions"] == 7
        assert summary["unrecognized"] == 2
        assert summary["opcodes"] == {"LOAD_VALUE": 2, "OUTPUT": 2, "HALT": 1}

    def test_unrecognized_entry(self, disassembler):
        entry = disassembler.disassemble([0xE0000000])[0]
        assert entry.valid is False
        assert entry.opcode_name == "DATA"


class TestCli:
    """Test the command line entry point."""

    @pytest.fixture
    def program(self, tmp_path):
        path = tmp_path / "hello.um"
        path.write_bytes(b"".join(word.to_bytes(4, "big") for word in HELLO))
        return path

    def test_listing(self, program, capsys):
        assert main([str(program)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "5 instructions"
        assert out[1] == "0000: [d2000048] r1 := 72;"
        assert out[5] == "0004: [70000000] halt"

    def test_quiet(self, program, capsys):
        assert main(["--quiet", str(program)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "0000: [d2000048] r1 := 72;"

    def test_bits_without_tty_are_plain(self, program, capsys):
        """Captured stdout is not a TTY, so no ANSI escapes."""
        assert main(["--bits", str(program)]) == 0
        out = capsys.readouterr().out
        assert "\033[" not in out
        assert "0004: [70000000] 01110000000000000000000000000000 halt" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.um")]) == 1
        assert "Program file not found" in capsys.readouterr().err

    def test_verbose_logs_unrecognized_words(self, tmp_path, caplog):
        path = tmp_path / "data.um"
        path.write_bytes(bytes.fromhex("70000000" "e0000000"))
        assert main(["--verbose", str(path)]) == 0
        assert "Word 1 (0xe0000000) has unrecognized opcode 14" in caplog.text

    def test_default_level_hides_debug(self, tmp_path, caplog):
        path = tmp_path / "data.um"
        path.write_bytes(bytes.fromhex("e0000000"))
        assert main([str(path)]) == 0
        assert "unrecognized opcode" not in caplog.text

    def test_bits_colored_on_tty(self, program, monkeypatch, capsys):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr(sys.stdout, "isatty", lambda: True)
        assert main(["--bits", str(program)]) == 0
        assert "\033[" in capsys.readouterr().out

    def test_no_color_flag_on_tty(self, program, monkeypatch, capsys):
        monkeypatch.setattr(sys.stdout, "isatty", lambda: True)
        assert main(["--bits", "--no-color", str(program)]) == 0
        assert "\033[" not in capsys.readouterr().out


class TestUseColor:
    """Test the color decision for stdout."""

    @pytest.fixture(autouse=True)
    def tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr(sys.stdout, "isatty", lambda: True)

    def test_tty_default(self):
        assert use_color(no_color=False) is True

    def test_no_color_flag(self):
        assert use_color(no_color=True) is False

    @pytest.mark.parametrize("value", ["1", ""])
    def test_no_color_env(self, monkeypatch, value):
        """NO_COLOR disables color whenever it is set, even empty."""
        monkeypatch.setenv("NO_COLOR", value)
        assert use_color(no_color=False) is False

    def test_not_a_tty(self, monkeypatch):
        monkeypatch.setattr(sys.stdout, "isatty", lambda: False)
        assert use_color(no_color=False) is False
