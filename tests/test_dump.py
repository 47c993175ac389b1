import io
import struct

import pytest

from dumptermios.dump import DEFAULT_WIDTH, TermiosDumper, terminal_width
from tests.builders import B115200, B9600, pack_glibc

RULE = "-" * 10


def _dumper(**kwargs):
    out = io.StringIO()
    return TermiosDumper(out=out, width=10, **kwargs), out


def test_all_zero_flags_at_9600() -> None:
    dumper, out = _dumper()

    assert dumper.dump(io.BytesIO(pack_glibc())) is True

    lines = out.getvalue().splitlines()
    assert lines[:13] == [
        RULE,
        "c_iflags (0x0000) : ",
        "Description:",
        RULE,
        "c_oflags (0x0000) : ",
        "Description:",
        RULE,
        "c_cflags (0x0000) : ",
        "Parameter : 5N1",
        "Description:",
        RULE,
        "c_lflags (0x0000) : ",
        "Description:",
    ]
    assert lines[13] == RULE
    assert lines[14] == "c_cc characters:"
    assert lines[-3:] == [RULE, "c_ispeed = 9600", "c_ospeed = 9600"]


def test_blocks_appear_in_fixed_order() -> None:
    dumper, out = _dumper()
    dumper.dump(io.BytesIO(pack_glibc(0o002400, 0o000005, 0o000277, 0o105073)))

    text = out.getvalue()
    positions = [text.index(label) for label in
                 ("c_iflags", "c_oflags", "c_cflags", "Parameter", "c_lflags",
                  "c_cc characters:", "c_ispeed", "c_ospeed")]
    assert positions == sorted(positions)
    assert "c_cflags (0x00bf) : CBAUD CSIZE CREAD" in text
    assert "Parameter : 8N1" in text


def test_short_read_writes_nothing() -> None:
    dumper, out = _dumper()
    assert dumper.dump(io.BytesIO(pack_glibc()[:40])) is False
    assert out.getvalue() == ""


def test_empty_stream_fails() -> None:
    dumper, out = _dumper()
    assert dumper.dump(io.BytesIO(b"")) is False
    assert out.getvalue() == ""


def test_unknown_input_speed_is_reported_inline() -> None:
    dumper, out = _dumper()

    assert dumper.dump(io.BytesIO(pack_glibc(iflag=0o000400, ispeed=0o777, ospeed=B115200))) is True

    lines = out.getvalue().splitlines()
    assert "c_ispeed = unknown baud value 511" in lines
    assert "c_ospeed = 115200" in lines
    assert "c_iflags (0x0100) : ICRNL" in lines


def test_heading_is_printed_first() -> None:
    dumper, out = _dumper()
    dumper.dump(io.BytesIO(pack_glibc()), heading="Dumping termios settings for x")
    assert out.getvalue().splitlines()[:2] == ["Dumping termios settings for x", RULE]


def test_kernel_layout() -> None:
    dumper, out = _dumper(layout="kernel", byte_order="little")
    buf = struct.pack("<4IB19s", 0, 0, 0o000260 | B9600, 0, 0, b"\x03")

    assert dumper.dump(io.BytesIO(buf)) is True
    assert out.getvalue().splitlines()[-2:] == ["c_ispeed = 9600", "c_ospeed = 9600"]


def test_pyserial_line() -> None:
    dumper, out = _dumper(show_pyserial=True)
    dumper.dump(io.BytesIO(pack_glibc(cflag=0o001660)))  # CS8 | CREAD | PARENB | PARODD
    assert "pyserial : bytesize=8, parity='O', stopbits=1" in out.getvalue().splitlines()


def test_dump_file(termios_file) -> None:
    path = termios_file(pack_glibc())
    dumper, out = _dumper()
    assert dumper.dump_file(str(path)) is True
    assert out.getvalue().startswith(f"Dumping termios settings for {path}\n")


def test_dump_file_missing(tmp_path) -> None:
    dumper, _ = _dumper()
    with pytest.raises(FileNotFoundError):
        dumper.dump_file(str(tmp_path / "missing"))


def test_rule_width_comes_from_width_source() -> None:
    out = io.StringIO()
    dumper = TermiosDumper(out=out, width_source=lambda stream: 32)
    dumper.dump(io.BytesIO(pack_glibc()))
    assert out.getvalue().splitlines()[0] == "-" * 32


def test_rule_width_falls_back_when_source_reports_zero() -> None:
    dumper = TermiosDumper(out=io.StringIO(), width_source=lambda stream: 0)
    assert dumper.rule() == "-" * DEFAULT_WIDTH


def test_terminal_width_without_a_terminal() -> None:
    assert terminal_width(io.StringIO()) == DEFAULT_WIDTH
