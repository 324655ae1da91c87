"""
Tests for Verilog literal formatting and the angle table emitter.
Run with: pytest tests/
"""

import io

import pytest

from cordic_design.emitter import (
    emit_angle_table,
    format_angle_table,
    format_hex_digits,
    format_verilog_literal,
    hex_digit_count,
    write_angle_table_file,
)
from cordic_design.models import cordic_gain, gain_annihilation_constant


@pytest.mark.parametrize("bits, digits", [(3, 1), (4, 1), (5, 2), (8, 2), (13, 4), (16, 4)])
def test_hex_digit_count(bits, digits):
    assert hex_digit_count(bits) == digits


@pytest.mark.parametrize("value, width, expected", [
    (0x12, 8, "12"),
    (0x5, 12, "005"),
    (0x1234, 16, "1234"),
    (0x0, 3, "0"),
    (0x12345, 17, "1_2345"),
    (0x1abcd, 24, "01_abcd"),
    (0x20000000, 32, "2000_0000"),
    (0xffffffff, 32, "ffff_ffff"),
])
def test_format_hex_digits(value, width, expected):
    assert format_hex_digits(value, width) == expected


def test_format_verilog_literal():
    assert format_verilog_literal(0x12, 8) == "8'h12"
    assert format_verilog_literal(0x1abcd, 24) == "24'h01_abcd"


@pytest.mark.parametrize("value, width", [(256, 8), (-1, 8), (2**32, 32)])
def test_format_hex_digits_rejects_values_outside_width(value, width):
    with pytest.raises(ValueError):
        format_hex_digits(value, width)


def test_single_stage_table_row():
    text = format_angle_table(1, 8)

    assert "\tassign\tcordic_angle[ 0] =  8'h12; //  26.565051 deg\n" in text
    assert "\twire\t[7:0]\tcordic_angle [0:(NSTAGES-1)];\n\n" in text


def test_table_rows_in_stage_order():
    text = format_angle_table(12, 16)
    rows = [line for line in text.splitlines() if line.startswith("\tassign")]

    assert len(rows) == 12
    for stage_index, row in enumerate(rows):
        assert row.startswith(f"\tassign\tcordic_angle[{stage_index:2d}] = 16'h")


def test_wide_phase_rows_are_split():
    text = format_angle_table(4, 24)
    rows = [line for line in text.splitlines() if line.startswith("\tassign")]

    for row in rows:
        literal = row.split("= ")[1].split(";")[0]
        assert literal.startswith("24'h")
        high, low = literal[len("24'h"):].split("_")
        assert len(high) == 2
        assert len(low) == 4


def test_summary_lines():
    text = format_angle_table(1, 8)
    constant = gain_annihilation_constant(1)

    assert f"\t// Gain is {cordic_gain(1):.6f}\n" in text
    assert "\t// Gain is 1.118034\n" in text
    assert f"\t// You can annihilate this gain by multiplying by 32'h{constant:08x}\n" in text
    assert text.endswith("\t// and right shifting by 32 bits.\n")
    assert "\t// Std-Dev    : " in text
    assert "(Radians)\n" in text


def test_every_line_is_tab_indented():
    for line in format_angle_table(8, 12).splitlines():
        assert line == "" or line.startswith("\t")


def test_empty_table():
    text = format_angle_table(0, 8)

    assert "\tassign" not in text
    assert "\t// Gain is 1.000000\n" in text
    assert "32'hffffffff" in text


def test_emission_is_idempotent():
    first = io.StringIO()
    second = io.StringIO()

    emit_angle_table(first, 20, 24)
    emit_angle_table(second, 20, 24)

    assert first.getvalue() == second.getvalue()


def test_sink_errors_propagate():
    class FailingSink:
        def write(self, text):
            raise OSError("disk full")

    with pytest.raises(OSError):
        emit_angle_table(FailingSink(), 4, 8)


def test_write_angle_table_file(tmp_path):
    path = tmp_path / "cordic_angles.vh"

    write_angle_table_file(str(path), 17, 20)

    assert path.read_text() == format_angle_table(17, 20)


LEGACY_PREAMBLE = (
    "\t//\n"
    "\t// In many ways, the key to this whole algorithm lies in the angles\n"
    "\t// necessary to do this.  These angles are also our basic reason for\n"
    "\t// building this CORDIC in C++: Verilog just can't parameterize this\n"
    "\t// much.  Further, these angle's risk becoming unsupportable magic\n"
    "\t// numbers, hence we define these and set them in C++, based upon\n"
    "\t// the needs of our problem, specifically the number of stages and\n"
    "\t// the number of bits required in our phase accumulator\n"
    "\t//\n"
)


def test_single_stage_table_full_text():
    expected = (
        LEGACY_PREAMBLE
        + "\twire\t[7:0]\tcordic_angle [0:(NSTAGES-1)];\n"
        + "\n"
        + "\tassign\tcordic_angle[ 0] =  8'h12; //  26.565051 deg\n"
        + "\t// Std-Dev    : 0.89 (Units)\n"
        + "\t// Phase Quantization: 0.021861 (Radians)\n"
        + "\t// Gain is 1.118034\n"
        + "\t// You can annihilate this gain by multiplying by 32'he4f92e2d\n"
        + "\t// and right shifting by 32 bits.\n"
    )

    assert format_angle_table(1, 8) == expected


def test_split_literal_table_text():
    text = format_angle_table(17, 20)
    lines = text.splitlines(keepends=True)

    assert text.startswith(
        LEGACY_PREAMBLE
        + "\twire\t[19:0]\tcordic_angle [0:(NSTAGES-1)];\n"
        + "\n"
        + "\tassign\tcordic_angle[ 0] = 20'h1_2e40; //  26.565051 deg\n"
    )
    assert len(lines) == 9 + 2 + 17 + 5
    assert lines[-3] == "\t// Gain is 1.164435\n"
    assert text.endswith(
        "\t// You can annihilate this gain by multiplying by 32'hdbd95b16\n"
        "\t// and right shifting by 32 bits.\n"
    )
