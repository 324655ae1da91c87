"""
Angle Table Emitter
===================

This module writes the CORDIC angle table as Verilog text. The output
is pasted verbatim into the generated CORDIC module, so the layout of
every line is fixed:

    //
    // ... explanatory comment ...
    //
    wire    [7:0]   cordic_angle [0:(NSTAGES-1)];

    assign  cordic_angle[ 0] =  8'h12; //  26.565051 deg
    ...
    // Std-Dev    : <std-dev> (Units)
    // Phase Quantization: <std-dev> (Radians)
    // Gain is <gain>
    // You can annihilate this gain by multiplying by 32'h<constant>
    // and right shifting by 32 bits.

The comment preamble is kept word for word as it appears in existing
tables, so diffs against them stay empty.

The one line that differs from legacy tables is "Std-Dev (Units)". Older
tables printed the phase VARIANCE under that label (0.00 for almost any
table); this one prints the standard deviation in phase units, i.e. the
radians figure on the next line times the phase scale.

Each line is indented with a single tab. The sink is anything with a
write() method; nothing is buffered and write errors are left to the
caller.
"""

import io
from typing import TextIO

from ..models.angle_quantization import phase_scale
from ..models.angle_table import compute_angle_table
from ..models.gain_model import cordic_gain, gain_annihilation_constant
from ..models.phase_error_model import phase_quantization_std_dev
from .verilog_literal import format_hex_digits

ANGLE_TABLE_PREAMBLE: str = (
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


def format_angle_declaration(phase_bits: int) -> str:
    """Return the wire declaration that holds the angle table."""
    return f"\twire\t[{phase_bits - 1}:0]\tcordic_angle [0:(NSTAGES-1)];\n\n"


def format_angle_assignment(
    stage_index: int,
    phase_value: int,
    phase_bits: int,
    angle_degrees: float
) -> str:
    """Return the assign statement of one table entry."""
    digits: str = format_hex_digits(phase_value, phase_bits)
    return (
        f"\tassign\tcordic_angle[{stage_index:2d}] = "
        f"{phase_bits:2d}'h{digits}; //{angle_degrees:11.6f} deg\n"
    )


def format_angle_table_summary(stage_count: int, phase_bits: int) -> str:
    """Return the diagnostic comment block that follows the table."""
    std_dev_radians: float = phase_quantization_std_dev(stage_count, phase_bits)
    std_dev_units: float = std_dev_radians * phase_scale(phase_bits)
    gain: float = cordic_gain(stage_count)
    annihilation_constant: int = gain_annihilation_constant(stage_count)

    return (
        f"\t// Std-Dev    : {std_dev_units:.2f} (Units)\n"
        f"\t// Phase Quantization: {std_dev_radians:.6f} (Radians)\n"
        f"\t// Gain is {gain:.6f}\n"
        f"\t// You can annihilate this gain by multiplying by "
        f"32'h{annihilation_constant:08x}\n"
        f"\t// and right shifting by 32 bits.\n"
    )


def emit_angle_table(sink: TextIO, stage_count: int, phase_bits: int) -> None:
    """
    Write the CORDIC angle table to a text sink.

    Args:
        sink: Writable text stream (file, StringIO, sys.stdout, ...).
        stage_count: Number of CORDIC stages.
        phase_bits: Width of the phase accumulator in bits.
    """
    sink.write(ANGLE_TABLE_PREAMBLE)
    sink.write(format_angle_declaration(phase_bits))

    for entry in compute_angle_table(stage_count, phase_bits):
        sink.write(format_angle_assignment(
            entry.stage_index,
            entry.phase_value,
            phase_bits,
            entry.angle_degrees
        ))

    sink.write(format_angle_table_summary(stage_count, phase_bits))


def format_angle_table(stage_count: int, phase_bits: int) -> str:
    """Return the emitted angle table as a string."""
    buffer = io.StringIO()
    emit_angle_table(buffer, stage_count, phase_bits)
    return buffer.getvalue()


def write_angle_table_file(path: str, stage_count: int, phase_bits: int) -> None:
    """
    Write the angle table to a file, replacing any previous content.

    Args:
        path: Destination file path, e.g. "cordic_angles.vh".
        stage_count: Number of CORDIC stages.
        phase_bits: Width of the phase accumulator in bits.
    """
    with open(path, "w") as angle_file:
        emit_angle_table(angle_file, stage_count, phase_bits)
