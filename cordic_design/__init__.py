"""
CORDIC Pipeline Parameter Designer
==================================

This package derives the numeric parameters of a pipelined CORDIC
(COordinate Rotation DIgital Computer) before it is written in Verilog:
the phase-accumulator width, the number of stages, the fixed-point
angle of every stage, and the gain and quantization-error statistics
that go with them.

The result is emitted as a Verilog angle table that a hardware-module
generator pastes verbatim into the CORDIC it builds.

Package Structure:
- parameters/: Phase-bit and stage-count selection
- models/: Angle quantization, gain and error models
- emitter/: Verilog literal formatting and the angle table
- design/: Design configuration and calculator
- visualization/: Plotting tools for choosing parameters
"""

from .parameters import (
    SelectionResult,
    select_phase_bits,
    select_stage_count,
)
from .models import (
    AngleTableEntry,
    compute_angle_table,
    cordic_gain,
    gain_annihilation_constant,
    phase_quantization_std_dev,
    phase_quantization_variance,
    transform_quantization_variance,
)
from .emitter import (
    emit_angle_table,
    format_angle_table,
    format_hex_digits,
    format_verilog_literal,
    write_angle_table_file,
)
from .design import (
    CordicDesign,
    CordicDesignCalculator,
    CordicDesignConfiguration,
)

# The CORDIC literature simply calls this "the gain"
gain = cordic_gain

__version__ = "1.0.0"

__all__ = [
    "SelectionResult",
    "select_phase_bits",
    "select_stage_count",
    "AngleTableEntry",
    "compute_angle_table",
    "cordic_gain",
    "gain",
    "gain_annihilation_constant",
    "phase_quantization_std_dev",
    "phase_quantization_variance",
    "transform_quantization_variance",
    "emit_angle_table",
    "format_angle_table",
    "format_hex_digits",
    "format_verilog_literal",
    "write_angle_table_file",
    "CordicDesign",
    "CordicDesignCalculator",
    "CordicDesignConfiguration",
]
