"""
Angle Table
===========

This module provides the numeric content of a CORDIC angle table: one
entry per stage, in stage order, holding the exact angle next to the
quantized phase value that goes into the hardware.

Text formatting of the table lives in the emitter package, so the
numbers here can be checked without caring about the Verilog layout.
"""

import numpy as np
from dataclasses import dataclass
from typing import List

from .angle_quantization import micro_rotation_angle, stage_phase_value


@dataclass(frozen=True)
class AngleTableEntry:
    """
    One row of the CORDIC angle table.

    Attributes:
        stage_index: Zero-based stage index.
        angle_radians: Exact micro-rotation angle in radians.
        angle_degrees: The same angle in degrees, for display.
        phase_value: Truncated angle in phase-accumulator units.
    """
    stage_index: int
    angle_radians: float
    angle_degrees: float
    phase_value: int


def compute_angle_table(stage_count: int, phase_bits: int) -> List[AngleTableEntry]:
    """
    Compute the angle table for a CORDIC pipeline.

    Args:
        stage_count: Number of CORDIC stages.
        phase_bits: Width of the phase accumulator in bits.

    Returns:
        List[AngleTableEntry]: One entry per stage, stage 0 first.
    """
    table: List[AngleTableEntry] = []

    for stage_index in range(stage_count):
        angle_radians = micro_rotation_angle(stage_index)
        table.append(AngleTableEntry(
            stage_index=stage_index,
            angle_radians=angle_radians,
            angle_degrees=angle_radians * 180.0 / np.pi,
            phase_value=stage_phase_value(stage_index, phase_bits)
        ))

    return table
