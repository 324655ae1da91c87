"""
Angle Quantization
==================

Every CORDIC stage k rotates by a fixed micro-rotation angle:

    theta_k = atan(2^-(k+1))

so that the rotation itself needs only a shift by (k+1) bits and an
add. The phase accumulator tracks the remaining angle as an unsigned
fraction of a full turn, so each theta_k has to be stored as an
integer in phase units:

    scale       = 2^phase_bits / (2 * pi)        (phase units per radian)
    phase_value = trunc(theta_k * scale)

The conversion TRUNCATES toward zero rather than rounding to nearest.
Existing angle tables were generated this way, and the selection,
error and emission code all share this module so they agree bit for
bit.

FPGA Implementation Note:
    The phase accumulator wraps naturally at 2^phase_bits, which is why
    a full turn maps to exactly 2^phase_bits phase units.
"""

import numpy as np


def micro_rotation_angle(stage_index: int) -> float:
    """Return the exact rotation angle of a stage in radians."""
    return float(np.arctan2(1.0, 2.0 ** (stage_index + 1)))


def phase_scale(phase_bits: int) -> float:
    """
    Return the number of phase-accumulator units per radian.

    Args:
        phase_bits: Width of the phase accumulator in bits (>= 2).

    Returns:
        float: 2^phase_bits / (2*pi).
    """
    return (4.0 * (1 << (phase_bits - 2))) / (np.pi * 2.0)


def scaled_stage_angle(stage_index: int, phase_bits: int) -> float:
    """Return a stage's exact angle expressed in (fractional) phase units."""
    return micro_rotation_angle(stage_index) * phase_scale(phase_bits)


def stage_phase_value(stage_index: int, phase_bits: int) -> int:
    """
    Quantize a stage's angle to the phase-accumulator grid.

    Args:
        stage_index: Zero-based CORDIC stage index.
        phase_bits: Width of the phase accumulator in bits.

    Returns:
        int: The truncated phase value, in [0, 2^phase_bits).
    """
    return int(scaled_stage_angle(stage_index, phase_bits))
