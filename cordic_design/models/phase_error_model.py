"""
Phase Quantization Error Model
==============================

Truncating each stage's angle to the phase grid leaves a small residual
rotation error per stage. Treating those residuals as independent (each
stage rotates by a geometrically shrinking, effectively unrelated
angle), their variances simply add:

    variance = sum_k ((phase_value_k - theta_k * scale) / scale)^2

The result is in radians^2.

Note that truncation also biases the error toward negative values. The
variance model assumes zero-mean errors and does not capture that bias.
"""

import numpy as np

from .angle_quantization import phase_scale, scaled_stage_angle


def phase_quantization_variance(stage_count: int, phase_bits: int) -> float:
    """
    Compute the accumulated phase quantization variance.

    Args:
        stage_count: Number of CORDIC stages.
        phase_bits: Width of the phase accumulator in bits.

    Returns:
        float: Sum of squared per-stage angle errors, in radians^2.
    """
    variance: float = 0.0
    scale: float = phase_scale(phase_bits)

    for stage_index in range(stage_count):
        scaled_angle = scaled_stage_angle(stage_index, phase_bits)
        phase_value = int(scaled_angle)

        # Back to radians before squaring
        error = (phase_value - scaled_angle) / scale
        variance += error * error

    return variance


def phase_quantization_std_dev(stage_count: int, phase_bits: int) -> float:
    """Return the standard deviation of the phase error, in radians."""
    return float(np.sqrt(phase_quantization_variance(stage_count, phase_bits)))
