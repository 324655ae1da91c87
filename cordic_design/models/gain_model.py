"""
CORDIC Gain Model
=================

An unscaled CORDIC rotation does not preserve magnitude. Stage k scales
the vector by:

    sqrt(1 + 2^(-2(k+1)))

so a pipeline of N stages grows every output by the product of these
factors. The product converges quickly; past ~20 stages it is
indistinguishable from its limit of ~1.164435. (The textbook figure of
1.646760 also counts a 45 degree stage, atan(2^0), which this pipeline
does not have.)

The gain is removed downstream by multiplying with a 32-bit constant
and shifting right by 32 bits:

    corrected = (value * annihilation_constant) >> 32

VHDL/Verilog Note:
    The constant is always below 2^32 for N >= 1 because the gain is
    strictly greater than 1.
"""

import numpy as np

# Largest value representable in the 32-bit correction multiplier
MAXIMUM_ANNIHILATION_CONSTANT: int = 0xFFFFFFFF


def cordic_gain(stage_count: int) -> float:
    """
    Compute the magnitude growth of an N-stage CORDIC.

    The gain depends only on the number of stages, never on the width
    of the phase accumulator.

    Args:
        stage_count: Number of CORDIC stages (>= 0).

    Returns:
        float: The gain, 1.0 for zero stages.
    """
    gain: float = 1.0

    for stage_index in range(stage_count):
        stage_gain = np.sqrt(1.0 + 2.0 ** (-2.0 * (stage_index + 1)))
        gain = gain * stage_gain

    return float(gain)


def gain_annihilation_constant(stage_count: int) -> int:
    """
    Compute the fixed-point reciprocal of the CORDIC gain.

    The reciprocal is scaled by 4 * 2^30 (= 2^32) so that a multiply
    followed by a right shift of 32 bits cancels the gain.

    Args:
        stage_count: Number of CORDIC stages (>= 0).

    Returns:
        int: Unsigned 32-bit correction constant. Saturates at
            0xFFFFFFFF when the gain is exactly 1 (no stages).
    """
    reciprocal_gain: float = 1.0 / cordic_gain(stage_count)
    constant: int = int(reciprocal_gain * (4.0 * (1 << 30)))

    return min(constant, MAXIMUM_ANNIHILATION_CONSTANT)
