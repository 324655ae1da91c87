"""
Transform Quantization Error Model
==================================

A CORDIC datapath usually carries extra low-order bits through the
stages and drops them at the output. Rounding away those bits adds
uniform quantization noise that is independent of the phase
accumulator.

Per stage, the noise on each axis has a mean square of

    integral_0^1 x^2 dx = 1/3

in units of the dropped LSB, so the two axes (x and y) together give

    stage_variance = (2/3) * (1 / 2^dropped_bits)^2

summed over all stages. The final output rounding adds two more uniform
terms of 1/12 each (one per axis), once rather than per stage:

    variance = N * (2/3) * (1 / 2^dropped_bits)^2 + 2/12

The result is in output LSBs squared.
"""


def transform_quantization_variance(stage_count: int, dropped_bits: int) -> float:
    """
    Compute the variance added by dropping low-order datapath bits.

    Args:
        stage_count: Number of CORDIC stages.
        dropped_bits: Number of low-order bits dropped at the output.

    Returns:
        float: The noise variance in output LSBs squared.
    """
    stage_variance: float = 2.0 * stage_count / 3.0
    drop_scale: float = 1.0 / float(1 << dropped_bits)
    stage_variance *= drop_scale * drop_scale

    return stage_variance + (2.0 / 12.0)
