"""
Phase Bit Selection
===================

The phase accumulator needs enough bits that its smallest step is
invisible at the output. A step of one phase unit rotates by

    2*pi / 2^phase_bits

radians, which moves a full-scale sine output by about

    sin(2*pi / 2^phase_bits) * (2^output_width - 1)

LSBs. Once that is below half an LSB, further phase bits no longer
change the output, so the search stops at the first width that meets:

    sin(2*pi / 2^phase_bits) * (2^output_width - 1) < 0.5

Fewer than 3 phase bits is never accepted.
"""

import numpy as np

from .selection_result import SEARCH_CEILING, SelectionResult

# Smallest phase accumulator the search will return
MINIMUM_PHASE_BITS: int = 3


def phase_step_output_change(phase_bits: int, output_width: int) -> float:
    """
    Return the output change, in LSBs, caused by one phase step.

    Args:
        phase_bits: Width of the phase accumulator in bits.
        output_width: Width of the output word in bits.

    Returns:
        float: sin(2*pi / 2^phase_bits) * (2^output_width - 1).
    """
    minimum_angle: float = 2.0 * np.pi / float(1 << phase_bits)
    full_scale: int = (1 << output_width) - 1

    return float(np.sin(minimum_angle)) * float(full_scale)


def select_phase_bits(output_width: int) -> SelectionResult:
    """
    Select the minimum phase-accumulator width for an output width.

    Args:
        output_width: Width of the CORDIC output word in bits.

    Returns:
        SelectionResult: The phase width. converged is False when no
            width up to and including SEARCH_CEILING met the half-LSB
            condition, in which case the value is SEARCH_CEILING.
    """
    for phase_bits in range(MINIMUM_PHASE_BITS, SEARCH_CEILING + 1):
        if phase_step_output_change(phase_bits, output_width) < 0.5:
            return SelectionResult(value=phase_bits, converged=True)

    return SelectionResult(value=SEARCH_CEILING, converged=False)
