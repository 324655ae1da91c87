"""
Stage Count Selection
=====================

The angles atan(2^-(k+1)) shrink by roughly half per stage, so at some
point a stage's angle truncates to zero phase units. Such a stage (and
every stage after it) would rotate by nothing at this phase precision,
so the pipeline stops just before it.

When the width of the arithmetic datapath is known, the shifts also run
out: stage k shifts by k+1 bits, and past the working width the shifted
operand is all sign bits. The width-bounded search therefore also stops
once the stage index reaches the working width.
"""

from typing import Optional

from ..models.angle_quantization import stage_phase_value
from .selection_result import SEARCH_CEILING, SelectionResult


def select_stage_count(
    phase_bits: int,
    working_width: Optional[int] = None
) -> SelectionResult:
    """
    Select the number of CORDIC stages.

    Args:
        phase_bits: Width of the phase accumulator in bits.
        working_width: Optional width of the datapath (adder width).
            If given, the count never exceeds it.

    Returns:
        SelectionResult: The number of stages. converged is False only
            if the search reached SEARCH_CEILING.
    """
    for stage_count in range(SEARCH_CEILING):
        # The next stage would add no rotation at this precision
        if stage_phase_value(stage_count, phase_bits) == 0:
            return SelectionResult(value=stage_count, converged=True)

        if working_width is not None and working_width <= stage_count:
            return SelectionResult(value=stage_count, converged=True)

    return SelectionResult(value=SEARCH_CEILING, converged=False)
