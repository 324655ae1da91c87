"""
Parameters Module
=================

This module selects the two integers that drive every other
computation:
- Phase-accumulator width from the output width
- Stage count from the phase width (optionally bounded by datapath width)
"""

from .selection_result import SEARCH_CEILING, SelectionResult
from .phase_bit_selection import (
    MINIMUM_PHASE_BITS,
    phase_step_output_change,
    select_phase_bits
)
from .stage_count_selection import select_stage_count

__all__ = [
    "SEARCH_CEILING",
    "SelectionResult",
    "MINIMUM_PHASE_BITS",
    "phase_step_output_change",
    "select_phase_bits",
    "select_stage_count"
]
