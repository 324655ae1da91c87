"""
Models Module
=============

This module contains the numeric models of a CORDIC pipeline:
- Angle quantization (exact angle -> phase-accumulator units)
- Gain and its fixed-point correction constant
- Phase and transform quantization error
- The angle table itself
"""

from .angle_quantization import (
    micro_rotation_angle,
    phase_scale,
    scaled_stage_angle,
    stage_phase_value
)
from .gain_model import cordic_gain, gain_annihilation_constant
from .phase_error_model import (
    phase_quantization_variance,
    phase_quantization_std_dev
)
from .transform_error_model import transform_quantization_variance
from .angle_table import AngleTableEntry, compute_angle_table

__all__ = [
    "micro_rotation_angle",
    "phase_scale",
    "scaled_stage_angle",
    "stage_phase_value",
    "cordic_gain",
    "gain_annihilation_constant",
    "phase_quantization_variance",
    "phase_quantization_std_dev",
    "transform_quantization_variance",
    "AngleTableEntry",
    "compute_angle_table"
]
