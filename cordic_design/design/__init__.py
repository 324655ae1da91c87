"""
Design Module
=============

This module provides the design orchestration layer: a configuration
dataclass that derives missing parameters, and a calculator that
produces the gain, error statistics and angle table for it.
"""

from .cordic_design_calculator import (
    CordicDesign,
    CordicDesignCalculator,
    CordicDesignConfiguration
)

__all__ = ["CordicDesign", "CordicDesignCalculator", "CordicDesignConfiguration"]
