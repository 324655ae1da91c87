"""
Visualization Module
====================

This module provides plotting functions for choosing CORDIC
parameters.
"""

from .cordic_design_plotter import CordicDesignPlotter

__all__ = ["CordicDesignPlotter"]
