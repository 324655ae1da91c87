"""
CORDIC Design Plotter
=====================

This module provides plots that help choose CORDIC parameters.

Plots included:
1. Gain convergence versus number of stages
2. Phase quantization error versus phase-accumulator width
3. Angle table: exact versus quantized angles, with per-stage residuals
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Tuple, Sequence

from ..models import (
    compute_angle_table,
    cordic_gain,
    phase_quantization_std_dev,
    phase_scale
)
from ..parameters import select_stage_count

# Limit of the gain as the number of stages grows (no 45 degree stage)
ASYMPTOTIC_GAIN: float = 1.646760258121 / np.sqrt(2.0)


class CordicDesignPlotter:
    """
    Plotting utilities for CORDIC parameter selection.

    All methods are static to allow easy use without instantiation.
    Each returns the figure and axes so callers can adjust or save them.
    """

    DEFAULT_SINGLE_PLOT_SIZE: Tuple[int, int] = (12, 6)
    DEFAULT_DOUBLE_PLOT_SIZE: Tuple[int, int] = (12, 9)

    @staticmethod
    def _finish(fig: plt.Figure, save_path: Optional[str], show: bool) -> None:
        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Figure saved to:  {save_path}")

        if show:
            plt.show()

    @staticmethod
    def plot_gain_convergence(
        max_stage_count: int = 32,
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Tuple[plt.Figure, plt.Axes]:
        """
        Plot the CORDIC gain against the number of stages.

        Args:
            max_stage_count: Largest stage count to plot.
            save_path: If provided, save figure to this path.
            show: If True, display the figure.
        """
        stage_counts: np.ndarray = np.arange(max_stage_count + 1)
        gains: np.ndarray = np.array([cordic_gain(int(n)) for n in stage_counts])

        fig, ax = plt.subplots(figsize=CordicDesignPlotter.DEFAULT_SINGLE_PLOT_SIZE)
        ax.plot(stage_counts, gains, 'bo-', linewidth=1.0, markersize=4, label='Gain')
        ax.axhline(
            y=ASYMPTOTIC_GAIN, color='r', linestyle='--', linewidth=0.8,
            label=f'Limit ({ASYMPTOTIC_GAIN:.6f})'
        )
        ax.set_xlabel('Number of Stages', fontsize=10)
        ax.set_ylabel('Gain', fontsize=10)
        ax.set_title('CORDIC Gain Convergence', fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='lower right', fontsize=9)

        CordicDesignPlotter._finish(fig, save_path, show)
        return fig, ax

    @staticmethod
    def plot_phase_error_versus_phase_bits(
        stage_count: Optional[int] = None,
        phase_bit_range: Sequence[int] = range(8, 33),
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Tuple[plt.Figure, plt.Axes]:
        """
        Plot the phase quantization error against the phase width.

        Args:
            stage_count: Fixed number of stages. If None, each phase
                width uses its own selected stage count.
            phase_bit_range: Phase widths to evaluate.
            save_path: If provided, save figure to this path.
            show: If True, display the figure.
        """
        phase_bits: np.ndarray = np.array(list(phase_bit_range))
        std_devs: list = []

        for bits in phase_bits:
            stages = stage_count
            if stages is None:
                stages = select_stage_count(int(bits)).value
            std_devs.append(phase_quantization_std_dev(stages, int(bits)))

        label: str = (
            f'{stage_count} stages' if stage_count is not None
            else 'Selected stage count'
        )

        fig, ax = plt.subplots(figsize=CordicDesignPlotter.DEFAULT_SINGLE_PLOT_SIZE)
        ax.semilogy(phase_bits, std_devs, 'go-', linewidth=1.0, markersize=4, label=label)
        ax.set_xlabel('Phase Accumulator Width (bits)', fontsize=10)
        ax.set_ylabel('Phase Error Std-Dev (radians)', fontsize=10)
        ax.set_title('Phase Quantization Error', fontsize=12, fontweight='bold')
        ax.grid(True, which='both', alpha=0.3)
        ax.legend(loc='upper right', fontsize=9)

        CordicDesignPlotter._finish(fig, save_path, show)
        return fig, ax

    @staticmethod
    def plot_angle_table(
        stage_count: int,
        phase_bits: int,
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Tuple[plt.Figure, Tuple[plt.Axes, plt.Axes]]:
        """
        Plot exact and quantized stage angles, and their residuals.

        Args:
            stage_count: Number of CORDIC stages.
            phase_bits: Width of the phase accumulator in bits.
            save_path: If provided, save figure to this path.
            show: If True, display the figure.
        """
        table = compute_angle_table(stage_count, phase_bits)
        scale: float = phase_scale(phase_bits)

        stages: np.ndarray = np.array([entry.stage_index for entry in table])
        exact: np.ndarray = np.array([entry.angle_radians for entry in table]) * scale
        quantized: np.ndarray = np.array([entry.phase_value for entry in table])

        fig, (ax_angle, ax_error) = plt.subplots(
            2, 1, figsize=CordicDesignPlotter.DEFAULT_DOUBLE_PLOT_SIZE, sharex=True
        )
        fig.suptitle(
            f"CORDIC Angle Table ({stage_count} stages, {phase_bits} phase bits)",
            fontsize=14,
            fontweight='bold'
        )

        # ===== SUBPLOT 1: Angles =====
        ax_angle.semilogy(stages, exact, 'b.-', linewidth=0.8, label='Exact')
        ax_angle.semilogy(
            stages, np.maximum(quantized, 0.5), 'rs',
            markersize=4, label='Truncated'
        )
        ax_angle.set_ylabel('Angle (phase units)', fontsize=10)
        ax_angle.grid(True, which='both', alpha=0.3)
        ax_angle.legend(loc='upper right', fontsize=9)

        # ===== SUBPLOT 2: Residuals =====
        ax_error.bar(stages, quantized - exact, color='m', alpha=0.7)
        ax_error.axhline(y=0, color='k', linewidth=0.5)
        ax_error.set_xlabel('Stage', fontsize=10)
        ax_error.set_ylabel('Error (phase units)', fontsize=10)
        ax_error.grid(True, alpha=0.3)

        CordicDesignPlotter._finish(fig, save_path, show)
        return fig, (ax_angle, ax_error)
