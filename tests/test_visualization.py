"""
Tests for the design plots (rendered off-screen).
Run with: pytest tests/
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from cordic_design.visualization import CordicDesignPlotter


def test_plot_gain_convergence(tmp_path):
    path = tmp_path / "gain.png"
    fig, ax = CordicDesignPlotter.plot_gain_convergence(
        max_stage_count=16, save_path=str(path), show=False
    )

    assert path.exists()
    assert len(ax.lines[0].get_xdata()) == 17
    plt.close(fig)


def test_plot_phase_error_versus_phase_bits():
    fig, ax = CordicDesignPlotter.plot_phase_error_versus_phase_bits(
        stage_count=12, phase_bit_range=range(8, 17), show=False
    )

    assert len(ax.lines[0].get_ydata()) == 9
    plt.close(fig)


def test_plot_angle_table():
    fig, (ax_angle, ax_error) = CordicDesignPlotter.plot_angle_table(10, 16, show=False)

    assert len(ax_error.patches) == 10
    plt.close(fig)
