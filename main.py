"""
CORDIC Pipeline Parameter Designer - Main Entry Point
=====================================================

This is the main entry point for the CORDIC parameter designer.

It shows how to use the package to pick the parameters of a pipelined
CORDIC before writing it in Verilog. The workflow is:
1. Choose the output word width (and optionally the datapath width)
2. Derive the phase-accumulator width
3. Derive the number of stages
4. Check gain and quantization error
5. Emit the Verilog angle table
6. Visualize the trade-offs

Usage:
    python main.py

Or import and use programmatically:
    from main import run_single_design, print_design_table
"""

import sys
from typing import Dict, List, Optional

from cordic_design.design import (
    CordicDesign,
    CordicDesignCalculator,
    CordicDesignConfiguration
)
from cordic_design.parameters import select_phase_bits, select_stage_count
from cordic_design.models import (
    cordic_gain,
    phase_quantization_std_dev,
    transform_quantization_variance
)
from cordic_design.emitter import emit_angle_table
from cordic_design.visualization import CordicDesignPlotter


# ============================================================================
# DESIGN FUNCTIONS
# ============================================================================

def run_single_design(
    output_width: int = 16,
    working_width: Optional[int] = None,
    phase_bits: Optional[int] = None,
    stage_count: Optional[int] = None,
    dropped_bits: int = 0,
    angle_table_path: Optional[str] = None,
    plot_results: bool = False,
    verbose: bool = True
) -> CordicDesign:
    """
    Derive a complete CORDIC design and optionally write its angle table.

    Args:
        output_width: Width of the CORDIC output word in bits.
        working_width: Width of the internal datapath. Caps the
            number of stages if given.
        phase_bits: Override for the phase-accumulator width.
        stage_count: Override for the number of stages.
        dropped_bits: Low-order datapath bits dropped at the output.
        angle_table_path: If given, write the Verilog table there.
            Otherwise it is printed when verbose.
        plot_results: If True, plot the angle table.
        verbose: If True, print the summary and the table.

    Returns:
        CordicDesign: The derived design.
    """
    configuration = CordicDesignConfiguration(
        output_width=output_width,
        working_width=working_width,
        phase_bits=phase_bits,
        stage_count=stage_count,
        dropped_bits=dropped_bits
    )
    calculator = CordicDesignCalculator(configuration)
    design = calculator.derive()

    if verbose:
        design.print_summary()

    if angle_table_path is not None:
        calculator.write_angle_table_file(angle_table_path, verbose=verbose)
    elif verbose:
        print("\n--- Verilog Angle Table ---\n")
        calculator.write_angle_table(sys.stdout)

    if plot_results:
        CordicDesignPlotter.plot_angle_table(design.stage_count, design.phase_bits)

    return design


def print_design_table(
    output_widths: Optional[List[int]] = None,
    dropped_bits: int = 2
) -> Dict[int, Dict[str, float]]:
    """
    Print the derived parameters for a range of output widths.

    Useful for a first look at how phase width, stage count and error
    grow with the output width.

    Args:
        output_widths: Output widths to tabulate.
        dropped_bits: Dropped bits used for the transform error column.

    Returns:
        Dict mapping each output width to its derived values.
    """
    if output_widths is None:
        output_widths = [8, 10, 12, 14, 16, 18, 20, 24]

    print("\n" + "=" * 78)
    print("CORDIC PARAMETERS BY OUTPUT WIDTH")
    print("=" * 78)
    print(
        f"{'Output':<8}{'Phase':<8}{'Stages':<8}{'Gain':<12}"
        f"{'Phase Err (rad)':<18}{'Transform Var':<16}{'Note'}"
    )
    print("-" * 78)

    rows: Dict[int, Dict[str, float]] = {}

    for output_width in output_widths:
        phase_selection = select_phase_bits(output_width)
        stage_selection = select_stage_count(phase_selection.value)

        phase_bits: int = phase_selection.value
        stage_count: int = stage_selection.value
        gain: float = cordic_gain(stage_count)
        phase_error: float = phase_quantization_std_dev(stage_count, phase_bits)
        transform_variance: float = transform_quantization_variance(
            stage_count, dropped_bits
        )

        note: str = ""
        if phase_selection.hit_ceiling or stage_selection.hit_ceiling:
            note = "search hit ceiling"

        print(
            f"{output_width:<8}{phase_bits:<8}{stage_count:<8}{gain:<12.6f}"
            f"{phase_error:<18.3e}{transform_variance:<16.6f}{note}"
        )

        rows[output_width] = {
            "phase_bits": phase_bits,
            "stage_count": stage_count,
            "gain": gain,
            "phase_error_std_dev": phase_error,
            "transform_variance": transform_variance
        }

    print("=" * 78)
    return rows


# ============================================================================
# EXAMPLE USAGE AND MAIN ENTRY POINT
# ============================================================================

def example_basic_design():
    """
    Example 1: Basic design from the output width only.
    """
    print("\n" + "#" * 70)
    print("# EXAMPLE 1: 16-bit Output CORDIC")
    print("#" * 70)

    return run_single_design(output_width=16)


def example_width_bounded_design():
    """
    Example 2: Narrow datapath limiting the number of stages.
    """
    print("\n" + "#" * 70)
    print("# EXAMPLE 2: 12-bit Output, 10-bit Working Width")
    print("#" * 70)

    return run_single_design(output_width=12, working_width=10, dropped_bits=2)


def example_wide_phase_table():
    """
    Example 3: Phase accumulator wider than 16 bits (split literals).
    """
    print("\n" + "#" * 70)
    print("# EXAMPLE 3: 24-bit Phase Accumulator Angle Table")
    print("#" * 70)

    emit_angle_table(sys.stdout, select_stage_count(24).value, 24)


def example_design_plots():
    """
    Example 4: Plots for choosing parameters.
    """
    print("\n" + "#" * 70)
    print("# EXAMPLE 4: Design Trade-off Plots")
    print("#" * 70)

    CordicDesignPlotter.plot_gain_convergence(max_stage_count=24)
    CordicDesignPlotter.plot_phase_error_versus_phase_bits()


if __name__ == "__main__":
    print_design_table()
    example_basic_design()
    example_width_bounded_design()
    example_wide_phase_table()
    example_design_plots()

    print("\n" + "=" * 70)
    print("   DESIGN SESSION COMPLETE")
    print("=" * 70)
    print("\nThe angle tables above can be pasted into the CORDIC module,")
    print("or written to a file with CordicDesignCalculator.write_angle_table_file().")
