"""
CORDIC Design Calculator
========================

This module ties the parameter searches, the numeric models and the
angle table emitter together for one CORDIC instance.

A design starts from the output word width. Everything else can be
derived from it:

1. Phase-accumulator width from the output width
2. Stage count from the phase width (optionally capped by the
   datapath width)
3. Gain, gain-correction constant and error statistics
4. The Verilog angle table

Any of the derived parameters can be overridden, for example when the
phase width is dictated by an existing NCO.

Usage:
    configuration = CordicDesignConfiguration(output_width=16)
    calculator = CordicDesignCalculator(configuration)
    design = calculator.derive()
    design.print_summary()
    calculator.write_angle_table(sys.stdout)
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, TextIO

from ..parameters import (
    MINIMUM_PHASE_BITS,
    SelectionResult,
    select_phase_bits,
    select_stage_count
)
from ..models import (
    AngleTableEntry,
    compute_angle_table,
    cordic_gain,
    gain_annihilation_constant,
    phase_quantization_variance,
    phase_scale,
    transform_quantization_variance
)
from ..emitter import emit_angle_table, write_angle_table_file

# Widest phase accumulator the downstream 32-bit literals are meant for
MAXIMUM_LITERAL_PHASE_BITS: int = 32


@dataclass
class CordicDesignConfiguration:
    """
    Configuration parameters for a CORDIC design.

    Attributes:
        output_width: Width of the CORDIC output word in bits.
        working_width: Width of the internal datapath. If given, the
            stage count never exceeds it.
        phase_bits: Phase-accumulator width. Derived from output_width
            if None.
        stage_count: Number of stages. Derived from phase_bits (and
            working_width) if None.
        dropped_bits: Low-order datapath bits dropped at the output,
            used by the transform error model.
    """
    # Requirements
    output_width: int = 16
    working_width: Optional[int] = None

    # Overrides (derived in __post_init__ if None)
    phase_bits: Optional[int] = None
    stage_count: Optional[int] = None

    # Error model parameters
    dropped_bits: int = 0

    # Search outcomes (None when the parameter was given explicitly)
    phase_bit_selection: Optional[SelectionResult] = field(default=None, repr=False)
    stage_count_selection: Optional[SelectionResult] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Derive missing parameters, then validate."""
        self._validate_requirements()

        if self.phase_bits is None:
            self.phase_bit_selection = select_phase_bits(self.output_width)
            self.phase_bits = self.phase_bit_selection.value

        if self.stage_count is None:
            self.stage_count_selection = select_stage_count(
                self.phase_bits, self.working_width
            )
            self.stage_count = self.stage_count_selection.value

        self._validate()

    def _validate_requirements(self) -> None:
        """Validate the parameters the searches depend on."""
        if self.output_width < 1:
            raise ValueError("Output width must be at least 1 bit")

        if self.working_width is not None and self.working_width < 1:
            raise ValueError("Working width must be at least 1 bit")

        if self.phase_bits is not None and self.phase_bits < MINIMUM_PHASE_BITS:
            raise ValueError(
                f"Phase accumulator must have at least {MINIMUM_PHASE_BITS} bits"
            )

        if self.stage_count is not None and self.stage_count < 0:
            raise ValueError("Stage count cannot be negative")

        if self.dropped_bits < 0:
            raise ValueError("Dropped bits cannot be negative")

    def _validate(self) -> None:
        """Warn about legal but questionable designs."""
        if self.phase_bit_selection is not None and self.phase_bit_selection.hit_ceiling:
            print(
                f"WARNING: No phase width below {self.phase_bits} bits keeps one "
                f"phase step under half an LSB of a {self.output_width}-bit output. "
                f"Using {self.phase_bits} bits."
            )

        if self.phase_bits > MAXIMUM_LITERAL_PHASE_BITS:
            print(
                f"WARNING: Phase width of {self.phase_bits} bits exceeds "
                f"{MAXIMUM_LITERAL_PHASE_BITS} bits. The angle table literals "
                f"will be wider than a 32-bit word."
            )

        if self.stage_count_selection is not None and self.stage_count_selection.hit_ceiling:
            print(
                f"WARNING: Stage search reached its ceiling of "
                f"{self.stage_count} stages without converging."
            )

        if self.working_width is not None and self.stage_count_selection is not None:
            natural_stage_count: int = select_stage_count(self.phase_bits).value
            if self.stage_count < natural_stage_count:
                print(
                    f"WARNING: Working width of {self.working_width} bits limits "
                    f"the CORDIC to {self.stage_count} stages; "
                    f"{natural_stage_count} stages would still add rotation "
                    f"at {self.phase_bits} phase bits."
                )

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "output_width": self.output_width,
            "working_width": self.working_width,
            "phase_bits": self.phase_bits,
            "stage_count": self.stage_count,
            "dropped_bits": self.dropped_bits
        }


@dataclass
class CordicDesign:
    """
    Derived parameters and statistics of a CORDIC design.

    Attributes:
        configuration: The configuration the design was derived from.
        gain: Magnitude growth of the pipeline.
        gain_annihilation_constant: 32-bit reciprocal gain (scaled by 2^32).
        phase_error_variance: Phase quantization variance (radians^2).
        phase_error_std_dev_radians: Its square root, in radians.
        phase_error_std_dev_units: The same, in phase-accumulator units.
        transform_error_variance: Bit-dropping variance (LSB^2).
        angle_table: One entry per stage.
    """
    configuration: CordicDesignConfiguration

    gain: float = 1.0
    gain_annihilation_constant: int = 0

    phase_error_variance: float = 0.0
    phase_error_std_dev_radians: float = 0.0
    phase_error_std_dev_units: float = 0.0
    transform_error_variance: float = 0.0

    angle_table: List[AngleTableEntry] = field(default_factory=list)

    @property
    def phase_bits(self) -> int:
        return self.configuration.phase_bits

    @property
    def stage_count(self) -> int:
        return self.configuration.stage_count

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the design."""
        summary: Dict[str, Any] = self.configuration.get_summary_dict()
        summary.update({
            "gain": self.gain,
            "gain_annihilation_constant": self.gain_annihilation_constant,
            "phase_error_variance": self.phase_error_variance,
            "phase_error_std_dev_radians": self.phase_error_std_dev_radians,
            "phase_error_std_dev_units": self.phase_error_std_dev_units,
            "transform_error_variance": self.transform_error_variance,
            "phase_values": [entry.phase_value for entry in self.angle_table]
        })
        return summary

    def print_summary(self) -> None:
        """Print a formatted summary of the design."""
        print("\n" + "=" * 70)
        print("CORDIC DESIGN SUMMARY")
        print("=" * 70)

        print("\n--- Configuration ---")
        print(f"  Output Width:           {self.configuration.output_width} bits")
        if self.configuration.working_width is not None:
            print(f"  Working Width:          {self.configuration.working_width} bits")
        print(f"  Phase Bits:             {self.phase_bits}")
        print(f"  Stages:                 {self.stage_count}")
        print(f"  Dropped Bits:           {self.configuration.dropped_bits}")

        print("\n--- Gain ---")
        print(f"  Gain:                   {self.gain:.6f}")
        print(f"  Annihilation Constant:  32'h{self.gain_annihilation_constant:08x}")
        print("  Correction:             multiply, then shift right by 32 bits")

        print("\n--- Quantization Error ---")
        print(f"  Phase Std-Dev:          {self.phase_error_std_dev_units:.2f} units")
        print(f"  Phase Std-Dev:          {self.phase_error_std_dev_radians:.6f} rad")
        print(f"  Transform Variance:     {self.transform_error_variance:.6f} LSB^2")

        print("\n--- Angle Table ---")
        print(f"  {'Stage':<8}{'Degrees':<14}{'Phase Value':<12}")
        print("  " + "-" * 34)
        for entry in self.angle_table:
            print(
                f"  {entry.stage_index:<8}{entry.angle_degrees:<14.6f}"
                f"{entry.phase_value:<12}"
            )

        print("\n" + "=" * 70)


class CordicDesignCalculator:
    """
    Calculator for a CORDIC design.

    Usage:
        calculator = CordicDesignCalculator(
            CordicDesignConfiguration(output_width=12, working_width=16)
        )
        design = calculator.derive()
        calculator.write_angle_table_file("cordic_angles.vh")
    """

    def __init__(self, configuration: CordicDesignConfiguration) -> None:
        """
        Initialize the calculator.

        Args:
            configuration: A validated CordicDesignConfiguration.
        """
        self.configuration: CordicDesignConfiguration = configuration

    @property
    def phase_bits(self) -> int:
        return self.configuration.phase_bits

    @property
    def stage_count(self) -> int:
        return self.configuration.stage_count

    def derive(self) -> CordicDesign:
        """
        Compute gain, error statistics and angle table.

        Returns:
            CordicDesign: The derived design.
        """
        phase_error_variance: float = phase_quantization_variance(
            self.stage_count, self.phase_bits
        )
        phase_error_std_dev: float = float(np.sqrt(phase_error_variance))

        return CordicDesign(
            configuration=self.configuration,
            gain=cordic_gain(self.stage_count),
            gain_annihilation_constant=gain_annihilation_constant(self.stage_count),
            phase_error_variance=phase_error_variance,
            phase_error_std_dev_radians=phase_error_std_dev,
            phase_error_std_dev_units=phase_error_std_dev * phase_scale(self.phase_bits),
            transform_error_variance=transform_quantization_variance(
                self.stage_count, self.configuration.dropped_bits
            ),
            angle_table=compute_angle_table(self.stage_count, self.phase_bits)
        )

    def write_angle_table(self, sink: TextIO) -> None:
        """Write the Verilog angle table to a text sink."""
        emit_angle_table(sink, self.stage_count, self.phase_bits)

    def write_angle_table_file(self, path: str, verbose: bool = True) -> None:
        """
        Write the Verilog angle table to a file.

        Args:
            path: Destination file path.
            verbose: If True, report where the table was written.
        """
        write_angle_table_file(path, self.stage_count, self.phase_bits)

        if verbose:
            print(f"Angle table saved to:  {path}")

    def print_summary(self) -> None:
        """Derive the design and print its summary."""
        self.derive().print_summary()
