"""
Tests for the gain, error and angle table models.
Run with: pytest tests/
"""

import math

import pytest

import cordic_design
from cordic_design.models import (
    compute_angle_table,
    cordic_gain,
    gain_annihilation_constant,
    phase_quantization_std_dev,
    phase_quantization_variance,
    phase_scale,
    stage_phase_value,
    transform_quantization_variance,
)

# Classic CORDIC gain limit; without a 45 degree stage the limit is sqrt(2) lower
CLASSIC_GAIN_LIMIT = 1.646760258121
GAIN_LIMIT = CLASSIC_GAIN_LIMIT / math.sqrt(2)


def test_gain_of_zero_stages_is_one():
    assert cordic_gain(0) == 1.0
    assert cordic_design.gain(0) == 1.0


def test_gain_of_one_stage():
    assert cordic_gain(1) == pytest.approx(math.sqrt(1.25))


def test_gain_strictly_increasing():
    gains = [cordic_gain(n) for n in range(21)]

    for smaller, larger in zip(gains, gains[1:]):
        assert larger > smaller


def test_gain_bounded():
    for stage_count in range(65):
        assert 1.0 <= cordic_gain(stage_count) < GAIN_LIMIT + 1e-9 < CLASSIC_GAIN_LIMIT

    assert cordic_gain(64) == pytest.approx(GAIN_LIMIT, abs=1e-9)


def test_annihilation_constant_cancels_gain():
    for stage_count in range(1, 33):
        gain = cordic_gain(stage_count)
        constant = gain_annihilation_constant(stage_count)

        assert constant == int((1.0 / gain) * 2.0**32)
        assert constant < 2**32
        assert constant * gain / 2**32 == pytest.approx(1.0, abs=1e-9)


def test_annihilation_constant_saturates_without_stages():
    assert gain_annihilation_constant(0) == 0xFFFFFFFF


def test_stage_phase_value_truncates():
    # atan(0.5) * 256 / (2*pi) = 18.89
    assert phase_scale(8) == pytest.approx(256 / (2 * math.pi))
    assert stage_phase_value(0, 8) == 18


def test_phase_variance_single_stage():
    scale = 256 / (2 * math.pi)
    scaled = math.atan(0.5) * scale
    expected = ((int(scaled) - scaled) / scale) ** 2

    assert phase_quantization_variance(1, 8) == pytest.approx(expected)
    assert phase_quantization_std_dev(1, 8) == pytest.approx(math.sqrt(expected))


def test_phase_variance_of_no_stages_is_zero():
    assert phase_quantization_variance(0, 16) == 0.0


@pytest.mark.parametrize("stage_count", [1, 4, 10, 20])
def test_phase_variance_non_increasing_in_phase_bits(stage_count):
    variances = [phase_quantization_variance(stage_count, bits) for bits in range(3, 33)]

    assert all(variance >= 0 for variance in variances)
    for coarse, fine in zip(variances, variances[1:]):
        assert fine <= coarse


@pytest.mark.parametrize("stage_count", [0, 1, 5, 16])
@pytest.mark.parametrize("dropped_bits", [0, 1, 4, 8])
def test_transform_variance_closed_form(stage_count, dropped_bits):
    expected = 2 * stage_count / 3 * (2.0**-dropped_bits) ** 2 + 1 / 6

    assert transform_quantization_variance(stage_count, dropped_bits) == expected


def test_transform_variance_ignores_stages_with_many_dropped_bits():
    assert transform_quantization_variance(16, 30) == pytest.approx(1 / 6)


def test_angle_table_first_stage():
    table = compute_angle_table(1, 8)

    assert len(table) == 1
    assert table[0].stage_index == 0
    assert table[0].phase_value == 0x12
    assert table[0].angle_radians == pytest.approx(math.atan(0.5))
    assert table[0].angle_degrees == pytest.approx(26.565051, abs=1e-6)


@pytest.mark.parametrize("phase_bits", [3, 8, 12, 16, 17, 24, 32])
def test_angle_table_values_fit_phase_accumulator(phase_bits):
    table = compute_angle_table(24, phase_bits)

    assert [entry.stage_index for entry in table] == list(range(24))
    for entry in table:
        assert 0 <= entry.phase_value < 2**phase_bits

    phase_values = [entry.phase_value for entry in table]
    assert phase_values == sorted(phase_values, reverse=True)


def test_angle_table_is_empty_without_stages():
    assert compute_angle_table(0, 16) == []
