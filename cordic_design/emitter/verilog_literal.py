"""
Verilog Literal Formatting
==========================

Angle values are written as sized hexadecimal Verilog literals. The
downstream generator expects values wider than 16 bits to be split
into a high group and a low 16-bit group joined by an underscore:

    phase_bits <= 16:   12'h1a3
    phase_bits >  16:   24'h00_1a3f
                        32'h2000_0000

Underscores are legal inside Verilog numbers and are ignored by the
compiler; the split only keeps wide constants readable.
"""

# Bits at or below which a literal is a single hex group
SINGLE_GROUP_MAXIMUM_BITS: int = 16


def hex_digit_count(bits: int) -> int:
    """Return the number of hex digits needed for a field of `bits` bits."""
    return (bits + 3) // 4


def format_hex_digits(value: int, width: int) -> str:
    """
    Format an unsigned value as the digit part of a Verilog hex literal.

    Args:
        value: Unsigned value, must lie in [0, 2^width).
        width: Literal width in bits.

    Returns:
        str: Lowercase hex digits, zero-padded, split at bit 16 for
            widths above 16 bits.

    Raises:
        ValueError: If the value does not fit in the literal width.
    """
    if value < 0 or value >= (1 << width):
        raise ValueError(
            f"Value {value} does not fit in a {width}-bit literal"
        )

    if width <= SINGLE_GROUP_MAXIMUM_BITS:
        return f"{value:0{hex_digit_count(width)}x}"

    high_bits: int = value >> SINGLE_GROUP_MAXIMUM_BITS
    low_bits: int = value & 0xFFFF
    high_digits: int = hex_digit_count(width - SINGLE_GROUP_MAXIMUM_BITS)

    return f"{high_bits:0{high_digits}x}_{low_bits:04x}"


def format_verilog_literal(value: int, width: int) -> str:
    """Format a value as a complete sized literal, e.g. 8'h12."""
    return f"{width}'h{format_hex_digits(value, width)}"
