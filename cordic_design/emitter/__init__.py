"""
Emitter Module
==============

This module turns the numeric angle table into Verilog text:
- verilog_literal: sized hex literals with the 16-bit group split
- angle_table_emitter: the full table with its diagnostic comments
"""

from .verilog_literal import (
    hex_digit_count,
    format_hex_digits,
    format_verilog_literal
)
from .angle_table_emitter import (
    emit_angle_table,
    format_angle_table,
    write_angle_table_file
)

__all__ = [
    "hex_digit_count",
    "format_hex_digits",
    "format_verilog_literal",
    "emit_angle_table",
    "format_angle_table",
    "write_angle_table_file"
]
