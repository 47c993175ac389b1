"""
dumptermios - decode a raw ``struct termios`` captured to a file.

Author: LinuxCNC Community
License: GPL v2 or later
"""

from .baud import BAUD_RATES, format_baud_rate, lookup_baud_rate
from .dump import TermiosDumper
from .layout import (
    DEFAULT_LAYOUT,
    LAYOUTS,
    TermiosAttributes,
    TermiosDecodeError,
    decode_attributes,
    read_attributes,
)
from .render import render_control_chars, render_flags, serial_parameters

__version__ = '1.0.0'

__all__ = [
    'BAUD_RATES',
    'DEFAULT_LAYOUT',
    'LAYOUTS',
    'TermiosAttributes',
    'TermiosDecodeError',
    'TermiosDumper',
    'decode_attributes',
    'format_baud_rate',
    'lookup_baud_rate',
    'read_attributes',
    'render_control_chars',
    'render_flags',
    'serial_parameters',
]
