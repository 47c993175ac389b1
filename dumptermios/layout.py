"""
layout.py - decode a raw struct termios

The structure is decoded field by field with an explicit ``struct`` format
per layout, never by overlaying the host's own ``struct termios``.

    glibc     glibc/Linux userland struct termios (tcgetattr), 60 bytes
                0  c_iflag   uint32
                4  c_oflag   uint32
                8  c_cflag   uint32
               12  c_lflag   uint32
               16  c_line    uint8
               17  c_cc      32 bytes (NCCS)
               49  padding   3 bytes
               52  c_ispeed  uint32
               56  c_ospeed  uint32

    kernel    kernel struct termios (TCGETS), 36 bytes
                0  flags     4 x uint32
               16  c_line    uint8
               17  c_cc      19 bytes
              speeds live in the CBAUD / CIBAUD bits of c_cflag

    termios2  kernel struct termios2 (TCGETS2), 44 bytes
                0  kernel struct termios
               36  c_ispeed  uint32
               40  c_ospeed  uint32
"""

import logging
import struct
from collections import namedtuple
from types import MappingProxyType

from .flags import CBAUD, CIBAUD, IBSHIFT

logger = logging.getLogger(__name__)

# Number of named control characters (VINTR .. VEOL2).
NUM_CC_NAMES = 17

BYTE_ORDERS = MappingProxyType({
    'native': '=',
    'little': '<',
    'big': '>',
})

TermiosAttributes = namedtuple(
    'TermiosAttributes',
    ['iflag', 'oflag', 'cflag', 'lflag', 'line', 'cc', 'ispeed', 'ospeed'],
)


class TermiosDecodeError(Exception):
    """Raised when a complete structure could not be read"""


class TermiosLayout:
    """One on-disk struct termios layout"""

    def __init__(self, name, fmt, description, speeds_in_cflag=False):
        self.name = name
        self.fmt = fmt
        self.description = description
        self.speeds_in_cflag = speeds_in_cflag
        self.size = struct.calcsize('=' + fmt)

    def __repr__(self):
        return f"TermiosLayout({self.name!r}, size={self.size})"

    def unpack(self, buf, byte_order='native'):
        """Unpack exactly one structure from the start of ``buf``"""
        if len(buf) < self.size:
            raise TermiosDecodeError(
                f"short read: {len(buf)} of {self.size} bytes for {self.name} layout")

        fields = struct.unpack_from(BYTE_ORDERS[byte_order] + self.fmt, buf)
        iflag, oflag, cflag, lflag, line, cc = fields[:6]

        if self.speeds_in_cflag:
            ospeed = cflag & CBAUD
            ispeed = (cflag & CIBAUD) >> IBSHIFT
            if ispeed == 0:
                ispeed = ospeed
        else:
            ispeed, ospeed = fields[6:8]

        return TermiosAttributes(iflag, oflag, cflag, lflag, line, cc, ispeed, ospeed)


LAYOUTS = MappingProxyType({
    'glibc': TermiosLayout('glibc', '4IB32s3x2I', 'glibc struct termios (tcgetattr)'),
    'kernel': TermiosLayout('kernel', '4IB19s', 'kernel struct termios (TCGETS)',
                            speeds_in_cflag=True),
    'termios2': TermiosLayout('termios2', '4IB19s2I', 'kernel struct termios2 (TCGETS2)'),
})

DEFAULT_LAYOUT = 'glibc'


def get_layout(layout):
    """Accept a layout name or a TermiosLayout"""
    if isinstance(layout, TermiosLayout):
        return layout
    try:
        return LAYOUTS[layout]
    except KeyError:
        raise ValueError(f"Unknown termios layout: {layout}") from None


def decode_attributes(buf, layout=DEFAULT_LAYOUT, byte_order='native'):
    """Decode one structure from a byte buffer; extra trailing bytes are ignored"""
    return get_layout(layout).unpack(buf, byte_order)


def read_attributes(stream, layout=DEFAULT_LAYOUT, byte_order='native'):
    """Read exactly one structure from a binary stream

    A short read or a stream error raises TermiosDecodeError; empty,
    truncated and unreadable input are not told apart.
    """
    layout = get_layout(layout)
    try:
        buf = stream.read(layout.size)
    except OSError as e:
        raise TermiosDecodeError(f"read failed: {e}") from e

    if buf is None:
        buf = b''
    logger.debug(f"Read {len(buf)} of {layout.size} bytes ({layout.description})")
    return layout.unpack(buf, byte_order)
