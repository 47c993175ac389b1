"""
render.py - turn decoded termios fields into report lines
"""

from collections import namedtuple
from types import MappingProxyType

import serial

from .flags import CS5, CS6, CS7, CS8, CSIZE, CSTOPB, FLAG_TABLES, PARENB, PARODD

CC_NAMES = (
    'VINTR',
    'VQUIT',
    'VERASE',
    'VKILL',
    'VEOF',
    'VTIME',
    'VMIN',
    'VSWTC',
    'VSTART',
    'VSTOP',
    'VSUSP',
    'VEOL',
    'VREPRINT',
    'VDISCARD',
    'VWERASE',
    'VLNEXT',
    'VEOL2',
)

CHARACTER_SIZES = MappingProxyType({
    CS5: serial.FIVEBITS,
    CS6: serial.SIXBITS,
    CS7: serial.SEVENBITS,
    CS8: serial.EIGHTBITS,
})


class RenderedReport(namedtuple('RenderedReport', ['label', 'value', 'names', 'descriptions'])):
    """Flags matched in one termios bitmask"""

    __slots__ = ()

    @property
    def hex_value(self):
        return f"0x{self.value:04x}"


class SerialFraming(namedtuple('SerialFraming', ['bytesize', 'parity', 'stopbits'])):
    """Character framing described by c_cflag, in pyserial terms"""

    __slots__ = ()

    @property
    def descriptor(self):
        """Short form such as 8N1; the digit is left out for an unknown size"""
        size = '' if self.bytesize is None else str(self.bytesize)
        return f"{size}{self.parity}{self.stopbits}"

    def serial_kwargs(self):
        """Keyword arguments opening a serial.Serial with the same framing"""
        kwargs = {'parity': self.parity, 'stopbits': self.stopbits}
        if self.bytesize is not None:
            kwargs['bytesize'] = self.bytesize
        return kwargs


def render_flags(category, value):
    """Match a raw bitmask against the flag table for ``category``

    Matches are kept in table order. A zero value matches nothing.
    """
    try:
        table = FLAG_TABLES[category]
    except KeyError:
        raise ValueError(f"Unknown flag category: {category}") from None

    names = []
    descriptions = []
    for entry in table:
        if value & entry.flag:
            names.append(entry.name)
            descriptions.append(entry.desc)

    return RenderedReport(category, value, tuple(names), tuple(descriptions))


def serial_parameters(cflag, char_sizes=CHARACTER_SIZES):
    """Derive data bits, parity and stop bits from c_cflag"""
    bytesize = char_sizes.get(cflag & CSIZE)

    if cflag & PARENB:
        parity = serial.PARITY_ODD if cflag & PARODD else serial.PARITY_EVEN
    else:
        parity = serial.PARITY_NONE

    stopbits = serial.STOPBITS_TWO if cflag & CSTOPB else serial.STOPBITS_ONE

    return SerialFraming(bytesize, parity, stopbits)


def format_report(report, parameter=None):
    """Format one flag block; ``parameter`` adds the c_cflag Parameter line"""
    lines = [f"{report.label} ({report.hex_value}) : {' '.join(report.names)}"]
    if parameter is not None:
        lines.append(f"Parameter : {parameter}")
    lines.append("Description:")
    for desc in report.descriptions:
        lines.append(f"\t * {desc}")
    return lines


def render_control_chars(cc):
    """Format the named c_cc slots as ``NAME : 0xHH`` lines"""
    if len(cc) < len(CC_NAMES):
        raise ValueError(f"Expected at least {len(CC_NAMES)} control characters, got {len(cc)}")

    lines = ["c_cc characters:"]
    for name, value in zip(CC_NAMES, cc):
        lines.append(f"{name:>12} : 0x{value:02x}")
    return lines
