"""
dump.py - print a decoded struct termios

The whole report is built before anything is written, so a structure that
fails to decode never produces partial output.
"""

import logging
import os
import sys

from .baud import format_baud_rate
from .layout import DEFAULT_LAYOUT, TermiosDecodeError, get_layout, read_attributes
from .render import format_report, render_control_chars, render_flags, serial_parameters

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


def terminal_width(stream=None):
    """Width of the terminal behind ``stream``, or 80 when it can't be told"""
    stream = sys.stdout if stream is None else stream
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return DEFAULT_WIDTH
    return columns or DEFAULT_WIDTH


class TermiosDumper:
    """Termios Settings Dumper"""

    def __init__(self, layout=DEFAULT_LAYOUT, byte_order='native', out=None,
                 width=None, width_source=terminal_width, show_pyserial=False):
        self.layout = get_layout(layout)
        self.byte_order = byte_order
        self.out = sys.stdout if out is None else out
        self.width = width
        self.width_source = width_source
        self.show_pyserial = show_pyserial

    def rule(self):
        width = self.width
        if not width and self.width_source is not None:
            width = self.width_source(self.out)
        return '-' * (width or DEFAULT_WIDTH)

    def report_lines(self, attrs):
        """Build every line of the report for a decoded structure"""
        rule = self.rule()
        lines = [rule]

        lines += format_report(render_flags('c_iflags', attrs.iflag))
        lines.append(rule)
        lines += format_report(render_flags('c_oflags', attrs.oflag))
        lines.append(rule)

        framing = serial_parameters(attrs.cflag)
        lines += format_report(render_flags('c_cflags', attrs.cflag), framing.descriptor)
        if self.show_pyserial:
            kwargs = ', '.join(f"{k}={v!r}" for k, v in sorted(framing.serial_kwargs().items()))
            lines.append(f"pyserial : {kwargs}")
        lines.append(rule)

        lines += format_report(render_flags('c_lflags', attrs.lflag))
        lines.append(rule)
        lines += render_control_chars(attrs.cc)
        lines.append(rule)

        lines.append(f"c_ispeed = {format_baud_rate(attrs.ispeed)}")
        lines.append(f"c_ospeed = {format_baud_rate(attrs.ospeed)}")
        return lines

    def dump_attributes(self, attrs, heading=None):
        """Print the report for an already decoded structure"""
        lines = self.report_lines(attrs)
        if heading:
            lines.insert(0, heading)
        self.out.write('\n'.join(lines) + '\n')
        self.out.flush()

    def dump(self, stream, heading=None):
        """Read one structure from ``stream`` and print it

        Returns True on success. On a short read or stream error nothing is
        printed and False is returned.
        """
        try:
            attrs = read_attributes(stream, self.layout, self.byte_order)
        except TermiosDecodeError as e:
            logger.debug(f"Decode failed: {e}")
            return False

        logger.debug(
            f"iflag=0x{attrs.iflag:08x} oflag=0x{attrs.oflag:08x} "
            f"cflag=0x{attrs.cflag:08x} lflag=0x{attrs.lflag:08x} "
            f"ispeed={attrs.ispeed} ospeed={attrs.ospeed}")
        self.dump_attributes(attrs, heading)
        return True

    def dump_file(self, path):
        """Open ``path`` and dump it; OSError from opening propagates"""
        with open(path, 'rb') as fh:
            return self.dump(fh, heading=f"Dumping termios settings for {path}")
