"""Helpers that build raw struct termios images for the tests."""
from __future__ import annotations

import struct

B9600 = 0o000015
B115200 = 0o010002


def pack_glibc(iflag=0, oflag=0, cflag=0, lflag=0, line=0, cc=b"",
               ispeed=B9600, ospeed=B9600, order="="):
    """Build a 60 byte glibc struct termios."""
    return struct.pack(order + "4IB32s3x2I", iflag, oflag, cflag, lflag, line, cc, ispeed, ospeed)
