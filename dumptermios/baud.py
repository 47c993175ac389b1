"""
baud.py - termios speed code lookup

Maps the Linux ``Bxxx`` speed codes stored in c_ispeed/c_ospeed (or in the
CBAUD bits of c_cflag) to bits per second. B0 (hang up) and any code not
listed here are unknown.
"""

from types import MappingProxyType

BAUD_RATES = MappingProxyType({
    0o000001: 50,
    0o000002: 75,
    0o000003: 110,
    0o000004: 134,
    0o000005: 150,
    0o000006: 200,
    0o000007: 300,
    0o000010: 600,
    0o000011: 1200,
    0o000012: 1800,
    0o000013: 2400,
    0o000014: 4800,
    0o000015: 9600,
    0o000016: 19200,
    0o000017: 38400,
    0o010001: 57600,
    0o010002: 115200,
    0o010003: 230400,
    0o010004: 460800,
    0o010005: 500000,
    0o010006: 576000,
    0o010007: 921600,
    0o010010: 1000000,
    0o010011: 1152000,
    0o010012: 1500000,
    0o010013: 2000000,
    0o010014: 2500000,
    0o010015: 3000000,
    0o010016: 3500000,
    0o010017: 4000000,
})

# Reverse table, handy for building test structures.
SPEED_CODES = MappingProxyType({bps: code for code, bps in BAUD_RATES.items()})


def lookup_baud_rate(code):
    """Return ``(bps, True)`` for a known speed code, ``(None, False)`` otherwise"""
    bps = BAUD_RATES.get(code)
    return bps, bps is not None


def format_baud_rate(code):
    """Convert a speed code to the string printed in the report"""
    bps, found = lookup_baud_rate(code)
    if found:
        return str(bps)
    return f"unknown baud value {code}"
