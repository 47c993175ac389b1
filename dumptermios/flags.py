"""
flags.py - termios flag tables

Bit values are the Linux ones from <asm-generic/termbits.h>, written out
here rather than taken from the host ``termios`` module so a dump decodes
the same way on any machine.
"""

from collections import namedtuple
from types import MappingProxyType

FlagEntry = namedtuple('FlagEntry', ['flag', 'name', 'desc'])

# c_cflag sub-masks used outside the tables
CBAUD = 0o010017
CBAUDEX = 0o010000
CSIZE = 0o000060
CS5 = 0o000000
CS6 = 0o000020
CS7 = 0o000040
CS8 = 0o000060
CSTOPB = 0o000100
CREAD = 0o000200
PARENB = 0o000400
PARODD = 0o001000
HUPCL = 0o002000
CLOCAL = 0o004000
CIBAUD = 0o002003600000
CMSPAR = 0o010000000000
CRTSCTS = 0o020000000000
IBSHIFT = 16

IFLAGS = (
    FlagEntry(0o000001, 'IGNBRK', 'Ignore break condition on input'),
    FlagEntry(0o000002, 'BRKINT', 'Generate SIGINT on break'),
    FlagEntry(0o000004, 'IGNPAR', 'Ignore framing and parity errors'),
    FlagEntry(0o000010, 'PARMRK', 'Mark framing and parity errors.'),
    FlagEntry(0o000020, 'INPCK', 'Enable input parity checking'),
    FlagEntry(0o000040, 'ISTRIP', 'Strip off eighth bit'),
    FlagEntry(0o000100, 'INLCR', 'Translate NL to CR on input'),
    FlagEntry(0o000200, 'IGNCR', 'Ignore CR on input'),
    FlagEntry(0o000400, 'ICRNL', 'Translate CR to NL on input'),
    FlagEntry(0o001000, 'IUCLC', 'Map uppercase chars to lowercase on input'),
    FlagEntry(0o002000, 'IXON', 'Enable XON/XOFF flow control on output'),
    FlagEntry(0o004000, 'IXANY', 'Any char restarts stopped output'),
    FlagEntry(0o010000, 'IXOFF', 'Enable XON/XOFF flow control on input'),
    FlagEntry(0o020000, 'IMAXBEL', 'Ring bell when input queue is full'),
    FlagEntry(0o040000, 'IUTF8', 'Input is UTF8'),
)

OFLAGS = (
    FlagEntry(0o000001, 'OPOST', 'Enable implementation defined post-processing'),
    FlagEntry(0o000002, 'OLCUC', 'Map lowercase chars to uppercase on output'),
    FlagEntry(0o000004, 'ONLCR', 'Map NL to CR-NL on output'),
    FlagEntry(0o000010, 'OCRNL', 'Map CR to NL on output'),
    FlagEntry(0o000020, 'ONOCR', "Don't output CR at column 0"),
    FlagEntry(0o000040, 'ONLRET', "Don't output CR"),
    FlagEntry(0o000100, 'OFILL', 'Send fill character for a delay'),
    FlagEntry(0o000200, 'OFDEL', 'Fill char is ASCII DLE (0177) [Not implemented]'),
    FlagEntry(0o000400, 'NLDLY', 'NL delay mask'),
    FlagEntry(0o003000, 'CRDLY', 'CR delay mask'),
    FlagEntry(0o014000, 'TABDLY', 'Horizontal tab delay mask'),
    FlagEntry(0o020000, 'BSDLY', 'Backspace delay mask'),
    FlagEntry(0o040000, 'VTDLY', 'Vertical tab delay mask'),
    FlagEntry(0o100000, 'FFDLY', 'Form feed delay mask'),
)

CFLAGS = (
    FlagEntry(CBAUD, 'CBAUD', 'Baud speed mask'),
    FlagEntry(CBAUDEX, 'CBAUDEX', 'Extra baud speed mask'),
    FlagEntry(CSIZE, 'CSIZE', 'Character size mask'),
    FlagEntry(CSTOPB, 'CSTOPB', 'Set two stop-bits, rather than one'),
    FlagEntry(CREAD, 'CREAD', 'Enable receiver'),
    FlagEntry(PARENB, 'PARENB', 'Enable parity generation on output, parity checking in input'),
    FlagEntry(PARODD, 'PARODD', 'If set, use odd parity for input & output, otherwise even parity'),
    FlagEntry(HUPCL, 'HUPCL', 'Lower modem control lines after last process closes device'),
    FlagEntry(CLOCAL, 'CLOCAL', 'Ignore modem control lines'),
    FlagEntry(CIBAUD, 'CIBAUD', 'Mask for input speed [Not implemented]'),
    FlagEntry(CMSPAR, 'CMSPAR', "Use 'stick' parity"),
    FlagEntry(CRTSCTS, 'CRTSCTS', 'Enable RTS/CTS (hardware) flow control'),
)

LFLAGS = (
    FlagEntry(0o000001, 'ISIG', 'Generate signal on INTR, QUIT, SUSP, or DSUSP'),
    FlagEntry(0o000002, 'ICANON', 'Enable canonical mode'),
    FlagEntry(0o000004, 'XCASE', 'Convert case [Not Implemented]'),
    FlagEntry(0o000010, 'ECHO', 'Echo input chars'),
    FlagEntry(0o000020, 'ECHOE', 'If ICANON is set, the ERASE char erases preceding input char'),
    FlagEntry(0o000040, 'ECHOK', 'If ICANON is set, the KILL character erases current line'),
    FlagEntry(0o000100, 'ECHONL', 'If ICANON is set, echo the NL char even if ECHO is not set'),
    FlagEntry(0o001000, 'ECHOCTL', 'If ECHO is set, special chars are echoed as ^X'),
    FlagEntry(0o002000, 'ECHOPRT', 'If ICANON and ECHO are set, chars are printed as they are erased'),
    FlagEntry(0o004000, 'ECHOKE', 'If ICANON is set, KILL is echoed by erasing each char on the line'),
    FlagEntry(0o010000, 'FLUSHO', 'Output is being flushed [Not supported on Linux]'),
    FlagEntry(0o000200, 'NOFLSH', 'Disable flushing the input and output queues when generating signals'),
    FlagEntry(0o000400, 'TOSTOP', 'Send the SIGTTOU signal to the process group of background process'),
    FlagEntry(0o040000, 'PENDIN', 'All chars in the input queue and reprinted when the next char is read'),
    FlagEntry(0o100000, 'IEXTEN', 'Enable implementation-defined input processing.'),
)

# Display order of the four blocks.
FLAG_TABLES = MappingProxyType({
    'c_iflags': IFLAGS,
    'c_oflags': OFLAGS,
    'c_cflags': CFLAGS,
    'c_lflags': LFLAGS,
})
