#!/usr/bin/env python3
"""Dump a raw struct termios file without installing the package

Usage:
    python3 utilities/dump_termios.py FILE [--layout glibc|kernel|termios2]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dumptermios.cli import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())
