#!/usr/bin/env python3
"""umdis Command Line Interface.

Disassemble Universal Machine programs without installing the package.

Usage:
    python main.py programs/hello.um
    python main.py --bits programs/hello.um
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from umdis.cli import main


if __name__ == "__main__":
    sys.exit(main())
