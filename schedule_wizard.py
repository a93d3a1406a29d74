#!/usr/bin/env python3
"""
MediaTimer schedule wizard launcher
Runs the weekly schedule editor straight from a checkout
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.resolve() / "src"))

from mediatimer.cli import main


if __name__ == "__main__":
    sys.exit(main())
