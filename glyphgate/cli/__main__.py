"""
GlyphGate CLI entry point.

Usage:
    python -m glyphgate.cli gen text --prompt "Φ + Σ"
    python -m glyphgate.cli glyphs
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
