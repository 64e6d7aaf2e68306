"""Expose glyphbrot command via ``python -m glyphbrot``."""
import sys
from .entry import main

if __name__ == '__main__':
    sys.exit(main())
