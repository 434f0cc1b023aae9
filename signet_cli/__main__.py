"""
Module execution entry point.

Allows running with: python -m signet_cli
"""

import sys
from signet_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
