"""
Module execution entry point.

Allows running with: python -m flatmerkle_cli
"""

import sys
from flatmerkle_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
