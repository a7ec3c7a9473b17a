"""
Main entry point for the gs308ep package.

Allows running the CLI as: python -m gs308ep
"""

import sys

from gs308ep.cli import main

if __name__ == "__main__":
    sys.exit(main())
