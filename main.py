"""Main entry point for the termls listing tool."""

import sys

from termls.main import main

if __name__ == "__main__":
    sys.exit(main())
