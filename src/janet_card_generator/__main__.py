"""Main entry point for the Janet Card Generator."""

import sys

from janet_card_generator.cli import main

if __name__ == "__main__":
    sys.exit(main())
