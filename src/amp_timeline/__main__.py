"""Module entry point for running with python -m amp_timeline."""

import sys

from amp_timeline.cli import main

if __name__ == "__main__":
    sys.exit(main())
