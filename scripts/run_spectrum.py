#!/usr/bin/env python3
"""specscope spectrum runner.

Usage:
    python scripts/run_spectrum.py capture.txt --sample-rate 1000
    python scripts/run_spectrum.py capture.txt --config scripts/user_config.py
    python scripts/run_spectrum.py capture.txt --pair-index 1 --no-plot

Note: User config in scripts/user_config.py, expert defaults in
src/specscope/schemas/param.py
"""

import sys

from specscope.cli.run_spectrum import main


if __name__ == "__main__":
    sys.exit(main())
