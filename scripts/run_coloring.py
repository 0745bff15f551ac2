#!/usr/bin/env python
"""CLI entry point for the heuristic coloring comparison."""

import sys

from heuristic_coloring.cli import main

if __name__ == "__main__":
    sys.exit(main())
