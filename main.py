#!/usr/bin/env python3
"""
Termsweeper - Main entry point.

Usage:
    python main.py [--difficulty {beginner,intermediate,advanced}] [--seed N]
    python main.py --rows R --cols C --mines M [--seed N] [--debug]
"""
import sys

from src.termsweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
