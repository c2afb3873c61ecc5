#!/usr/bin/env python3
"""
searchbar - arithmetic preview and address detection for a search box

Main entry point. This file is a thin wrapper that delegates all
functionality to the searchbar_pkg package.

Usage:
    python searchbar.py                        # Interactive REPL
    python searchbar.py -e "2+2"               # Classify one input
    python searchbar.py -e "example.com" --submit
    python searchbar.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point.

    Delegates argument parsing and output to searchbar_pkg.cli.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from searchbar_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
