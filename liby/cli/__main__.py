"""
Main entry point for the liby CLI when run as a module.

This allows the CLI to be executed using:
    python -m liby.cli
"""

from . import main

if __name__ == '__main__':
    main()
