"""Main entry point for running lineup as a module.

Usage:
    python -m lineup --in-separator ';' --out-separator ',' < input.txt
    python -m lineup --help
"""

from lineup.cli import main

if __name__ == '__main__':
    main()
