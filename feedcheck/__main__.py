"""
Entry point for running Feedcheck as a module.

Usage:
    python -m feedcheck lessons
    python -m feedcheck play bias
    python -m feedcheck --help
"""
from feedcheck.delivery.cli import main

if __name__ == "__main__":
    main()
