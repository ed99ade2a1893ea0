"""Main entry point for the Reachkit package when run as a module.

This module enables running Reachkit directly using 'python -m reachkit'.
"""

from . import cli

if __name__ == "__main__":
    cli.run()
