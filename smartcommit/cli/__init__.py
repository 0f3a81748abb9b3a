"""Command Line Interface Package"""

from smartcommit.cli.main import main

__all__ = ["main"]
