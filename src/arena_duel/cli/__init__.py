"""Console presentation - menus, prompts and the match runner."""

from .app import create_engine, run_match
from .console import ConsoleActionSource, ConsoleReporter, parse_choice

__all__ = [
    "ConsoleActionSource",
    "ConsoleReporter",
    "create_engine",
    "parse_choice",
    "run_match",
]
