"""Console app - wires settings, catalog and engine into a playable match."""

import functools
import logging
import random
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..config import Settings
from ..engine.actions import ActionResolver
from ..engine.logging import CombatLogger
from ..engine.turn import TurnEngine
from ..models.catalog import Catalog, default_catalog
from .console import ConsoleActionSource, ConsoleReporter

logger = logging.getLogger("arena_duel.cli")

EXIT_OK = 0
EXIT_ERROR = 1


def safe_main(func: Callable[..., int]) -> Callable[..., int]:
    """Decorator to turn interruptions and crashes into exit codes.

    End of input and Ctrl-C end the session quietly. Any other exception is
    logged with its traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> int:
        try:
            return func(*args, **kwargs)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving the match without a winner")
            return EXIT_OK
        except Exception as e:
            logger.exception(f"Match crashed in {func.__name__}: {e}")
            return EXIT_ERROR

    return wrapper


def create_engine(
    settings: Settings,
    catalog: Catalog | None = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> tuple[TurnEngine, CombatLogger]:
    """Build a console match from settings."""
    catalog = catalog or default_catalog()
    rng = random.Random(settings.rng_seed)
    resolver = ActionResolver(catalog, settings, rng=rng)
    combat_logger = CombatLogger()
    engine = TurnEngine.create(
        catalog,
        settings,
        source=ConsoleActionSource(read=read, write=write),
        reporter=ConsoleReporter(catalog, write=write),
        resolver=resolver,
        combat_logger=combat_logger,
    )
    return engine, combat_logger


def write_combat_log(combat_logger: CombatLogger, path: str) -> None:
    """Write the readable combat log to a file."""
    Path(path).write_text(combat_logger.get_log().format_readable() + "\n", encoding="utf-8")
    logger.info(f"Combat log written to {path}")


@safe_main
def run_match(
    settings: Settings,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Play one match on the console and return the process exit code."""
    engine, combat_logger = create_engine(settings, read=read, write=write)
    logger.info(f"Starting match: {settings.player1_name} vs {settings.player2_name}")

    winner = engine.run()

    if settings.combat_log_path:
        write_combat_log(combat_logger, settings.combat_log_path)
    logger.debug(f"{winner.name} won after {engine.state.turn_number} turns")
    return EXIT_OK
