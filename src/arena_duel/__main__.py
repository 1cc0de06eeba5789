"""Entry point for running an arena duel on the console."""

import logging
import sys

from arena_duel.cli import run_match
from arena_duel.config import get_settings


def main() -> int:
    """Play one match."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    return run_match(settings)


if __name__ == "__main__":
    sys.exit(main())
