"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

_DEFAULT_LOG_LEVEL = logging.WARNING


def log_level(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its number.

    Unknown or empty names fall back to WARNING.
    """
    if not name:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def main() -> None:
    """Launch the Gambit application."""
    from gambit.ui.bootstrap import run_application

    logging.basicConfig(
        level=log_level(os.environ.get("GAMBIT_LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application())


if __name__ == "__main__":
    main()
