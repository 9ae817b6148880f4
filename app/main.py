from __future__ import annotations

import logging
import signal
import sys

from app.config import LOG_LEVEL
from handlers.commands import start
from handlers.console import ConsoleDisplay, ConsoleInput


logger = logging.getLogger(__name__)


def _handle_exit(sig: int, frame: object | None) -> None:
    """Log termination signals before leaving the game."""
    logger.info("Received shutdown signal %s", sig)
    raise SystemExit(0)


def main() -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))
    signal.signal(signal.SIGTERM, _handle_exit)

    display = ConsoleDisplay()
    try:
        start(ConsoleInput(), display)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        display.show("\nThank you for playing SHIPS HUNTER!")
    except Exception:
        logger.exception("Unexpected error, shutting down")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
