"""
Main entry point for SKYGATE.

Loads settings, configures logging and launches the desktop simulator.
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from skygate.core.events import EventBus
from skygate.core.highscore import JsonHighScoreStore
from skygate.game.loop import GameLoop
from skygate.settings import Settings, get_settings


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator(settings: Settings) -> None:
    """Run the simulator version."""
    from skygate.simulator.window import SimulatorWindow, WindowConfig

    event_bus = EventBus()
    game = GameLoop(
        settings=settings,
        store=JsonHighScoreStore(settings.high_score_file),
        event_bus=event_bus,
    )

    window = SimulatorWindow(
        game=game,
        config=WindowConfig.from_settings(settings),
        event_bus=event_bus,
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Invalid configuration:\n{e}")
        sys.exit(1)

    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("SKYGATE starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("SKYGATE stopped")


if __name__ == "__main__":
    main()
