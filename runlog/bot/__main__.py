"""Start the Telegram bot: `python -m runlog.bot`."""

from runlog.app import env_loader  # noqa: F401
from runlog.app.env_loader import validate_required_env_vars

import logging
import os

from runlog.app.log_config import configure_logging
from .telegram import RunlogBot

logger = logging.getLogger(__name__)


def main() -> None:
    validate_required_env_vars(["TELEGRAM_BOT_TOKEN"])
    configure_logging()

    # Imported here so the store is built after the env is validated.
    from runlog.app.dependencies import dispatcher, run_store

    store = run_store()
    bot = RunlogBot(os.environ["TELEGRAM_BOT_TOKEN"], dispatcher())
    logger.info(
        f"Running log bot started: {store.count()} runs loaded, "
        f"weekly goal {store.get_goal()} km"
    )
    bot.run()


if __name__ == "__main__":
    main()
