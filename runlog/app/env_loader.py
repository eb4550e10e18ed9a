"""Load environment variables early for the API and the bot.

For local dev, loads a .env.dev file. In staging/prod the variables are
expected to be injected by the deployment, so no file is loaded.
"""

import os
import sys
from typing import Literal
from dotenv import load_dotenv

from runlog.config.limits import DEFAULT_WEEKLY_GOAL_KM

EnvironmentName = Literal["dev", "staging", "prod"]


def validate_required_env_vars(names: list[str]) -> None:
    """Validate that all the given environment variables are set.

    Raises:
        SystemExit: If any of them are missing.
    """
    missing = [var for var in names if not os.getenv(var)]
    if missing:
        print(
            f"ERROR: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        print(
            "Please set these variables in your .env.dev file or environment.",
            file=sys.stderr,
        )
        sys.exit(1)


# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from the deployment)")
elif env == "dev":
    load_dotenv(".env.dev")
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_default_weekly_goal() -> float:
    """Get the weekly goal (km) a fresh process starts with."""
    raw = os.getenv("WEEKLY_GOAL_KM")
    if not raw:
        return DEFAULT_WEEKLY_GOAL_KM
    try:
        goal = float(raw)
    except ValueError:
        raise ValueError(f"Invalid WEEKLY_GOAL_KM value: {raw}. Must be a number.")
    if goal <= 0:
        raise ValueError(f"Invalid WEEKLY_GOAL_KM value: {raw}. Must be positive.")
    return goal


def get_export_dir() -> str | None:
    """Get the directory exports are staged in; None means the system temp dir."""
    return os.getenv("EXPORT_DIR") or None
