# -*- coding: utf-8 -*-
import os
from typing import List

from loguru import logger


def getenv_or_action(env_name: str, *, action: str = "raise", default: str = None) -> str:
    """
    Returns the value of an environment variable. If it is not set, the `action`
    decides what happens: "raise" raises an EnvironmentError, "warn" logs a
    warning, "ignore" silently returns the default (or an empty string).
    """
    if action not in ("raise", "warn", "ignore"):
        raise ValueError("action must be one of 'raise', 'warn' or 'ignore'")

    value = os.getenv(env_name, default)
    if value is None:
        if action == "raise":
            raise EnvironmentError(f"Environment variable {env_name} is not set.")
        if action == "warn":
            logger.warning(f"Environment variable {env_name} is not set.")
        return ""
    return value


def getenv_list_or_action(
    env_name: str, *, action: str = "raise", default: str = None
) -> List[str]:
    """Same as `getenv_or_action`, but splits a comma-separated value into a list."""
    value = getenv_or_action(env_name, action=action, default=default)
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


if getenv_or_action("ENVIRONMENT", action="ignore", default="dev") == "test":
    from .test import *  # noqa: F401, F403
else:
    from .prod import *  # noqa: F401, F403
