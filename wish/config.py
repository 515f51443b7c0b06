import logging
import os


def _int_env(name, default):
    """Integer from the environment, default if unset or malformed."""
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _level_env(name, default):
    """Logging level name from the environment, default if unknown."""
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


# Search path a new session starts with
DEFAULT_PATH = [d for d in os.getenv("WISH_DEFAULT_PATH", "/bin" + os.pathsep + "/usr/bin").split(os.pathsep) if d]

PROMPT = os.getenv("WISH_PROMPT", "wish> ")

# The one message every failure prints
ERROR_MESSAGE = "An error has occurred\n"

# Sanity limit on tokens per line
MAX_TOKENS = _int_env("WISH_MAX_TOKENS", 4096)

LOG_LEVEL = _level_env("WISH_LOG_LEVEL", "WARNING")
