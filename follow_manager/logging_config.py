import logging
import sys

LOGGER_NAME = "follow_manager"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# Chatty third-party loggers, kept at WARNING unless we run at DEBUG
NOISY_LOGGERS = ("discord", "discord.client", "discord.gateway", "httpx")


def resolve_level(level: int | str | None) -> int:
    """Turn an int, a level name such as ``"debug"`` or ``None`` into a level."""
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure the ``follow_manager`` logger once and return it.

    Later calls never add another handler. They only change the level when
    one is passed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        if level is not None:
            logger.setLevel(resolve_level(level))
        return logger
    resolved = resolve_level(level)
    logger.setLevel(resolved)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    if resolved > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return logger
