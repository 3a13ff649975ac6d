import logging
import os
import sys

# default logging level, overridable with KPATHS_LOG_LEVEL
logging_level = getattr(logging, os.getenv("KPATHS_LOG_LEVEL", "INFO").upper(), logging.INFO)

logger = logging.getLogger("kpaths")
logger.setLevel(logging_level)

handler = logging.StreamHandler(sys.stdout)
handler.setLevel(logging_level)
formatter = logging.Formatter(
    "%(levelname)7s %(filename)s %(funcName)s() line:%(lineno)d - %(message)s"  # noqa
)
handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(handler)


def set_level(level: str) -> None:
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    logger.setLevel(value)
    for h in logger.handlers:
        h.setLevel(value)
