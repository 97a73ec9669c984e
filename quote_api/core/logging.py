# This project was developed with assistance from AI tools.
"""Root logger setup, driven by ``Settings.LOG_LEVEL``."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    ``basicConfig`` is a no-op when handlers already exist (e.g. under uvicorn
    or pytest), so the level is applied explicitly afterwards.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
