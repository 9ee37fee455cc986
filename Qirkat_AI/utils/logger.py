"""Logging setup and a helper for game events."""

import logging

LOGGER = logging.getLogger("Qirkat_AI")


def configure_logging(level="WARNING"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def log_event(message):
    LOGGER.info(message)
