"""Lightweight logging utilities for results and debugging."""

import datetime
import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level="WARNING"):
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")
