"""Lightweight logging utilities for games and debugging."""

import datetime
import logging


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure(level="WARNING"):
    """Route library diagnostics (search stats, snapshot warnings) to stderr."""
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.WARNING), format="%(levelname)s %(name)s: %(message)s")
