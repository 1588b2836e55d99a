"""Lightweight logging utilities for games and debugging."""

import datetime
import sys


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream or sys.stdout)


def silent(message):
    """Logger that drops every event (tests, embedding)."""
