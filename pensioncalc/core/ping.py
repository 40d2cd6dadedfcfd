"""Ping utility used by the API health-check."""

from pensioncalc import __version__


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_version() -> str:
    return __version__
