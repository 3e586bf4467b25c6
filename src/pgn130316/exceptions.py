"""Custom exception hierarchy for pgn130316."""

from __future__ import annotations


class Pgn130316Error(Exception):
    """Base exception for all pgn130316 errors."""


class ConfigurationError(Pgn130316Error):
    """Invalid, missing or empty temperature mapping configuration.

    Raised while loading the mapping table.  The plugin catches it in
    ``start()``, reports it through the host's error callback and stays
    inactive; it never propagates into the host.
    """

    def __init__(self, message: str, *, detail: str = "") -> None:
        self.detail = detail
        super().__init__(message)
