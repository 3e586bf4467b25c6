"""Status and error notifications.

The host shows one status line per plugin.  :class:`PluginLog` forwards
notices and errors to the host callbacks and mirrors them to :mod:`logging`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

_logger = logging.getLogger(__name__)


class PluginLog:
    def __init__(
        self,
        plugin_id: str,
        *,
        on_status: Callable[[str], None] | None = None,
        on_error: Callable[[str], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._plugin_id = plugin_id
        self._on_status = on_status
        self._on_error = on_error
        self._logger = logger or _logger

    def notice(self, message: str, *, to_host: bool = True) -> None:
        """Report a status message.

        With ``to_host=False`` the message is only logged, leaving the host's
        status line untouched.
        """
        self._logger.info("%s: %s", self._plugin_id, message)
        if to_host and self._on_status is not None:
            self._on_status(message)

    def error(self, message: str, *, to_host: bool = True) -> None:
        self._logger.error("%s: %s", self._plugin_id, message)
        if to_host and self._on_error is not None:
            self._on_error(message)
