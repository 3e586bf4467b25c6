"""Signal K plugin lifecycle for PGN 130316.

:class:`Pgn130316Plugin` is constructed with the host application object.
``start(options)`` loads the mapping table and registers the temperature
channels with the host's decoder; ``stop()`` deactivates them.

The host application is only used through the narrow :class:`HostApp`
protocol.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from pgn130316._constants import PGN, PGN_PROPERTY, PLUGIN_DESCRIPTION, PLUGIN_ID, PLUGIN_NAME
from pgn130316.announce import TemperatureAnnouncer
from pgn130316.config import MappingTable, default_options, load_mapping_table, plugin_schema
from pgn130316.delta import Delta
from pgn130316.dispatch import TemperatureDispatcher
from pgn130316.exceptions import ConfigurationError
from pgn130316.log import PluginLog
from pgn130316.state.seen import SeenPathSet

_logger = logging.getLogger(__name__)


class HostApp(Protocol):
    def set_plugin_status(self, message: str) -> None: ...

    def set_plugin_error(self, message: str) -> None: ...

    def handle_message(self, plugin_id: str, delta: dict[str, Any]) -> None: ...

    def emit_property_value(self, name: str, value: Any) -> None: ...


class Pgn130316Plugin:
    """Map PGN 130316 temperatures into Signal K paths."""

    id = PLUGIN_ID
    name = PLUGIN_NAME
    description = PLUGIN_DESCRIPTION

    def __init__(self, app: HostApp) -> None:
        self._app = app
        self.schema: dict[str, Any] = plugin_schema()
        self.ui_schema: dict[str, Any] = {}
        self._log = PluginLog(PLUGIN_ID, on_status=app.set_plugin_status, on_error=app.set_plugin_error)
        self._delta = Delta(app.handle_message, PLUGIN_ID)
        self._active = False
        self._table: MappingTable = ()
        self._seen: SeenPathSet | None = None
        self._dispatcher: TemperatureDispatcher | None = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def table(self) -> MappingTable:
        return self._table

    @property
    def seen(self) -> SeenPathSet | None:
        return self._seen

    @property
    def dispatcher(self) -> TemperatureDispatcher | None:
        return self._dispatcher

    def start(self, options: Mapping[str, Any] | None = None) -> None:
        """Load the mapping table and register the channels with the host.

        A bad configuration is reported through the host's error callback and
        leaves the plugin inactive; no exception reaches the host.
        """

        if not options:
            options = default_options()
            self._log.notice("using default configuration", to_host=False)

        try:
            table = load_mapping_table(options)
        except ConfigurationError as exc:
            _logger.debug("Configuration rejected: %s", exc.detail or exc)
            self._active = False
            self._dispatcher = None
            self._log.error("stopped: bad or missing configuration")
            return

        self._table = table
        self._seen = SeenPathSet()
        self._dispatcher = TemperatureDispatcher(
            table,
            TemperatureAnnouncer(self._seen, self._delta),
            is_active=lambda: self._active,
        )
        self._active = True
        self._log.notice(f"started: processing PGN {PGN} messages")
        self._app.emit_property_value(PGN_PROPERTY, self._dispatcher.registration())

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        self._log.notice("stopped", to_host=False)

    def process(
        self,
        n2k: Mapping[str, Any],
        publish: Callable[[str, Any], None] | None = None,
    ) -> list[tuple[str, Any]]:
        """Handle one decoded message without going through the host's decoder.

        Readings go to *publish* when given, otherwise to the host as value
        deltas.  Returns the ``(path, value)`` pairs published.
        """

        if not self._active or self._dispatcher is None:
            return []
        return self._dispatcher.process(n2k, publish or self._publish_value)

    def _publish_value(self, path: str, value: Any) -> None:
        self._delta.add_value(path, value).commit().clear()
