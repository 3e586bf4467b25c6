"""PGN 130316 dispatch adapter.

The host's decoder looks up a list of channels per PGN.  For every decoded
message it calls each channel's ``node`` to get a destination path (or
``None`` to skip the channel) and ``value`` to get the reading to store
there.  One PGN 130316 message carries two channels: the measured
temperature and the set temperature.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from pgn130316._constants import (
    PGN,
    SET_TEMPERATURE_FIELD,
    SET_TEMPERATURE_SUFFIX,
    TEMPERATURE_FIELD,
    TEMPERATURE_SUFFIX,
)
from pgn130316.announce import TemperatureAnnouncer
from pgn130316.config import MappingTable
from pgn130316.models.mapping import ResolvedMapping
from pgn130316.models.message import TemperatureMessage
from pgn130316.normalize import safe_float
from pgn130316.resolver import resolve

_logger = logging.getLogger(__name__)

NodeFn = Callable[[Mapping[str, Any]], "str | None"]
ValueFn = Callable[[Mapping[str, Any]], Any]


@dataclasses.dataclass(frozen=True)
class Channel:
    """A path-resolver and value-getter pair registered for one reading."""

    suffix: str
    field: str
    node: NodeFn
    value: ValueFn


def message_fields(n2k: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the decoded field mapping of a canboat record or bare field mapping."""
    nested = n2k.get("fields")
    return nested if isinstance(nested, Mapping) else n2k


class TemperatureDispatcher:
    """Route PGN 130316 readings to paths from the mapping table.

    Parameters
    ----------
    table
        Ordered mapping table.
    announcer
        Announces metadata the first time a leaf path is produced.
    is_active
        Callable consulted on every message; while it returns ``False`` no
        paths are produced.
    """

    def __init__(
        self,
        table: MappingTable,
        announcer: TemperatureAnnouncer,
        *,
        is_active: Callable[[], bool] = lambda: True,
    ) -> None:
        self._table = table
        self._announcer = announcer
        self._is_active = is_active

    def resolve_message(self, n2k: Mapping[str, Any]) -> ResolvedMapping | None:
        """Resolve a decoded message, or return ``None`` to drop it."""
        try:
            message = TemperatureMessage.model_validate(dict(n2k))
        except ValidationError:
            _logger.debug("Dropping malformed PGN %d message: %s", PGN, n2k)
            return None

        mapping = resolve(self._table, message.source, message.instance)
        if mapping is None:
            _logger.debug("No mapping for source %s instance %s", message.source, message.instance)
        return mapping

    def _node(self, suffix: str) -> NodeFn:
        def node(n2k: Mapping[str, Any]) -> str | None:
            if not self._is_active():
                return None
            # Each channel resolves the message on its own; the host calls
            # channels independently and no per-message state is kept.
            mapping = self.resolve_message(n2k)
            if mapping is None:
                return None
            return self._announcer.announce(mapping, suffix)

        return node

    @staticmethod
    def _value(field: str) -> ValueFn:
        def value(n2k: Mapping[str, Any]) -> Any:
            return safe_float(message_fields(n2k).get(field))

        return value

    def channels(self) -> list[Channel]:
        return [
            Channel(
                suffix=suffix,
                field=field,
                node=self._node(suffix),
                value=self._value(field),
            )
            for suffix, field in (
                (TEMPERATURE_SUFFIX, TEMPERATURE_FIELD),
                (SET_TEMPERATURE_SUFFIX, SET_TEMPERATURE_FIELD),
            )
        ]

    def registration(self) -> dict[int, list[Channel]]:
        """Return the ``{pgn: channels}`` mapping registered with the host."""
        return {PGN: self.channels()}

    def process(
        self,
        n2k: Mapping[str, Any],
        publish: Callable[[str, Any], None],
    ) -> list[tuple[str, Any]]:
        """Run one message through every channel and publish the readings.

        Values are published whether or not metadata was announced for the
        path on this call.
        """

        published: list[tuple[str, Any]] = []
        for channel in self.channels():
            path = channel.node(n2k)
            if path is None:
                continue
            value = channel.value(n2k)
            publish(path, value)
            published.append((path, value))
        return published
