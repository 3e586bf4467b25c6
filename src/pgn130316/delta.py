"""Signal K delta construction.

Metadata and values are sent to the host as delta messages::

    {"updates": [{"meta": [{"path": "environment.water.0.temperature", "value": {...}}]}]}
    {"updates": [{"values": [{"path": "environment.water.0.temperature", "value": 293.15}]}]}

:class:`Delta` accumulates entries and hands them to the host in a single
``handle_message`` call on :meth:`Delta.commit`.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_logger = logging.getLogger(__name__)


class PathValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    value: Any


class MetaEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    value: dict[str, Any]


class DeltaUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: list[PathValue] = Field(default_factory=list)
    meta: list[MetaEntry] = Field(default_factory=list)


class DeltaMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    updates: list[DeltaUpdate] = Field(default_factory=list)


class Delta:
    """Builder for deltas.

    Parameters
    ----------
    handle_message
        Host callback ``(plugin_id, delta_dict)`` that applies a delta.
    plugin_id
        Identifier the host uses to attribute the delta.
    """

    def __init__(self, handle_message: Callable[[str, dict[str, Any]], None], plugin_id: str) -> None:
        self._handle_message = handle_message
        self._plugin_id = plugin_id
        self._values: list[PathValue] = []
        self._meta: list[MetaEntry] = []

    def add_value(self, path: str, value: Any) -> Delta:
        self._values.append(PathValue(path=path, value=value))
        return self

    def add_meta(self, path: str, meta: dict[str, Any]) -> Delta:
        self._meta.append(MetaEntry(path=path, value=copy.deepcopy(meta)))
        return self

    def commit(self) -> Delta:
        """Send pending entries to the host.  Does nothing when empty.

        Pending entries are dropped before the host is called, so a failing
        ``handle_message`` never leaks them into the next delta.
        """
        if not self.pending:
            return self
        update = DeltaUpdate(values=list(self._values), meta=list(self._meta))
        message = DeltaMessage(updates=[update])
        _logger.debug("Committing %d values and %d meta entries", len(self._values), len(self._meta))
        self.clear()
        # Empty values/meta lists are left out of the wire form.
        self._handle_message(self._plugin_id, message.model_dump(exclude_defaults=True))
        return self

    def clear(self) -> Delta:
        self._values.clear()
        self._meta.clear()
        return self

    @property
    def pending(self) -> int:
        return len(self._values) + len(self._meta)
