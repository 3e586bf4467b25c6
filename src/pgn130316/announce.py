"""Dedup-gated metadata announcement.

Each leaf path gets its metadata announced once per plugin lifetime, at the
moment the first value for it is routed.  Values themselves are never gated.
"""

from __future__ import annotations

import logging
from typing import Any

from pgn130316._constants import DESCRIPTION, UNITS
from pgn130316.delta import Delta
from pgn130316.models.mapping import ResolvedMapping
from pgn130316.state.seen import SeenPathSet

_logger = logging.getLogger(__name__)


def build_meta(mapping: ResolvedMapping) -> dict[str, Any]:
    """Return the metadata object for a resolved mapping.

    Readings stay in the message's native kelvin; no conversion is done.
    """

    description = f"{DESCRIPTION} ({mapping.name})" if mapping.name else DESCRIPTION
    return {
        "description": description,
        "instance": mapping.instance,
        "source": mapping.source,
        "units": UNITS,
    }


class TemperatureAnnouncer:
    """Announce metadata for leaf paths not yet in *seen*."""

    def __init__(self, seen: SeenPathSet, delta: Delta) -> None:
        self._seen = seen
        self._delta = delta

    @property
    def seen(self) -> SeenPathSet:
        return self._seen

    def announce(self, mapping: ResolvedMapping, suffix: str) -> str:
        """Return the leaf path for *suffix*, announcing its metadata if new.

        Metadata is committed right away so it reaches the host before the
        value the caller is about to publish.
        """

        leaf = mapping.leaf(suffix)
        if leaf in self._seen:
            return leaf
        self._delta.add_meta(leaf, build_meta(mapping)).commit().clear()
        self._seen.add(leaf)
        _logger.debug("Announced metadata for %s", leaf)
        return leaf
