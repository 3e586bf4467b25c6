"""Plugin configuration: the temperature mapping table.

The host hands the plugin an options object shaped like::

    {"temperatureMapping": [{"source": 0, "path": "environment.water.${instance}", "name": "Sea Temperature"}, ...]}

:func:`load_mapping_table` validates it and returns the ordered, immutable
rule table the resolver scans.  An empty options object selects
:data:`DEFAULT_TEMPERATURE_MAPPING`.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError

from pgn130316._constants import CONFIG_FILE_ENV, PLUGIN_NAME, REFRIGERATION_ALT_NAME, STANDARD_SOURCES, WILDCARD
from pgn130316.exceptions import ConfigurationError
from pgn130316.models._base import Pgn130316BaseModel
from pgn130316.models.mapping import MappingRule

_logger = logging.getLogger(__name__)

MappingTable = tuple[MappingRule, ...]
"""Ordered rule table.  Order is priority; the first matching rule wins."""

_DEFAULT_PATHS: dict[int, str] = {
    0: "environment.water.${instance}",
    1: "environment.outside.${instance}",
    2: "environment.inside.${instance}",
    3: "environment.inside.engineRoom.${instance}",
    4: "environment.inside.mainCabin.${instance}",
    5: "tanks.liveWell.${instance}",
    6: "tanks.baitWell.${instance}",
    7: "environment.inside.refrigerator.${instance}",
    8: "environment.inside.heating.${instance}",
    9: "environment.outside.dewPoint.${instance}",
    10: "environment.outside.apparentWindChill.${instance}",
    11: "environment.outside.theoreticalWindChill.${instance}",
    12: "environment.outside.heatIndex.${instance}",
    13: "environment.inside.freezer.${instance}",
    14: "propulsion.exhaust.${instance}",
}


def _build_default_mapping() -> tuple[dict[str, Any], ...]:
    rows: list[dict[str, Any]] = []
    for code, path in _DEFAULT_PATHS.items():
        rows.append({"source": code, "path": path, "name": STANDARD_SOURCES[code]})
        if code == 7:
            rows.append({"source": code, "path": path, "name": REFRIGERATION_ALT_NAME})
    rows.append({"source": WILDCARD, "path": "sensors.temperature.${source}.${instance}"})
    return tuple(rows)


DEFAULT_TEMPERATURE_MAPPING: tuple[dict[str, Any], ...] = _build_default_mapping()
"""Built-in table: NMEA codes 0-14 (code 7 twice) and a trailing wildcard."""


class PluginConfig(Pgn130316BaseModel):
    """Validated plugin options."""

    temperature_mapping: list[MappingRule] = Field(..., alias="temperatureMapping", min_length=1)


def default_options() -> dict[str, Any]:
    return {"temperatureMapping": [dict(row) for row in DEFAULT_TEMPERATURE_MAPPING]}


def load_mapping_table(options: Mapping[str, Any] | None) -> MappingTable:
    """Validate *options* and return the mapping table.

    ``None`` or an empty mapping selects the default table.  Anything else
    must carry a non-empty ``temperatureMapping`` list whose rules each have
    a ``source`` and a ``path``.

    Raises
    ------
    ConfigurationError
        When the options are not a mapping, or ``temperatureMapping`` is
        missing, not a list, empty, or holds an incomplete rule.
    """

    if options is None or (isinstance(options, Mapping) and len(options) == 0):
        _logger.debug("Empty options, using default temperature mapping")
        options = default_options()

    if not isinstance(options, Mapping):
        raise ConfigurationError("bad or missing configuration", detail="options must be an object")

    rules = options.get("temperatureMapping")
    if not isinstance(rules, list) or not rules:
        raise ConfigurationError(
            "bad or missing configuration",
            detail="temperatureMapping must be a non-empty list",
        )

    try:
        config = PluginConfig.model_validate(dict(options))
    except ValidationError as exc:
        raise ConfigurationError("bad or missing configuration", detail=str(exc)) from exc

    table: MappingTable = tuple(config.temperature_mapping)
    _logger.debug("Loaded %d temperature mapping rules", len(table))
    return table


def plugin_schema() -> dict[str, Any]:
    """Return the JSON schema the plugin advertises to the host."""

    schema = PluginConfig.model_json_schema(by_alias=True)
    schema["title"] = f"Configuration for {PLUGIN_NAME}"
    schema["default"] = default_options()
    return schema


def load_options(path: str | Path) -> dict[str, Any]:
    """Read plugin options from a JSON file.

    Accepts both the bare options object and the host's saved plugin
    configuration envelope (``{"enabled": true, "configuration": {...}}``).

    Raises
    ------
    ConfigurationError
        When the file cannot be read or is not a JSON object.
    """

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot read configuration file {path}", detail=str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"configuration file {path} must hold a JSON object")
    envelope = data.get("configuration")
    if isinstance(envelope, dict):
        return envelope
    return data


def options_from_env() -> dict[str, Any]:
    """Load options from the file named by ``PGN130316_CONFIG_FILE``.

    Returns an empty dict (meaning "use defaults") when the variable is unset.
    """

    path = os.environ.get(CONFIG_FILE_ENV)
    if not path:
        return {}
    return load_options(path)
