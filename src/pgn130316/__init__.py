"""pgn130316 - Map NMEA 2000 PGN 130316 temperatures into Signal K paths."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pgn130316")
except PackageNotFoundError:
    __version__ = "0+local"
from pgn130316.announce import TemperatureAnnouncer, build_meta
from pgn130316.config import (
    DEFAULT_TEMPERATURE_MAPPING,
    MappingTable,
    PluginConfig,
    default_options,
    load_mapping_table,
    load_options,
    options_from_env,
    plugin_schema,
)
from pgn130316.delta import Delta
from pgn130316.dispatch import Channel, TemperatureDispatcher
from pgn130316.exceptions import ConfigurationError, Pgn130316Error
from pgn130316.log import PluginLog
from pgn130316.models import MappingRule, ResolvedMapping, TemperatureMessage
from pgn130316.plugin import HostApp, Pgn130316Plugin
from pgn130316.resolver import render_path, resolve
from pgn130316.state import SeenPathSet

__all__ = [
    "__version__",
    "Channel",
    "ConfigurationError",
    "DEFAULT_TEMPERATURE_MAPPING",
    "Delta",
    "HostApp",
    "MappingRule",
    "MappingTable",
    "Pgn130316Error",
    "Pgn130316Plugin",
    "PluginConfig",
    "PluginLog",
    "ResolvedMapping",
    "SeenPathSet",
    "TemperatureAnnouncer",
    "TemperatureDispatcher",
    "TemperatureMessage",
    "build_meta",
    "default_options",
    "load_mapping_table",
    "load_options",
    "options_from_env",
    "plugin_schema",
    "render_path",
    "resolve",
]
