"""Typed records for the mapping table and decoded messages."""

from pgn130316.models.mapping import MappingRule, ResolvedMapping
from pgn130316.models.message import TemperatureMessage

__all__ = [
    "MappingRule",
    "ResolvedMapping",
    "TemperatureMessage",
]
