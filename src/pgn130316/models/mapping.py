"""Mapping table records."""

from __future__ import annotations

from pydantic import Field, field_validator

from pgn130316._constants import WILDCARD
from pgn130316.models._base import Pgn130316BaseModel
from pgn130316.normalize import source_key


class MappingRule(Pgn130316BaseModel):
    """One row of the temperature mapping table.

    Parameters
    ----------
    source : int or str
        Selector: the wildcard ``"*"``, a numeric source code (as a number or
        a numeric string), or a source name as decoded by canboat.
    path : str
        Path template.  May contain ``${source}``, ``${instance}`` and
        ``${name}`` placeholders.
    name : str or None
        Human-readable label.  Also matched against symbolically decoded
        source codes.
    """

    source: int | str
    path: str = Field(..., min_length=1)
    name: str | None = None

    @field_validator("path")
    @classmethod
    def _strip_path(cls, value: str) -> str:
        return value.strip()

    @property
    def is_wildcard(self) -> bool:
        return source_key(self.source) == WILDCARD

    @property
    def selector(self) -> str:
        """Selector in the string form used for comparisons."""
        return source_key(self.source)


class ResolvedMapping(Pgn130316BaseModel):
    """Result of resolving one message against the mapping table.

    Built fresh for every message and never cached.
    """

    source: int | str
    instance: int
    name: str | None = None
    path: str

    def leaf(self, suffix: str) -> str:
        """Return the leaf path for a channel below the resolved base path."""
        return f"{self.path}.{suffix}"
