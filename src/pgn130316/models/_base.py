"""Base model for decoded message and configuration records.

Every model inherits from :class:`Pgn130316BaseModel` which provides:

* frozen, extra-ignoring configuration so records are immutable once loaded
* a ``model_validator(mode="before")`` that drops empty strings and NaN so
  the field default is used instead
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Pgn130316BaseModel(BaseModel):
    """Base for pgn130316 models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return Pgn130316BaseModel._clean_dict(values)
