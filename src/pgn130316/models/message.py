"""Decoded PGN 130316 message model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from pgn130316.models._base import Pgn130316BaseModel
from pgn130316.normalize import safe_float, safe_str


class TemperatureMessage(Pgn130316BaseModel):
    """Temperature, Extended Range message as delivered by the decoder.

    Accepts either the bare field mapping (``{"Source": ..., "Instance": ...}``)
    or a full canboat record with the fields nested under ``"fields"``.
    Readings are in kelvin and ``None`` when absent or unparseable.

    Parameters
    ----------
    source : int or str
        ``Source`` field.  canboat decodes codes 0-14 to names.
    instance : int
        ``Instance`` field.
    temperature : float or None
        ``Temperature`` field.
    set_temperature : float or None
        ``Set Temperature`` field.
    """

    source: int | str = Field(..., validation_alias=AliasChoices("Source", "source"))
    instance: int = Field(..., validation_alias=AliasChoices("Instance", "instance"))
    temperature: float | None = Field(default=None, validation_alias=AliasChoices("Temperature", "temperature"))
    set_temperature: float | None = Field(
        default=None,
        validation_alias=AliasChoices("Set Temperature", "setTemperature", "set_temperature"),
    )

    @model_validator(mode="before")
    @classmethod
    def _merge_nested_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        nested = values.get("fields")
        if isinstance(nested, dict):
            merged = dict(values)
            merged.update(nested)
            return merged
        return values

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: Any) -> int | str:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        text = safe_str(value)
        if text is None:
            raise ValueError("Source must be a code or a name")
        return text

    @field_validator("instance", mode="before")
    @classmethod
    def _coerce_instance(cls, value: Any) -> int:
        parsed = safe_float(value)
        if parsed is None or not parsed.is_integer():
            raise ValueError("Instance must be a whole number")
        return int(parsed)

    @field_validator("temperature", "set_temperature", mode="before")
    @classmethod
    def _coerce_readings(cls, value: Any) -> float | None:
        return safe_float(value)
