# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for snakecheck."""

from __future__ import annotations

from typing import ClassVar, Literal, get_args

from pydantic import BaseModel, ConfigDict, JsonValue, ValidationError
from typing_extensions import TypeAlias

JSONValue: TypeAlias = JsonValue
JSONObject: TypeAlias = dict[str, JSONValue]

Move: TypeAlias = Literal["up", "down", "left", "right"]
MOVES: tuple[str, ...] = get_args(Move)


class SnakecheckBaseModel(BaseModel):
    """Base model with shared config for snakecheck schemas."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


class FrozenModel(SnakecheckBaseModel):
    """Base model for records that must not change once built."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a ValidationError into a single readable line."""
    parts: list[str] = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)
