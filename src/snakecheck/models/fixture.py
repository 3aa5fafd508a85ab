# Copyright (c) Syntropy Systems
"""Pydantic models for fixtures and agent replies."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator, model_validator

from .base import FrozenModel, JSONObject, Move


class Fixture(FrozenModel):
    """One test case: a board state and the moves accepted for it."""

    id: str
    path: Path
    state: JSONObject
    expected: tuple[Move, ...] = Field(min_length=1, max_length=4)


class MoveResponse(FrozenModel):
    """Reply from the agent's move endpoint."""

    move: Move
    shout: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_move(cls, data: object) -> object:
        # Some agents answer with just the token
        if isinstance(data, str):
            return {"move": data}
        return data

    @field_validator("shout", mode="before")
    @classmethod
    def _stringify_shout(cls, value: object) -> object:
        # Shouts are decoration; never fail a move over one
        if value is None or isinstance(value, str):
            return value
        return str(value)
