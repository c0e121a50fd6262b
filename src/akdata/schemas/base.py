"""Shared building blocks for the raw table schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    """Base for raw records: camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as missing."""

    if isinstance(value, str) and not value.strip():
        return None
    return value


def null_to_list(value: Any) -> Any:
    return [] if value is None else value


class RawItemCost(RawModel):
    item_id: str = Field(alias="id")
    count: int


class RawCondition(RawModel):
    """Promotion phase and level requirement."""

    phase: int
    level: int


class RawBlackboardEntry(RawModel):
    key: str
    value: float = 0.0
