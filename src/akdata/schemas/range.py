"""Raw records of ``excel/range_table.json``."""

from __future__ import annotations

from pydantic import Field

from .base import RawModel


class RawGridPoint(RawModel):
    row: int
    col: int


class RawRange(RawModel):
    grids: list[RawGridPoint] = Field(default_factory=list)
