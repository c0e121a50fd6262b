"""Raw records of ``excel/item_table.json``."""

from __future__ import annotations

from pydantic import Field

from .base import RawModel


class RawItem(RawModel):
    item_id: str = Field(alias="itemId")
    name: str
    description: str | None = None
    rarity: int = 0
    usage: str | None = None
    obtain_approach: str | None = Field(default=None, alias="obtainApproach")
    classify_type: str = Field(alias="classifyType")
    item_type: str = Field(default="", alias="itemType")


class RawItemTable(RawModel):
    items: dict[str, RawItem] = Field(default_factory=dict)
