"""Raw records of ``excel/gacha_table.json`` (recruitment and banners)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from .base import RawModel, blank_to_none


class RawRecruitTag(RawModel):
    tag_id: int = Field(alias="tagId")
    tag_name: str = Field(alias="tagName")


class RawGachaPool(RawModel):
    gacha_pool_id: str = Field(alias="gachaPoolId")
    gacha_index: int = Field(default=0, alias="gachaIndex")
    # unix seconds in the export
    open_time: datetime = Field(alias="openTime")
    end_time: datetime = Field(alias="endTime")
    gacha_pool_name: str = Field(alias="gachaPoolName")
    gacha_pool_summary: str = Field(default="", alias="gachaPoolSummary")
    contract_item_id: str | None = Field(default=None, alias="LMTGSID")
    gacha_rule_type: str = Field(default="NORMAL", alias="gachaRuleType")

    _blank_strings = field_validator("contract_item_id", mode="before")(blank_to_none)


class RawGachaTable(RawModel):
    gacha_tags: list[RawRecruitTag] = Field(default_factory=list, alias="gachaTags")
    gacha_pool_client: list[RawGachaPool] = Field(default_factory=list, alias="gachaPoolClient")
