"""Raw records of ``excel/activity_table.json`` (events)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import RawModel


class RawActivityInfo(RawModel):
    id: str
    # None for activities that are not story events
    display_type: str | None = Field(default=None, alias="displayType")
    name: str
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    reward_end_time: datetime = Field(alias="rewardEndTime")
    is_replicate: bool = Field(default=False, alias="isReplicate")


class RawActivityTable(RawModel):
    basic_info: dict[str, RawActivityInfo] = Field(default_factory=dict, alias="basicInfo")
