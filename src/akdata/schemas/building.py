"""Raw records of ``excel/building_data.json``."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import RawCondition, RawItemCost, RawModel, null_to_list


class RawRoomSize(RawModel):
    row: int
    col: int


class RawBuildCost(RawModel):
    items: list[RawItemCost] = Field(default_factory=list)
    labor: int = 0

    _null_lists = field_validator("items", mode="before")(null_to_list)


class RawRoomPhase(RawModel):
    unlock_cond_id: str = Field(alias="unlockCondId")
    build_cost: RawBuildCost = Field(default_factory=RawBuildCost, alias="buildCost")
    electricity: int = 0
    max_stationed_num: int = Field(default=0, alias="maxStationedNum")
    manpower_cost: int = Field(default=0, alias="manpowerCost")


class RawRoom(RawModel):
    id: str
    name: str
    description: str | None = None
    # negative means unlimited
    max_count: int = Field(default=-1, alias="maxCount")
    category: str = ""
    size: RawRoomSize
    phases: list[RawRoomPhase] = Field(default_factory=list)

    _null_lists = field_validator("phases", mode="before")(null_to_list)


class RawCharBuffPhase(RawModel):
    buff_id: str = Field(alias="buffId")
    cond: RawCondition


class RawCharBuff(RawModel):
    buff_data: list[RawCharBuffPhase] = Field(default_factory=list, alias="buffData")

    _null_lists = field_validator("buff_data", mode="before")(null_to_list)


class RawBuildingChar(RawModel):
    char_id: str | None = Field(default=None, alias="charId")
    buff_char: list[RawCharBuff] = Field(default_factory=list, alias="buffChar")

    _null_lists = field_validator("buff_char", mode="before")(null_to_list)


class RawBuff(RawModel):
    buff_name: str = Field(alias="buffName")
    sort_id: int = Field(default=0, alias="sortId")
    buff_category: str = Field(alias="buffCategory")
    room_type: str = Field(alias="roomType")


class RawBuildingData(RawModel):
    rooms: dict[str, RawRoom] = Field(default_factory=dict)
    # operator id -> base skill slots
    chars: dict[str, RawBuildingChar] = Field(default_factory=dict)
    # buff id -> definition, shared between operators
    buffs: dict[str, RawBuff] = Field(default_factory=dict)
