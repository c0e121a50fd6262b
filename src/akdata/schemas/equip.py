"""Raw records of ``excel/uniequip_table.json`` (operator modules)."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import RawItemCost, RawModel, null_to_list


class RawEquip(RawModel):
    id: str = Field(alias="uniEquipId")
    name: str = Field(alias="uniEquipName")
    description: str = Field(default="", alias="uniEquipDesc")
    unlock_evolve_phase: int = Field(default=0, alias="unlockEvolvePhase")
    unlock_level: int = Field(default=1, alias="unlockLevel")
    unlock_favor_point: int = Field(default=0, alias="unlockFavorPoint")
    mission_list: list[str] = Field(default_factory=list, alias="missionList")
    item_cost: list[RawItemCost] = Field(default_factory=list, alias="itemCost")

    _null_lists = field_validator("mission_list", "item_cost", mode="before")(null_to_list)


class RawEquipMission(RawModel):
    description: str = Field(alias="desc")
    sort: int = Field(default=0, alias="uniEquipMissionSort")


class RawEquipTable(RawModel):
    equip_dict: dict[str, RawEquip] = Field(default_factory=dict, alias="equipDict")
    mission_list: dict[str, RawEquipMission] = Field(default_factory=dict, alias="missionList")
    # operator id -> equip ids; slot 0 is the default module
    char_equip: dict[str, list[str]] = Field(default_factory=dict, alias="charEquip")
