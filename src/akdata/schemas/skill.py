"""Raw records of ``excel/skill_table.json``."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import RawBlackboardEntry, RawModel, null_to_list


class RawSpData(RawModel):
    # bit flag: 1 auto, 2 offensive, 4 defensive, 8 passive
    sp_type: int = Field(alias="spType")
    max_charge_time: int = Field(default=1, alias="maxChargeTime")
    sp_cost: int = Field(default=0, alias="spCost")
    init_sp: int = Field(default=0, alias="initSp")
    increment: float = 1.0


class RawSkillLevel(RawModel):
    name: str
    range_id: str | None = Field(default=None, alias="rangeId")
    description: str | None = None
    # 0 passive, 1 manual, 2 auto
    skill_type: int = Field(alias="skillType")
    sp_data: RawSpData = Field(alias="spData")
    prefab_id: str | None = Field(default=None, alias="prefabId")
    duration: float = 0.0
    blackboard: list[RawBlackboardEntry] = Field(default_factory=list)

    _null_lists = field_validator("blackboard", mode="before")(null_to_list)


class RawSkill(RawModel):
    skill_id: str | None = Field(default=None, alias="skillId")
    levels: list[RawSkillLevel] = Field(default_factory=list)
