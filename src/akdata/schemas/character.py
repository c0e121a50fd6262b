"""Raw records of ``excel/character_table.json``."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import (
    RawBlackboardEntry,
    RawCondition,
    RawItemCost,
    RawModel,
    blank_to_none,
    null_to_list,
)


class RawKeyFrameData(RawModel):
    max_hp: int = Field(alias="maxHp")
    atk: int
    defense: int = Field(alias="def")
    magic_resistance: float = Field(default=0.0, alias="magicResistance")
    cost: int = 0
    block_count: int = Field(default=0, alias="blockCnt")
    move_speed: float = Field(default=1.0, alias="moveSpeed")
    attack_speed: float = Field(default=100.0, alias="attackSpeed")
    base_attack_time: float = Field(default=1.0, alias="baseAttackTime")
    respawn_time: int = Field(default=0, alias="respawnTime")
    hp_recovery_per_sec: float = Field(default=0.0, alias="hpRecoveryPerSec")
    sp_recovery_per_sec: float = Field(default=1.0, alias="spRecoveryPerSec")
    max_deploy_count: int = Field(default=1, alias="maxDeployCount")
    max_deck_stack_count: int = Field(default=0, alias="maxDeckStackCnt")
    taunt_level: int = Field(default=0, alias="tauntLevel")
    stun_immune: bool = Field(default=False, alias="stunImmune")
    silence_immune: bool = Field(default=False, alias="silenceImmune")
    sleep_immune: bool = Field(default=False, alias="sleepImmune")
    frozen_immune: bool = Field(default=False, alias="frozenImmune")


class RawKeyFrame(RawModel):
    level: int
    data: RawKeyFrameData


class RawPhase(RawModel):
    """One promotion tier of a character."""

    range_id: str | None = Field(default=None, alias="rangeId")
    max_level: int = Field(alias="maxLevel")
    attributes_key_frames: list[RawKeyFrame] = Field(alias="attributesKeyFrames")
    evolve_cost: list[RawItemCost] = Field(default_factory=list, alias="evolveCost")

    _null_lists = field_validator("evolve_cost", mode="before")(null_to_list)


class RawSkillMasteryCond(RawModel):
    unlock_cond: RawCondition = Field(alias="unlockCond")
    level_up_time: int = Field(default=0, alias="lvlUpTime")
    level_up_cost: list[RawItemCost] = Field(default_factory=list, alias="levelUpCost")

    _null_lists = field_validator("level_up_cost", mode="before")(null_to_list)


class RawCharacterSkill(RawModel):
    skill_id: str | None = Field(default=None, alias="skillId")
    override_prefab_key: str | None = Field(default=None, alias="overridePrefabKey")
    level_up_cost_cond: list[RawSkillMasteryCond] = Field(
        default_factory=list, alias="levelUpCostCond"
    )
    unlock_cond: RawCondition = Field(alias="unlockCond")

    _null_lists = field_validator("level_up_cost_cond", mode="before")(null_to_list)


class RawTalentCandidate(RawModel):
    unlock_condition: RawCondition = Field(alias="unlockCondition")
    required_potential_rank: int = Field(default=0, alias="requiredPotentialRank")
    prefab_key: str = Field(default="", alias="prefabKey")
    name: str | None = None
    description: str | None = None
    range_id: str | None = Field(default=None, alias="rangeId")
    blackboard: list[RawBlackboardEntry] = Field(default_factory=list)

    _null_lists = field_validator("blackboard", mode="before")(null_to_list)


class RawTalent(RawModel):
    candidates: list[RawTalentCandidate] = Field(default_factory=list)

    _null_lists = field_validator("candidates", mode="before")(null_to_list)


class RawPotentialRank(RawModel):
    potential_type: int = Field(alias="type")
    description: str


class RawCharacter(RawModel):
    """A character_table entry; only obtainable ones become operators."""

    name: str
    potential_item_id: str | None = Field(default=None, alias="potentialItemId")
    nation_id: str | None = Field(default=None, alias="nationId")
    group_id: str | None = Field(default=None, alias="groupId")
    team_id: str | None = Field(default=None, alias="teamId")
    display_number: str | None = Field(default=None, alias="displayNumber")
    appellation: str | None = None
    position: str
    tag_list: list[str] = Field(default_factory=list, alias="tagList")
    is_not_obtainable: bool = Field(default=False, alias="isNotObtainable")
    # 0-based in the export
    rarity: int
    profession: str
    sub_profession_id: str = Field(alias="subProfessionId")
    phases: list[RawPhase] = Field(default_factory=list)
    skills: list[RawCharacterSkill] = Field(default_factory=list)
    talents: list[RawTalent] = Field(default_factory=list)
    potential_ranks: list[RawPotentialRank] = Field(default_factory=list, alias="potentialRanks")
    favor_key_frames: list[RawKeyFrame] | None = Field(default=None, alias="favorKeyFrames")

    _blank_strings = field_validator("potential_item_id", "appellation", mode="before")(
        blank_to_none
    )
    _null_lists = field_validator(
        "tag_list", "phases", "skills", "talents", "potential_ranks", mode="before"
    )(null_to_list)
