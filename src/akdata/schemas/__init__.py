"""Typed raw records for every exported game-data table.

Each table is decoded with pydantic from the JSON file named in
:data:`TABLE_FILES`; the decoded tables are then bundled in a
:class:`RawTableSet` which is handed, once, to the assembler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .activity import RawActivityInfo, RawActivityTable
from .base import RawBlackboardEntry, RawCondition, RawItemCost, RawModel
from .building import (
    RawBuff,
    RawBuildCost,
    RawBuildingChar,
    RawBuildingData,
    RawCharBuff,
    RawCharBuffPhase,
    RawRoom,
    RawRoomPhase,
    RawRoomSize,
)
from .character import (
    RawCharacter,
    RawCharacterSkill,
    RawKeyFrame,
    RawKeyFrameData,
    RawPhase,
    RawPotentialRank,
    RawSkillMasteryCond,
    RawTalent,
    RawTalentCandidate,
)
from .equip import RawEquip, RawEquipMission, RawEquipTable
from .gacha import RawGachaPool, RawGachaTable, RawRecruitTag
from .handbook import RawHandbookEntry, RawHandbookTable, RawStory, RawStoryEntry
from .item import RawItem, RawItemTable
from .meta import RawCharacterMetaTable
from .range import RawGridPoint, RawRange
from .skill import RawSkill, RawSkillLevel, RawSpData
from .skin import RawDisplaySkin, RawSkin, RawSkinTable


@dataclass(slots=True)
class RawTableSet:
    """Every decoded table, owned by a single assembler.

    The assembler removes side records (modules, missions, base skills,
    handbook entries, skins) from these mappings as it attaches them, so a
    table set must not be shared between assemblies.
    """

    characters: dict[str, RawCharacter] = field(default_factory=dict)
    skills: dict[str, RawSkill] = field(default_factory=dict)
    building: RawBuildingData = field(default_factory=RawBuildingData)
    equip: RawEquipTable = field(default_factory=RawEquipTable)
    handbook: RawHandbookTable = field(default_factory=RawHandbookTable)
    skins: RawSkinTable = field(default_factory=RawSkinTable)
    items: RawItemTable = field(default_factory=RawItemTable)
    ranges: dict[str, RawRange] = field(default_factory=dict)
    gacha: RawGachaTable = field(default_factory=RawGachaTable)
    activity: RawActivityTable = field(default_factory=RawActivityTable)
    meta: RawCharacterMetaTable = field(default_factory=RawCharacterMetaTable)


# RawTableSet field -> (path below the gamedata directory, decoded type)
TABLE_FILES: dict[str, tuple[str, Any]] = {
    "characters": ("excel/character_table.json", dict[str, RawCharacter]),
    "skills": ("excel/skill_table.json", dict[str, RawSkill]),
    "building": ("excel/building_data.json", RawBuildingData),
    "equip": ("excel/uniequip_table.json", RawEquipTable),
    "handbook": ("excel/handbook_info_table.json", RawHandbookTable),
    "skins": ("excel/skin_table.json", RawSkinTable),
    "items": ("excel/item_table.json", RawItemTable),
    "ranges": ("excel/range_table.json", dict[str, RawRange]),
    "gacha": ("excel/gacha_table.json", RawGachaTable),
    "activity": ("excel/activity_table.json", RawActivityTable),
    "meta": ("excel/char_meta_table.json", RawCharacterMetaTable),
}

__all__ = [
    "TABLE_FILES",
    "RawActivityInfo",
    "RawActivityTable",
    "RawBlackboardEntry",
    "RawBuff",
    "RawBuildCost",
    "RawBuildingChar",
    "RawBuildingData",
    "RawCharBuff",
    "RawCharBuffPhase",
    "RawCharacter",
    "RawCharacterMetaTable",
    "RawCharacterSkill",
    "RawCondition",
    "RawDisplaySkin",
    "RawEquip",
    "RawEquipMission",
    "RawEquipTable",
    "RawGachaPool",
    "RawGachaTable",
    "RawGridPoint",
    "RawHandbookEntry",
    "RawHandbookTable",
    "RawItem",
    "RawItemCost",
    "RawItemTable",
    "RawKeyFrame",
    "RawKeyFrameData",
    "RawModel",
    "RawPhase",
    "RawPotentialRank",
    "RawRange",
    "RawRecruitTag",
    "RawRoom",
    "RawRoomPhase",
    "RawRoomSize",
    "RawSkill",
    "RawSkillLevel",
    "RawSkillMasteryCond",
    "RawSkin",
    "RawSkinTable",
    "RawSpData",
    "RawStory",
    "RawStoryEntry",
    "RawTableSet",
    "RawTalent",
    "RawTalentCandidate",
]
