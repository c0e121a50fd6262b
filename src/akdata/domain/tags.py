"""Lookup tables from raw export tags to domain enums.

A tag mapped to ``None`` is known but deliberately excluded (tokens, traps,
placeholder classes).  A tag missing from its table is unknown: the record
is filtered in lenient mode and :class:`UnknownTagError` is raised in strict
mode, so upstream schema drift surfaces during validation runs.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from typing import TypeVar

from .enums import (
    BannerType,
    BaseSkillCategory,
    BuildingType,
    EventType,
    ItemClass,
    Position,
    Profession,
    Promotion,
    SkillActivation,
    SkillRecovery,
    StrictnessMode,
    SubProfession,
)
from .errors import UnknownTagError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROMOTIONS: dict[int, Promotion | None] = {
    0: Promotion.NONE,
    1: Promotion.ELITE_1,
    2: Promotion.ELITE_2,
}

POSITIONS: dict[str, Position | None] = {
    "MELEE": Position.MELEE,
    "RANGED": Position.RANGED,
    "ALL": None,
    "NONE": None,
}

PROFESSIONS: dict[str, Profession | None] = {
    "CASTER": Profession.CASTER,
    "MEDIC": Profession.MEDIC,
    "PIONEER": Profession.VANGUARD,
    "SNIPER": Profession.SNIPER,
    "SPECIAL": Profession.SPECIALIST,
    "SUPPORT": Profession.SUPPORT,
    "TANK": Profession.TANK,
    "WARRIOR": Profession.GUARD,
    "TOKEN": None,
    "TRAP": None,
}

SUB_PROFESSIONS: dict[str, SubProfession | None] = {
    "blastcaster": SubProfession.BLAST_CASTER,
    "chain": SubProfession.CHAIN_CASTER,
    "corecaster": SubProfession.CORE_CASTER,
    "funnel": SubProfession.MECH_ACCORD_CASTER,
    "mystic": SubProfession.MYSTIC_CASTER,
    "phalanx": SubProfession.PHALANX_CASTER,
    "splashcaster": SubProfession.SPLASH_CASTER,
    "healer": SubProfession.THERAPIST,
    "physician": SubProfession.MEDIC,
    "ringhealer": SubProfession.MULTI_TARGET_MEDIC,
    "wandermedic": SubProfession.WANDERING_MEDIC,
    "bearer": SubProfession.STANDARD_BEARER,
    "charger": SubProfession.CHARGER,
    "pioneer": SubProfession.PIONEER,
    "tactician": SubProfession.TACTICIAN,
    "aoesniper": SubProfession.ARTILLERYMAN,
    "bombarder": SubProfession.FLINGER,
    "closerange": SubProfession.HEAVYSHOOTER,
    "fastshot": SubProfession.MARKSMAN,
    "longrange": SubProfession.DEADEYE,
    "reaperrange": SubProfession.SPREADSHOOTER,
    "siegesniper": SubProfession.BESIEGER,
    "dollkeeper": SubProfession.DOLLKEEPER,
    "executor": SubProfession.EXECUTOR,
    "geek": SubProfession.GEEK,
    "hookmaster": SubProfession.HOOKMASTER,
    "merchant": SubProfession.MERCHANT,
    "pusher": SubProfession.PUSH_STROKER,
    "stalker": SubProfession.AMBUSHER,
    "traper": SubProfession.TRAPMASTER,
    "bard": SubProfession.BARD,
    "blessing": SubProfession.ABJURER,
    "craftsman": SubProfession.ARTIFICER,
    "slower": SubProfession.DECEL_BINDER,
    "summoner": SubProfession.SUMMONER,
    "underminer": SubProfession.HEXER,
    "artsprotector": SubProfession.ARTS_PROTECTOR,
    "duelist": SubProfession.DUELIST,
    "fortress": SubProfession.FORTRESS,
    "guardian": SubProfession.GUARDIAN,
    "protector": SubProfession.PROTECTOR,
    "unyield": SubProfession.JUGGERNAUT,
    # the export really spells it this way
    "artsfghter": SubProfession.ARTS_FIGHTER,
    "centurion": SubProfession.CENTURION,
    "fearless": SubProfession.DREADNOUGHT,
    "fighter": SubProfession.FIGHTER,
    "instructor": SubProfession.INSTRUCTOR,
    "librator": SubProfession.LIBERATOR,
    "lord": SubProfession.LORD,
    "musha": SubProfession.MUSHA,
    "reaper": SubProfession.REAPER,
    "sword": SubProfession.SWORDMASTER,
    "none1": None,
    "none2": None,
    "notchar1": None,
    "notchar2": None,
}

SKILL_ACTIVATIONS: dict[int, SkillActivation | None] = {
    0: SkillActivation.PASSIVE,
    1: SkillActivation.MANUAL,
    2: SkillActivation.AUTO,
}

SKILL_RECOVERIES: dict[int, SkillRecovery | None] = {
    1: SkillRecovery.AUTO_RECOVERY,
    2: SkillRecovery.OFFENSIVE_RECOVERY,
    4: SkillRecovery.DEFENSIVE_RECOVERY,
    8: SkillRecovery.PASSIVE,
}

ROOM_TYPES: dict[str, BuildingType | None] = {
    "CONTROL": BuildingType.CONTROL_CENTER,
    "POWER": BuildingType.POWER_PLANT,
    "MANUFACTURE": BuildingType.FACTORY,
    "TRADING": BuildingType.TRADING_POST,
    "DORMITORY": BuildingType.DORMITORY,
    "WORKSHOP": BuildingType.WORKSHOP,
    "HIRE": BuildingType.OFFICE,
    "TRAINING": BuildingType.TRAINING_ROOM,
    "MEETING": BuildingType.RECEPTION_ROOM,
    "ELEVATOR": BuildingType.ELEVATOR,
    "CORRIDOR": BuildingType.CORRIDOR,
}

BUFF_CATEGORIES: dict[str, BaseSkillCategory | None] = {
    "FUNCTION": BaseSkillCategory.FUNCTION,
    "RECOVERY": BaseSkillCategory.RECOVERY,
    "OUTPUT": BaseSkillCategory.OUTPUT,
}

ITEM_CLASSES: dict[str, ItemClass | None] = {
    "CONSUME": ItemClass.CONSUMABLE,
    "NORMAL": ItemClass.BASIC_ITEM,
    "MATERIAL": ItemClass.MATERIAL,
    "NONE": ItemClass.OTHER,
}

BANNER_TYPES: dict[str, BannerType | None] = {
    "NORMAL": BannerType.NORMAL,
    "LIMITED": BannerType.LIMITED,
    "LINKAGE": BannerType.SPECIAL,
    "ATTAIN": BannerType.SPECIAL,
}

EVENT_TYPES: dict[str, EventType | None] = {
    "BRANCHLINE": EventType.INTERMEZZI,
    "SIDESTORY": EventType.SIDE_STORY,
    "MINISTORY": EventType.VIGNETTE,
}


def lookup_tag(
    table: Mapping[Hashable, T | None],
    value: Hashable,
    field: str,
    *,
    strictness: StrictnessMode = StrictnessMode.LENIENT,
    record_id: str | None = None,
) -> T | None:
    """Map ``value`` through ``table``.

    Returns ``None`` for excluded tags and, in lenient mode, for unknown ones.
    """

    if value in table:
        return table[value]
    if strictness is StrictnessMode.STRICT:
        raise UnknownTagError(field, value, record_id=record_id)
    logger.debug("unknown %s tag %r on %s", field, value, record_id)
    return None
