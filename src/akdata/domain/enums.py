"""Enumerations used across the resolved game data model."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class StrictnessMode(StrEnum):
    """Whether data gaps are filtered silently or surfaced as errors."""

    LENIENT = "lenient"
    STRICT = "strict"


class Promotion(IntEnum):
    """Promotion tier of an operator, ordered base < elite 1 < elite 2."""

    NONE = 0
    ELITE_1 = 1
    ELITE_2 = 2


class Position(StrEnum):
    """Whether an operator is deployed on melee or ranged tiles."""

    MELEE = "melee"
    RANGED = "ranged"


class Profession(StrEnum):
    """An operator's primary class."""

    CASTER = "caster"
    MEDIC = "medic"
    VANGUARD = "vanguard"
    SNIPER = "sniper"
    SPECIALIST = "specialist"
    SUPPORT = "support"
    TANK = "tank"
    GUARD = "guard"


class SubProfession(StrEnum):
    """An operator's secondary class (archetype)."""

    # casters
    BLAST_CASTER = "blast_caster"
    CHAIN_CASTER = "chain_caster"
    CORE_CASTER = "core_caster"
    MECH_ACCORD_CASTER = "mech_accord_caster"
    MYSTIC_CASTER = "mystic_caster"
    PHALANX_CASTER = "phalanx_caster"
    SPLASH_CASTER = "splash_caster"
    # medics
    THERAPIST = "therapist"
    MEDIC = "medic"
    MULTI_TARGET_MEDIC = "multi_target_medic"
    WANDERING_MEDIC = "wandering_medic"
    # vanguards
    STANDARD_BEARER = "standard_bearer"
    CHARGER = "charger"
    PIONEER = "pioneer"
    TACTICIAN = "tactician"
    # snipers
    ARTILLERYMAN = "artilleryman"
    FLINGER = "flinger"
    HEAVYSHOOTER = "heavyshooter"
    MARKSMAN = "marksman"
    DEADEYE = "deadeye"
    SPREADSHOOTER = "spreadshooter"
    BESIEGER = "besieger"
    # specialists
    DOLLKEEPER = "dollkeeper"
    EXECUTOR = "executor"
    GEEK = "geek"
    HOOKMASTER = "hookmaster"
    MERCHANT = "merchant"
    PUSH_STROKER = "push_stroker"
    AMBUSHER = "ambusher"
    TRAPMASTER = "trapmaster"
    # supports
    BARD = "bard"
    ABJURER = "abjurer"
    ARTIFICER = "artificer"
    DECEL_BINDER = "decel_binder"
    SUMMONER = "summoner"
    HEXER = "hexer"
    # tanks
    ARTS_PROTECTOR = "arts_protector"
    DUELIST = "duelist"
    FORTRESS = "fortress"
    GUARDIAN = "guardian"
    PROTECTOR = "protector"
    JUGGERNAUT = "juggernaut"
    # guards
    ARTS_FIGHTER = "arts_fighter"
    CENTURION = "centurion"
    DREADNOUGHT = "dreadnought"
    FIGHTER = "fighter"
    INSTRUCTOR = "instructor"
    LIBERATOR = "liberator"
    LORD = "lord"
    MUSHA = "musha"
    REAPER = "reaper"
    SWORDMASTER = "swordmaster"

    @property
    def profession(self) -> Profession:
        """The primary class this archetype belongs to."""

        return _SUB_PROFESSION_PARENTS[self]


_SUB_PROFESSION_PARENTS: dict[SubProfession, Profession] = {
    **dict.fromkeys(
        (
            SubProfession.BLAST_CASTER,
            SubProfession.CHAIN_CASTER,
            SubProfession.CORE_CASTER,
            SubProfession.MECH_ACCORD_CASTER,
            SubProfession.MYSTIC_CASTER,
            SubProfession.PHALANX_CASTER,
            SubProfession.SPLASH_CASTER,
        ),
        Profession.CASTER,
    ),
    **dict.fromkeys(
        (
            SubProfession.THERAPIST,
            SubProfession.MEDIC,
            SubProfession.MULTI_TARGET_MEDIC,
            SubProfession.WANDERING_MEDIC,
        ),
        Profession.MEDIC,
    ),
    **dict.fromkeys(
        (
            SubProfession.STANDARD_BEARER,
            SubProfession.CHARGER,
            SubProfession.PIONEER,
            SubProfession.TACTICIAN,
        ),
        Profession.VANGUARD,
    ),
    **dict.fromkeys(
        (
            SubProfession.ARTILLERYMAN,
            SubProfession.FLINGER,
            SubProfession.HEAVYSHOOTER,
            SubProfession.MARKSMAN,
            SubProfession.DEADEYE,
            SubProfession.SPREADSHOOTER,
            SubProfession.BESIEGER,
        ),
        Profession.SNIPER,
    ),
    **dict.fromkeys(
        (
            SubProfession.DOLLKEEPER,
            SubProfession.EXECUTOR,
            SubProfession.GEEK,
            SubProfession.HOOKMASTER,
            SubProfession.MERCHANT,
            SubProfession.PUSH_STROKER,
            SubProfession.AMBUSHER,
            SubProfession.TRAPMASTER,
        ),
        Profession.SPECIALIST,
    ),
    **dict.fromkeys(
        (
            SubProfession.BARD,
            SubProfession.ABJURER,
            SubProfession.ARTIFICER,
            SubProfession.DECEL_BINDER,
            SubProfession.SUMMONER,
            SubProfession.HEXER,
        ),
        Profession.SUPPORT,
    ),
    **dict.fromkeys(
        (
            SubProfession.ARTS_PROTECTOR,
            SubProfession.DUELIST,
            SubProfession.FORTRESS,
            SubProfession.GUARDIAN,
            SubProfession.PROTECTOR,
            SubProfession.JUGGERNAUT,
        ),
        Profession.TANK,
    ),
    **dict.fromkeys(
        (
            SubProfession.ARTS_FIGHTER,
            SubProfession.CENTURION,
            SubProfession.DREADNOUGHT,
            SubProfession.FIGHTER,
            SubProfession.INSTRUCTOR,
            SubProfession.LIBERATOR,
            SubProfession.LORD,
            SubProfession.MUSHA,
            SubProfession.REAPER,
            SubProfession.SWORDMASTER,
        ),
        Profession.GUARD,
    ),
}


class SkillActivation(StrEnum):
    """How a skill is triggered once charged."""

    PASSIVE = "passive"
    MANUAL = "manual"
    AUTO = "auto"


class SkillRecovery(StrEnum):
    """How a skill regains skill points."""

    PASSIVE = "passive"
    AUTO_RECOVERY = "auto_recovery"
    OFFENSIVE_RECOVERY = "offensive_recovery"
    DEFENSIVE_RECOVERY = "defensive_recovery"


class BaseSkillCategory(StrEnum):
    """Category of a base (building-granted) skill."""

    FUNCTION = "function"
    RECOVERY = "recovery"
    OUTPUT = "output"


class BuildingType(StrEnum):
    """Rooms that can exist in the base."""

    CONTROL_CENTER = "control_center"
    POWER_PLANT = "power_plant"
    FACTORY = "factory"
    TRADING_POST = "trading_post"
    DORMITORY = "dormitory"
    WORKSHOP = "workshop"
    OFFICE = "office"
    TRAINING_ROOM = "training_room"
    RECEPTION_ROOM = "reception_room"
    ELEVATOR = "elevator"
    CORRIDOR = "corridor"


class ItemClass(StrEnum):
    """Inventory categorisation of an item."""

    CONSUMABLE = "consumable"
    BASIC_ITEM = "basic_item"
    MATERIAL = "material"
    OTHER = "other"


class FileUnlockKind(StrEnum):
    """Unlock condition kinds for an operator file entry."""

    ALWAYS = "always"
    TRUST = "trust"
    PROMOTION_LEVEL = "promotion_level"
    OPERATOR_UNLOCKED = "operator_unlocked"


class EventType(StrEnum):
    """Categorisation of a playable event."""

    INTERMEZZI = "intermezzi"
    SIDE_STORY = "side_story"
    VIGNETTE = "vignette"


class BannerType(StrEnum):
    """Categorisation of a headhunting banner."""

    NORMAL = "normal"
    LIMITED = "limited"
    # ATTAIN and LINKAGE rule types
    SPECIAL = "special"


class Tense(StrEnum):
    """Past, current or future; used to filter banners and events."""

    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"
