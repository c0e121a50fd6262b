"""Dataclasses describing the assembled game data.

Everything here is produced once by the assembler and never mutated
afterwards, so the dataclasses are frozen.  Cross references between
entities (attack ranges, items, skins) are kept as string identifiers and
resolved on demand against the maps held by :class:`GameData`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime

from .attributes import level_attributes, trust_bonus
from .enums import (
    BannerType,
    BaseSkillCategory,
    BuildingType,
    EventType,
    FileUnlockKind,
    ItemClass,
    Position,
    Profession,
    Promotion,
    SkillActivation,
    SkillRecovery,
    SubProfession,
    Tense,
)

# item id -> count
ItemsCost = dict[str, int]


@dataclass(frozen=True, slots=True, order=True)
class PromotionAndLevel:
    """A promotion tier together with a level inside that tier.

    Ordering compares the tier first and the level second, which is what
    every "is X unlocked at Y" check relies on.
    """

    promotion: Promotion
    level: int

    def __str__(self) -> str:
        return f"E{int(self.promotion)} Lv{self.level}"


# --- Items, ranges, buildings ---------------------------------------------------


@dataclass(frozen=True, slots=True)
class Item:
    """An inventory item."""

    id: str
    name: str
    rarity: int
    item_class: ItemClass
    item_type: str
    description: str | None = None
    usage: str | None = None
    obtain: str | None = None


def iter_items_cost(
    cost: Mapping[str, int], items: Mapping[str, Item]
) -> Iterator[tuple[Item, int]]:
    """Yield ``(item, count)`` for every known item in ``cost``."""

    for item_id, count in cost.items():
        item = items.get(item_id)
        if item is not None:
            yield item, count


@dataclass(frozen=True, slots=True)
class AttackRange:
    """Grid tiles an operator can attack, as ``(x, y)`` offsets."""

    points: frozenset[tuple[int, int]]

    def contains(self, point: tuple[int, int]) -> bool:
        return tuple(point) in self.points

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(sorted(self.points))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class BuildingUpgrade:
    """One construction/upgrade stage of a base room."""

    unlock_condition: str
    construction_cost: ItemsCost
    construction_drones: int
    # positive for power plants, negative for consumers
    power: int
    operator_capacity: int
    manpower_cost: int

    def iter_construction_cost(self, items: Mapping[str, Item]) -> Iterator[tuple[Item, int]]:
        return iter_items_cost(self.construction_cost, items)


@dataclass(frozen=True, slots=True)
class Building:
    """A room type that can be built in the base."""

    building_type: BuildingType
    name: str
    category: str
    # (width, height)
    size: tuple[int, int]
    upgrades: list[BuildingUpgrade]
    description: str | None = None
    max_count: int | None = None


# --- Operator attributes --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TrustAttributes:
    """Health/attack/defense bonus granted by trust."""

    max_hp: int = 0
    atk: int = 0
    defense: int = 0

    def at_trust(self, trust: int) -> TrustAttributes:
        """Bonus actually granted at ``trust`` percent (capped at 200)."""

        return trust_bonus(self, trust)


@dataclass(frozen=True, slots=True)
class PromotionAttributes:
    """Attribute keyframe of an operator at a given level."""

    level: int
    max_hp: int
    atk: int
    defense: int
    magic_resistance: float
    deployment_cost: int
    block_count: int
    move_speed: float
    attack_speed: float
    base_attack_time: float
    redeploy_time: int
    hp_recovery_per_sec: float
    sp_recovery_per_sec: float
    max_deploy_count: int
    max_deck_stack_count: int
    taunt_level: int
    is_stun_immune: bool
    is_silence_immune: bool
    is_sleep_immune: bool
    is_frozen_immune: bool

    def with_trust(self, bonus: TrustAttributes) -> PromotionAttributes:
        return replace(
            self,
            max_hp=self.max_hp + bonus.max_hp,
            atk=self.atk + bonus.atk,
            defense=self.defense + bonus.defense,
        )


@dataclass(frozen=True, slots=True)
class OperatorPromotion:
    """A promotion tier an operator can reach."""

    min_attributes: PromotionAttributes
    max_attributes: PromotionAttributes
    max_level: int
    upgrade_cost: ItemsCost = field(default_factory=dict)
    attack_range_id: str | None = None
    skin_id: str | None = None

    def get_level_attributes(self, level: int) -> PromotionAttributes:
        """Attributes at ``level`` within this tier (no trust or talents)."""

        return level_attributes(self.min_attributes, self.max_attributes, level)

    def get_attack_range(self, ranges: Mapping[str, AttackRange]) -> AttackRange | None:
        return ranges.get(self.attack_range_id) if self.attack_range_id else None

    def get_skin(self, skins: Mapping[str, OperatorSkin]) -> OperatorSkin | None:
        return skins.get(self.skin_id) if self.skin_id else None

    def iter_upgrade_cost(self, items: Mapping[str, Item]) -> Iterator[tuple[Item, int]]:
        return iter_items_cost(self.upgrade_cost, items)


@dataclass(frozen=True, slots=True)
class OperatorPromotions:
    """The base tier plus the optional elite tiers, in order."""

    none: OperatorPromotion
    elite_1: OperatorPromotion | None = None
    elite_2: OperatorPromotion | None = None

    def __post_init__(self) -> None:
        if self.elite_2 is not None and self.elite_1 is None:
            raise ValueError("elite 2 promotion requires an elite 1 promotion")

    def get(self, promotion: Promotion) -> OperatorPromotion | None:
        if promotion is Promotion.NONE:
            return self.none
        if promotion is Promotion.ELITE_1:
            return self.elite_1
        return self.elite_2

    def get_attributes(self, promotion_and_level: PromotionAndLevel) -> PromotionAttributes | None:
        tier = self.get(promotion_and_level.promotion)
        if tier is None:
            return None
        return tier.get_level_attributes(promotion_and_level.level)

    def __iter__(self) -> Iterator[OperatorPromotion]:
        yield self.none
        if self.elite_1 is not None:
            yield self.elite_1
        if self.elite_2 is not None:
            yield self.elite_2

    def __len__(self) -> int:
        return sum(1 for _ in self)


# --- Skills, talents, modules, base skills -------------------------------------


@dataclass(frozen=True, slots=True)
class OperatorPotential:
    """One potential rank upgrade.

    ``potential_type`` is 0 for stat boosts and 1 for talent improvements.
    """

    potential_type: int
    description: str


@dataclass(frozen=True, slots=True)
class SkillLevel:
    """A single upgrade level of a skill."""

    duration: float
    max_charge_time: int
    sp_cost: int
    initial_sp: int
    increment: float
    description: str | None = None
    attack_range_id: str | None = None
    prefab_key: str | None = None

    def get_attack_range(self, ranges: Mapping[str, AttackRange]) -> AttackRange | None:
        return ranges.get(self.attack_range_id) if self.attack_range_id else None


@dataclass(frozen=True, slots=True)
class SkillMastery:
    """A mastery level: its unlock requirements plus the level it grants."""

    condition: PromotionAndLevel
    upgrade_time: int
    level: SkillLevel
    upgrade_cost: ItemsCost = field(default_factory=dict)

    @property
    def description(self) -> str | None:
        return self.level.description

    @property
    def duration(self) -> float:
        return self.level.duration

    @property
    def sp_cost(self) -> int:
        return self.level.sp_cost

    def is_unlockable(self, promotion_and_level: PromotionAndLevel) -> bool:
        return self.condition <= promotion_and_level

    def iter_upgrade_cost(self, items: Mapping[str, Item]) -> Iterator[tuple[Item, int]]:
        return iter_items_cost(self.upgrade_cost, items)


@dataclass(frozen=True, slots=True)
class OperatorSkill:
    """A skill with its seven levels and optional three mastery levels."""

    id: str
    name: str
    condition: PromotionAndLevel
    activation: SkillActivation
    recovery: SkillRecovery
    levels: tuple[SkillLevel, ...]
    mastery: tuple[SkillMastery, ...] | None = None
    prefab_key: str | None = None

    def is_unlocked(self, promotion_and_level: PromotionAndLevel) -> bool:
        return self.condition <= promotion_and_level

    def iter_levels(self) -> Iterator[SkillLevel]:
        """All levels in upgrade order, mastery levels included."""

        yield from self.levels
        if self.mastery is not None:
            for mastery in self.mastery:
                yield mastery.level


@dataclass(frozen=True, slots=True)
class TalentPhase:
    """An unlockable phase of a talent."""

    name: str
    description: str
    condition: PromotionAndLevel
    required_potential: int
    # opaque marker carried over from the source ("1", "1+", "2", "#")
    prefab_key: str
    attack_range_id: str | None = None
    effects: dict[str, float] = field(default_factory=dict)

    def is_unlocked(self, promotion_and_level: PromotionAndLevel, potential: int) -> bool:
        return self.condition <= promotion_and_level and self.required_potential <= potential

    def get_attack_range(self, ranges: Mapping[str, AttackRange]) -> AttackRange | None:
        return ranges.get(self.attack_range_id) if self.attack_range_id else None


@dataclass(frozen=True, slots=True)
class OperatorTalent:
    phases: list[TalentPhase]

    def get_unlocked(
        self, promotion_and_level: PromotionAndLevel, potential: int
    ) -> TalentPhase | None:
        """The most advanced phase unlocked at the given state."""

        for phase in reversed(self.phases):
            if phase.is_unlocked(promotion_and_level, potential):
                return phase
        return None


@dataclass(frozen=True, slots=True)
class ModuleMission:
    description: str
    sort: int


@dataclass(frozen=True, slots=True)
class OperatorModule:
    """A non-default module (equipment) of an operator."""

    id: str
    name: str
    description: str
    condition: PromotionAndLevel
    # trust percent (0-200), not raw trust points
    required_trust: int
    upgrade_cost: ItemsCost = field(default_factory=dict)
    missions: dict[str, ModuleMission] = field(default_factory=dict)

    def is_unlockable(self, promotion_and_level: PromotionAndLevel, trust: int) -> bool:
        return self.condition <= promotion_and_level and self.required_trust <= trust

    def iter_upgrade_cost(self, items: Mapping[str, Item]) -> Iterator[tuple[Item, int]]:
        return iter_items_cost(self.upgrade_cost, items)


@dataclass(frozen=True, slots=True)
class BaseSkillPhase:
    name: str
    condition: PromotionAndLevel
    sort: int
    category: BaseSkillCategory
    building_type: BuildingType

    def is_unlocked(self, promotion_and_level: PromotionAndLevel) -> bool:
        return self.condition <= promotion_and_level


@dataclass(frozen=True, slots=True)
class OperatorBaseSkill:
    phases: list[BaseSkillPhase]

    def get_unlocked(self, promotion_and_level: PromotionAndLevel) -> BaseSkillPhase | None:
        for phase in reversed(self.phases):
            if phase.is_unlocked(promotion_and_level):
                return phase
        return None


@dataclass(frozen=True, slots=True)
class OperatorSkin:
    """An outfit, default outfits included."""

    id: str
    model_id: str
    model_name: str
    is_paid: bool
    illustration_id: str
    avatar_id: str
    portrait_id: str
    illustrator: str
    group: str
    name: str | None = None
    illustration_live_id: str | None = None
    dialog: str | None = None
    usage: str | None = None
    description: str | None = None
    obtain: str | None = None


# --- Operator file --------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileUnlock:
    """Unlock condition of a file entry.

    Only the field matching ``kind`` is set.  ``OPERATOR_UNLOCKED`` depends on
    the player's roster and never tests true here.
    """

    kind: FileUnlockKind = FileUnlockKind.ALWAYS
    trust: int | None = None
    condition: PromotionAndLevel | None = None
    operator_id: str | None = None

    def test(self, promotion_and_level: PromotionAndLevel, trust: int) -> bool:
        if self.kind is FileUnlockKind.ALWAYS:
            return True
        if self.kind is FileUnlockKind.TRUST:
            return self.trust is not None and self.trust <= trust
        if self.kind is FileUnlockKind.PROMOTION_LEVEL:
            return self.condition is not None and self.condition <= promotion_and_level
        return False


@dataclass(frozen=True, slots=True)
class FileEntry:
    title: str
    text: str
    unlock: FileUnlock = FileUnlock()

    def iter_lines(self) -> Iterator[str]:
        for line in self.text.splitlines():
            line = line.strip()
            if line:
                yield line

    def find_line(self, name: str) -> str | None:
        """Value of a ``[Name] value`` line, e.g. ``find_line("Gender")``."""

        for line in self.iter_lines():
            if not line.startswith("["):
                continue
            header, sep, value = line[1:].partition("] ")
            if sep and header == name:
                return value
        return None

    def is_unlocked(self, promotion_and_level: PromotionAndLevel, trust: int) -> bool:
        return self.unlock.test(promotion_and_level, trust)


@dataclass(frozen=True, slots=True)
class OperatorFile:
    """Archive/handbook text of an operator."""

    operator_id: str
    illustrator_name: str
    entries: list[FileEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    def iter_unlocked(
        self, promotion_and_level: PromotionAndLevel, trust: int
    ) -> Iterator[FileEntry]:
        return (entry for entry in self.entries if entry.is_unlocked(promotion_and_level, trust))


# --- Operator -------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Operator:
    """A fully resolved, obtainable operator."""

    id: str
    name: str
    display_number: str
    position: Position
    rarity: int
    profession: Profession
    sub_profession: SubProfession
    promotions: OperatorPromotions
    recruitment_tags: list[str] = field(default_factory=list)
    nation_id: str | None = None
    group_id: str | None = None
    team_id: str | None = None
    appellation: str | None = None
    potential_item_id: str | None = None
    potential: list[OperatorPotential] = field(default_factory=list)
    skills: list[OperatorSkill] = field(default_factory=list)
    talents: list[OperatorTalent] = field(default_factory=list)
    modules: list[OperatorModule] = field(default_factory=list)
    skins: dict[str, OperatorSkin] = field(default_factory=dict)
    base_skills: list[OperatorBaseSkill] = field(default_factory=list)
    trust_bonus: TrustAttributes = TrustAttributes()
    file: OperatorFile | None = None

    def get_attributes(
        self, promotion_and_level: PromotionAndLevel, trust: int = 0
    ) -> PromotionAttributes | None:
        """Attributes at a promotion, level and trust percent (talents excluded)."""

        attributes = self.promotions.get_attributes(promotion_and_level)
        if attributes is None:
            return None
        return attributes.with_trust(self.trust_bonus.at_trust(trust))

    def get_potential_item(self, items: Mapping[str, Item]) -> Item | None:
        return items.get(self.potential_item_id) if self.potential_item_id else None

    def iter_default_skins(self) -> Iterator[OperatorSkin]:
        for promotion in self.promotions:
            skin = promotion.get_skin(self.skins)
            if skin is not None:
                yield skin

    def iter_recruitment_tag_ids(self, recruitment_tags: Mapping[str, int]) -> Iterator[int]:
        for tag in self.recruitment_tags:
            tag_id = recruitment_tags.get(tag)
            if tag_id is not None:
                yield tag_id


# --- Banners and events ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HeadhuntingBanner:
    id: str
    name: str
    # human-readable closing time
    summary: str
    index: int
    open_time: datetime
    close_time: datetime
    banner_type: BannerType
    # free ten-pull contract item, if any
    item_id: str | None = None

    def is_past(self, now: datetime) -> bool:
        return now >= self.close_time

    def is_current(self, now: datetime) -> bool:
        return self.open_time <= now < self.close_time

    def is_future(self, now: datetime) -> bool:
        return self.open_time > now

    def get_item(self, items: Mapping[str, Item]) -> Item | None:
        return items.get(self.item_id) if self.item_id else None


@dataclass(frozen=True, slots=True)
class Event:
    id: str
    name: str
    event_type: EventType
    open_time: datetime
    # levels close here; the shop stays open until close_time_rewards
    close_time: datetime
    close_time_rewards: datetime
    is_rerun: bool = False

    def is_past(self, now: datetime) -> bool:
        return now >= self.close_time_rewards

    def is_current_playable(self, now: datetime) -> bool:
        return self.open_time <= now < self.close_time

    def is_current(self, now: datetime) -> bool:
        return self.open_time <= now < self.close_time_rewards

    def is_future(self, now: datetime) -> bool:
        return self.open_time > now


def _matches_tense(entry: HeadhuntingBanner | Event, now: datetime, tense: Tense) -> bool:
    if tense is Tense.PAST:
        return entry.is_past(now)
    if tense is Tense.CURRENT:
        return entry.is_current(now)
    return entry.is_future(now)


# --- Root aggregate -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GameData:
    """Root aggregate holding every assembled table."""

    operators: dict[str, Operator] = field(default_factory=dict)
    items: dict[str, Item] = field(default_factory=dict)
    buildings: dict[BuildingType, Building] = field(default_factory=dict)
    ranges: dict[str, AttackRange] = field(default_factory=dict)
    # tag name -> tag id
    recruitment_tags: dict[str, int] = field(default_factory=dict)
    headhunting_banners: list[HeadhuntingBanner] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    # unordered pairs of operator ids
    alters: list[frozenset[str]] = field(default_factory=list)
    last_updated: datetime | None = None

    def get_alter_for(self, operator_id: str) -> str | None:
        """The other operator of an alternate-form pair, if any."""

        for pair in self.alters:
            if operator_id in pair:
                others = pair - {operator_id}
                if others:
                    return next(iter(others))
        return None

    def find_operator(self, name: str) -> Operator | None:
        """Case-insensitive lookup by in-game (region dependent) name."""

        wanted = name.casefold()
        for operator in self.operators.values():
            if operator.name.casefold() == wanted:
                return operator
        return None

    def find_item(self, name: str) -> Item | None:
        wanted = name.casefold()
        for item in self.items.values():
            if item.name.casefold() == wanted:
                return item
        return None

    def iter_banners(self, now: datetime, tense: Tense) -> Iterator[HeadhuntingBanner]:
        """Banners matching ``tense`` relative to ``now``, oldest first."""

        return (b for b in self.headhunting_banners if _matches_tense(b, now, tense))

    def iter_events(self, now: datetime, tense: Tense) -> Iterator[Event]:
        return (e for e in self.events if _matches_tense(e, now, tense))

    def is_outdated(self, when: datetime) -> bool:
        """True if ``when`` is more recent than the data's update time."""

        return self.last_updated is None or self.last_updated < when
