"""Resolution of raw character records into :class:`Operator` objects.

The resolver owns the side tables of a :class:`RawTableSet` and removes
records from them as it attaches them to an operator (modules, missions,
base skills, handbook entries, skins).  A removed record can never be
attached to a second operator.  Shared reference data (skills, buff
definitions) is only looked up.

Structural gaps drop the operator with a DEBUG log line; unknown tags do the
same in lenient mode and raise :class:`UnknownTagError` in strict mode.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from dataclasses import replace
from typing import TypeVar

from akdata.schemas import (
    RawCharacter,
    RawCharBuffPhase,
    RawCharacterSkill,
    RawCondition,
    RawItemCost,
    RawKeyFrame,
    RawPhase,
    RawSkill,
    RawSkillLevel,
    RawSkin,
    RawStory,
    RawTableSet,
    RawTalent,
)

from .attributes import trust_points_to_percent
from .enums import FileUnlockKind, Promotion
from .models import (
    BaseSkillPhase,
    FileEntry,
    FileUnlock,
    ItemsCost,
    ModuleMission,
    Operator,
    OperatorBaseSkill,
    OperatorFile,
    OperatorModule,
    OperatorPotential,
    OperatorPromotion,
    OperatorPromotions,
    OperatorSkill,
    OperatorSkin,
    OperatorTalent,
    PromotionAndLevel,
    PromotionAttributes,
    SkillLevel,
    SkillMastery,
    TalentPhase,
    TrustAttributes,
)
from .rules_config import DEFAULT_RULES, AssemblyRules
from .tags import (
    BUFF_CATEGORIES,
    POSITIONS,
    PROFESSIONS,
    PROMOTIONS,
    ROOM_TYPES,
    SKILL_ACTIVATIONS,
    SKILL_RECOVERIES,
    SUB_PROFESSIONS,
    lookup_tag,
)
from .templates import TemplateEngine, build_blackboard

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

# handbook unlock type whose parameter names another operator
UNLOCK_TYPE_OPERATOR = 6


class OperatorRejected(Exception):
    """A character record cannot become an operator."""


def take(mapping: MutableMapping[K, V], key: K) -> V | None:
    """Remove ``key`` from ``mapping`` and return its value, if any."""

    return mapping.pop(key, None)


def items_cost(costs: Iterable[RawItemCost]) -> ItemsCost:
    cost: ItemsCost = {}
    for entry in costs:
        cost[entry.item_id] = cost.get(entry.item_id, 0) + entry.count
    return cost


def promotion_attributes(key_frame: RawKeyFrame) -> PromotionAttributes:
    data = key_frame.data
    return PromotionAttributes(
        level=key_frame.level,
        max_hp=data.max_hp,
        atk=data.atk,
        defense=data.defense,
        magic_resistance=data.magic_resistance,
        deployment_cost=data.cost,
        block_count=data.block_count,
        move_speed=data.move_speed,
        attack_speed=data.attack_speed,
        base_attack_time=data.base_attack_time,
        redeploy_time=data.respawn_time,
        hp_recovery_per_sec=data.hp_recovery_per_sec,
        sp_recovery_per_sec=data.sp_recovery_per_sec,
        max_deploy_count=data.max_deploy_count,
        max_deck_stack_count=data.max_deck_stack_count,
        taunt_level=data.taunt_level,
        is_stun_immune=data.stun_immune,
        is_silence_immune=data.silence_immune,
        is_sleep_immune=data.sleep_immune,
        is_frozen_immune=data.frozen_immune,
    )


def parse_file_unlock(param: str, unlock_type: int) -> FileUnlock:
    """Decode a handbook ``unLockParam``.

    ``""`` is always unlocked, a bare number is a trust percent and
    ``"phase;level"`` a promotion requirement.  Any other text names an
    operator when the unlock type says so and is ignored otherwise.
    """

    if not param:
        return FileUnlock()
    if param.isdecimal():
        return FileUnlock(FileUnlockKind.TRUST, trust=int(param))

    phase, sep, level = param.partition(";")
    if sep and phase.isdecimal() and level.isdecimal() and int(phase) in PROMOTIONS:
        condition = PromotionAndLevel(Promotion(int(phase)), int(level))
        return FileUnlock(FileUnlockKind.PROMOTION_LEVEL, condition=condition)

    if unlock_type == UNLOCK_TYPE_OPERATOR:
        return FileUnlock(FileUnlockKind.OPERATOR_UNLOCKED, operator_id=param)
    return FileUnlock()


def group_skins(char_skins: MutableMapping[str, RawSkin]) -> dict[str, dict[str, RawSkin]]:
    """Move every skin out of ``char_skins`` into a per-operator grouping."""

    grouped: dict[str, dict[str, RawSkin]] = {}
    for skin_id, skin in char_skins.items():
        grouped.setdefault(skin.char_id, {})[skin_id] = skin
    char_skins.clear()
    return grouped


def operator_skin(skin_id: str, raw: RawSkin, engine: TemplateEngine) -> OperatorSkin | None:
    """Resolved outfit, or ``None`` when mandatory display data is missing."""

    display = raw.display_skin
    mandatory = (
        display.model_name,
        raw.illust_id,
        raw.avatar_id,
        raw.portrait_id,
        display.drawer_name,
        display.skin_group_name,
    )
    if any(value is None for value in mandatory):
        return None

    dialog = display.dialog if display.dialog is not None else display.content
    return OperatorSkin(
        id=skin_id,
        model_id=raw.char_id,
        model_name=display.model_name,
        is_paid=raw.is_buy_skin,
        illustration_id=raw.illust_id,
        avatar_id=raw.avatar_id,
        portrait_id=raw.portrait_id,
        illustrator=display.drawer_name,
        group=display.skin_group_name,
        name=display.skin_name,
        illustration_live_id=raw.dyn_illust_id,
        dialog=engine.strip_tags(dialog) if dialog is not None else None,
        usage=display.usage,
        description=display.description,
        obtain=display.obtain_approach,
    )


class OperatorResolver:
    """Turns character records into operators, draining the side tables."""

    def __init__(
        self,
        tables: RawTableSet,
        rules: AssemblyRules = DEFAULT_RULES,
        engine: TemplateEngine | None = None,
    ) -> None:
        self.tables = tables
        self.rules = rules
        self.engine = engine or TemplateEngine(rules.strictness)
        self.skins_by_operator = group_skins(tables.skins.char_skins)

    def resolve(self, operator_id: str, raw: RawCharacter) -> Operator | None:
        """Resolve one character, or ``None`` if it is filtered out."""

        try:
            return self._build(operator_id, raw)
        except OperatorRejected as exc:
            logger.debug("dropping %s: %s", operator_id, exc)
            return None

    def resolve_all(self, characters: MutableMapping[str, RawCharacter]) -> dict[str, Operator]:
        """Resolve and consume every character record."""

        operators: dict[str, Operator] = {}
        for operator_id in list(characters):
            operator = self.resolve(operator_id, characters.pop(operator_id))
            if operator is not None:
                operators[operator_id] = operator
        return operators

    # --- Tags -------------------------------------------------------------------

    def _tag(
        self, table: Mapping[Hashable, T | None], value: Hashable, field: str, operator_id: str
    ) -> T:
        mapped = lookup_tag(
            table, value, field, strictness=self.rules.strictness, record_id=operator_id
        )
        if mapped is None:
            raise OperatorRejected(f"{field} {value!r} is not playable")
        return mapped

    def _condition(self, raw: RawCondition, operator_id: str) -> PromotionAndLevel:
        return PromotionAndLevel(self._tag(PROMOTIONS, raw.phase, "phase", operator_id), raw.level)

    # --- Operator ---------------------------------------------------------------

    def _build(self, operator_id: str, raw: RawCharacter) -> Operator:
        if raw.is_not_obtainable:
            raise OperatorRejected("not obtainable")
        if raw.display_number is None:
            raise OperatorRejected("no display number")

        profession = self._tag(PROFESSIONS, raw.profession, "profession", operator_id)
        sub_profession = self._tag(
            SUB_PROFESSIONS, raw.sub_profession_id, "sub-profession", operator_id
        )
        position = self._tag(POSITIONS, raw.position, "position", operator_id)

        tiers = self._promotions(raw.phases, operator_id)
        potential = [
            OperatorPotential(rank.potential_type, self.engine.strip_tags(rank.description))
            for rank in raw.potential_ranks
        ]
        skills = [self._skill(skill, operator_id) for skill in raw.skills]
        talents = [
            talent
            for talent in (self._talent(entry, operator_id) for entry in raw.talents)
            if talent is not None
        ]
        modules = self._take_modules(operator_id)
        base_skills = self._take_base_skills(operator_id)
        file = self._take_file(operator_id)
        trust_bonus = self._trust_bonus(raw.favor_key_frames)
        skins, default_skins = self._take_skins(operator_id)

        tiers = [
            replace(tier, skin_id=default_skins.get(str(index))) for index, tier in enumerate(tiers)
        ]
        promotions = OperatorPromotions(*tiers)

        return Operator(
            id=operator_id,
            name=raw.name,
            display_number=raw.display_number,
            position=position,
            rarity=raw.rarity + 1,
            profession=profession,
            sub_profession=sub_profession,
            promotions=promotions,
            recruitment_tags=list(raw.tag_list),
            nation_id=raw.nation_id,
            group_id=raw.group_id,
            team_id=raw.team_id,
            appellation=raw.appellation,
            potential_item_id=raw.potential_item_id,
            potential=potential,
            skills=skills,
            talents=talents,
            modules=modules,
            skins=skins,
            base_skills=base_skills,
            trust_bonus=trust_bonus,
            file=file,
        )

    def _promotions(self, phases: list[RawPhase], operator_id: str) -> list[OperatorPromotion]:
        if not phases:
            raise OperatorRejected("no promotion tiers")
        if len(phases) > len(Promotion):
            logger.debug("%s: ignoring %d extra tiers", operator_id, len(phases) - len(Promotion))

        tiers: list[OperatorPromotion] = []
        for phase in phases[: len(Promotion)]:
            if len(phase.attributes_key_frames) != 2:
                raise OperatorRejected(
                    f"tier {len(tiers)} has {len(phase.attributes_key_frames)} keyframes"
                )
            min_frame, max_frame = phase.attributes_key_frames
            tiers.append(
                OperatorPromotion(
                    min_attributes=promotion_attributes(min_frame),
                    max_attributes=promotion_attributes(max_frame),
                    max_level=phase.max_level,
                    upgrade_cost=items_cost(phase.evolve_cost),
                    attack_range_id=phase.range_id,
                )
            )
        return tiers

    # --- Skills -----------------------------------------------------------------

    def _skill(self, raw: RawCharacterSkill, operator_id: str) -> OperatorSkill:
        if raw.skill_id is None:
            raise OperatorRejected("skill slot without id")
        entry: RawSkill | None = self.tables.skills.get(raw.skill_id)
        if entry is None:
            raise OperatorRejected(f"skill {raw.skill_id} not in skill table")

        level_count = self.rules.skills.level_count
        mastery_count = self.rules.skills.mastery_count
        if len(entry.levels) not in (level_count, level_count + mastery_count):
            raise OperatorRejected(f"skill {raw.skill_id} has {len(entry.levels)} levels")

        shapes = {
            (
                level.name,
                self._tag(SKILL_ACTIVATIONS, level.skill_type, "skill type", operator_id),
                self._tag(SKILL_RECOVERIES, level.sp_data.sp_type, "sp type", operator_id),
            )
            for level in entry.levels
        }
        if len(shapes) != 1:
            raise OperatorRejected(f"skill {raw.skill_id} changes name or charge type")
        ((name, activation, recovery),) = shapes

        levels = tuple(self._skill_level(level) for level in entry.levels[:level_count])

        mastery: tuple[SkillMastery, ...] | None = None
        extra_levels = entry.levels[level_count:]
        if len(extra_levels) == mastery_count and len(raw.level_up_cost_cond) == mastery_count:
            mastery = tuple(
                SkillMastery(
                    condition=self._condition(cond.unlock_cond, operator_id),
                    upgrade_time=cond.level_up_time,
                    level=self._skill_level(level),
                    upgrade_cost=items_cost(cond.level_up_cost),
                )
                for cond, level in zip(raw.level_up_cost_cond, extra_levels)
            )

        return OperatorSkill(
            id=raw.skill_id,
            name=name,
            condition=self._condition(raw.unlock_cond, operator_id),
            activation=activation,
            recovery=recovery,
            levels=levels,
            mastery=mastery,
            prefab_key=raw.override_prefab_key,
        )

    def _skill_level(self, raw: RawSkillLevel) -> SkillLevel:
        description = None
        if raw.description is not None and raw.description != "-":
            blackboard = build_blackboard(
                ((entry.key, entry.value) for entry in raw.blackboard), raw.duration
            )
            description = self.engine.render(raw.description, blackboard)

        return SkillLevel(
            duration=raw.duration,
            max_charge_time=raw.sp_data.max_charge_time,
            sp_cost=raw.sp_data.sp_cost,
            initial_sp=raw.sp_data.init_sp,
            increment=raw.sp_data.increment,
            description=description,
            attack_range_id=raw.range_id,
            prefab_key=raw.prefab_id,
        )

    def _talent(self, raw: RawTalent, operator_id: str) -> OperatorTalent | None:
        if not raw.candidates:
            return None

        phases: list[TalentPhase] = []
        for candidate in raw.candidates:
            if candidate.name is None or candidate.description is None:
                raise OperatorRejected("talent phase without name or description")
            phases.append(
                TalentPhase(
                    name=candidate.name,
                    description=self.engine.strip_tags(candidate.description),
                    condition=self._condition(candidate.unlock_condition, operator_id),
                    required_potential=candidate.required_potential_rank,
                    prefab_key=candidate.prefab_key,
                    attack_range_id=candidate.range_id,
                    effects={entry.key: entry.value for entry in candidate.blackboard},
                )
            )
        return OperatorTalent(phases)

    # --- Side tables ------------------------------------------------------------

    def _take_modules(self, operator_id: str) -> list[OperatorModule]:
        """Non-default modules; any unresolved reference empties the list."""

        equip = self.tables.equip
        equip_ids = take(equip.char_equip, operator_id)
        if not equip_ids:
            return []

        modules: list[OperatorModule] = []
        # slot 0 is the default module every operator has
        for equip_id in equip_ids[1:]:
            raw = take(equip.equip_dict, equip_id)
            if raw is None:
                logger.debug("%s: module %s not in equip table", operator_id, equip_id)
                return []

            missions: dict[str, ModuleMission] = {}
            for mission_id in raw.mission_list:
                mission = take(equip.mission_list, mission_id)
                if mission is None:
                    logger.debug("%s: module mission %s not found", operator_id, mission_id)
                    return []
                missions[mission_id] = ModuleMission(mission.description, mission.sort)

            promotion = lookup_tag(
                PROMOTIONS,
                raw.unlock_evolve_phase,
                "phase",
                strictness=self.rules.strictness,
                record_id=raw.id,
            )
            if promotion is None:
                return []

            modules.append(
                OperatorModule(
                    id=raw.id,
                    name=raw.name,
                    description=raw.description,
                    condition=PromotionAndLevel(promotion, raw.unlock_level),
                    required_trust=trust_points_to_percent(raw.unlock_favor_point),
                    upgrade_cost=items_cost(raw.item_cost),
                    missions=missions,
                )
            )
        return modules

    def _take_base_skills(self, operator_id: str) -> list[OperatorBaseSkill]:
        building = self.tables.building
        char = take(building.chars, operator_id)
        if char is None:
            return []

        base_skills: list[OperatorBaseSkill] = []
        for buff in char.buff_char:
            if not buff.buff_data:
                continue
            phases = [self._base_skill_phase(phase, operator_id) for phase in buff.buff_data]
            if all(phase is not None for phase in phases):
                base_skills.append(OperatorBaseSkill(phases))
        return base_skills

    def _base_skill_phase(self, raw: RawCharBuffPhase, operator_id: str) -> BaseSkillPhase | None:
        definition = self.tables.building.buffs.get(raw.buff_id)
        if definition is None:
            logger.debug("%s: base skill %s has no definition", operator_id, raw.buff_id)
            return None

        strictness = self.rules.strictness
        category = lookup_tag(
            BUFF_CATEGORIES,
            definition.buff_category,
            "buff category",
            strictness=strictness,
            record_id=raw.buff_id,
        )
        building_type = lookup_tag(
            ROOM_TYPES, definition.room_type, "room", strictness=strictness, record_id=raw.buff_id
        )
        promotion = lookup_tag(
            PROMOTIONS, raw.cond.phase, "phase", strictness=strictness, record_id=raw.buff_id
        )
        if category is None or building_type is None or promotion is None:
            return None

        return BaseSkillPhase(
            name=definition.buff_name,
            condition=PromotionAndLevel(promotion, raw.cond.level),
            sort=definition.sort_id,
            category=category,
            building_type=building_type,
        )

    def _take_file(self, operator_id: str) -> OperatorFile | None:
        entry = take(self.tables.handbook.handbook_dict, operator_id)
        if entry is None:
            if self.rules.require_handbook_entry:
                raise OperatorRejected("no handbook entry")
            return None

        entries = []
        for story_entry in entry.story_text_audio:
            story: RawStory = story_entry.stories[0]
            entries.append(
                FileEntry(
                    title=story_entry.story_title,
                    text=story.story_text,
                    unlock=parse_file_unlock(story.unlock_param, story.unlock_type),
                )
            )
        return OperatorFile(entry.char_id, entry.draw_name, entries)

    def _trust_bonus(self, key_frames: list[RawKeyFrame] | None) -> TrustAttributes:
        if key_frames is None or len(key_frames) != 2:
            return TrustAttributes()
        data = key_frames[-1].data
        return TrustAttributes(max_hp=data.max_hp, atk=data.atk, defense=data.defense)

    def _take_skins(self, operator_id: str) -> tuple[dict[str, OperatorSkin], dict[str, str]]:
        raw_skins = take(self.skins_by_operator, operator_id) or {}
        default_skins = take(self.tables.skins.buildin_evolve_map, operator_id) or {}

        skins: dict[str, OperatorSkin] = {}
        for skin_id, raw in raw_skins.items():
            skin = operator_skin(skin_id, raw, self.engine)
            if skin is None:
                logger.debug("%s: skipping incomplete skin %s", operator_id, skin_id)
                continue
            skins[skin_id] = skin
        return skins, default_skins
