"""Assembly of a complete :class:`GameData` from a raw table set."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from datetime import datetime
from typing import TypeVar

from akdata.schemas import RawTableSet

from .enums import BuildingType
from .models import (
    AttackRange,
    Building,
    BuildingUpgrade,
    Event,
    GameData,
    HeadhuntingBanner,
    Item,
    Operator,
)
from .operators import OperatorResolver, items_cost
from .rules_config import DEFAULT_RULES, AssemblyRules
from .tags import BANNER_TYPES, EVENT_TYPES, ITEM_CLASSES, ROOM_TYPES, lookup_tag
from .templates import TemplateEngine

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GameDataAssembler:
    """Single-use owner of a :class:`RawTableSet`.

    ``assemble`` drains the side tables while resolving operators, so an
    assembler refuses to run twice.
    """

    def __init__(self, tables: RawTableSet, rules: AssemblyRules = DEFAULT_RULES) -> None:
        self.tables = tables
        self.rules = rules
        self.engine = TemplateEngine(rules.strictness)
        self._assembled = False

    def assemble(self, last_updated: datetime | None = None) -> GameData:
        if self._assembled:
            raise RuntimeError("raw tables have already been assembled")
        self._assembled = True

        character_count = len(self.tables.characters)
        operators = self._operators()
        game_data = GameData(
            operators=operators,
            items=self._items(),
            buildings=self._buildings(),
            ranges=self._ranges(),
            recruitment_tags=self._recruitment_tags(),
            headhunting_banners=self._banners(),
            events=self._events(),
            alters=self._alters(),
            last_updated=last_updated,
        )
        logger.info(
            "Assembled %d operators (%d characters filtered), %d items, %d banners, %d events",
            len(operators),
            character_count - len(operators),
            len(game_data.items),
            len(game_data.headhunting_banners),
            len(game_data.events),
        )
        return game_data

    def _tag(
        self, table: Mapping[Hashable, T | None], value: Hashable, field: str, record_id: str
    ) -> T | None:
        return lookup_tag(
            table, value, field, strictness=self.rules.strictness, record_id=record_id
        )

    def _operators(self) -> dict[str, Operator]:
        resolver = OperatorResolver(self.tables, self.rules, self.engine)
        return resolver.resolve_all(self.tables.characters)

    def _items(self) -> dict[str, Item]:
        items: dict[str, Item] = {}
        for item_id, raw in self.tables.items.items.items():
            item_class = self._tag(ITEM_CLASSES, raw.classify_type, "item class", item_id)
            if item_class is None:
                continue
            items[item_id] = Item(
                id=raw.item_id,
                name=raw.name,
                rarity=raw.rarity,
                item_class=item_class,
                item_type=raw.item_type,
                description=raw.description,
                usage=raw.usage,
                obtain=raw.obtain_approach,
            )
        return items

    def _buildings(self) -> dict[BuildingType, Building]:
        buildings: dict[BuildingType, Building] = {}
        for room_id, raw in self.tables.building.rooms.items():
            building_type = self._tag(ROOM_TYPES, raw.id, "room", room_id)
            if building_type is None:
                continue
            upgrades = [
                BuildingUpgrade(
                    unlock_condition=phase.unlock_cond_id,
                    construction_cost=items_cost(phase.build_cost.items),
                    construction_drones=phase.build_cost.labor,
                    power=phase.electricity,
                    operator_capacity=phase.max_stationed_num,
                    manpower_cost=phase.manpower_cost,
                )
                for phase in raw.phases
            ]
            buildings[building_type] = Building(
                building_type=building_type,
                name=raw.name,
                category=raw.category,
                # rows are y and columns x
                size=(raw.size.col, raw.size.row),
                upgrades=upgrades,
                description=raw.description,
                max_count=raw.max_count if raw.max_count >= 0 else None,
            )
        return buildings

    def _ranges(self) -> dict[str, AttackRange]:
        return {
            range_id: AttackRange(frozenset((point.col, point.row) for point in raw.grids))
            for range_id, raw in self.tables.ranges.items()
        }

    def _recruitment_tags(self) -> dict[str, int]:
        return {tag.tag_name: tag.tag_id for tag in self.tables.gacha.gacha_tags}

    def _banners(self) -> list[HeadhuntingBanner]:
        banners: list[HeadhuntingBanner] = []
        for raw in self.tables.gacha.gacha_pool_client:
            banner_type = self._tag(
                BANNER_TYPES, raw.gacha_rule_type, "gacha rule", raw.gacha_pool_id
            )
            if banner_type is None:
                continue
            banners.append(
                HeadhuntingBanner(
                    id=raw.gacha_pool_id,
                    name=raw.gacha_pool_name,
                    summary=raw.gacha_pool_summary,
                    index=raw.gacha_index,
                    open_time=raw.open_time,
                    close_time=raw.end_time,
                    banner_type=banner_type,
                    item_id=raw.contract_item_id,
                )
            )
        banners.sort(key=lambda banner: banner.open_time)
        return banners

    def _events(self) -> list[Event]:
        events: list[Event] = []
        for event_id, raw in self.tables.activity.basic_info.items():
            # activities without a display type are not story events
            if raw.display_type is None:
                continue
            event_type = self._tag(EVENT_TYPES, raw.display_type, "event type", event_id)
            if event_type is None:
                continue
            events.append(
                Event(
                    id=raw.id,
                    name=raw.name,
                    event_type=event_type,
                    open_time=raw.start_time,
                    close_time=raw.end_time,
                    close_time_rewards=raw.reward_end_time,
                    is_rerun=raw.is_replicate,
                )
            )
        events.sort(key=lambda event: event.open_time)
        return events

    def _alters(self) -> list[frozenset[str]]:
        alters: list[frozenset[str]] = []
        for operator_ids in self.tables.meta.sp_char_groups.values():
            pair = frozenset(operator_ids)
            if len(operator_ids) == 2 and len(pair) == 2:
                alters.append(pair)
        return alters


def assemble_game_data(
    tables: RawTableSet,
    rules: AssemblyRules = DEFAULT_RULES,
    *,
    last_updated: datetime | None = None,
) -> GameData:
    """Assemble ``tables`` into :class:`GameData`; the tables are consumed."""

    return GameDataAssembler(tables, rules).assemble(last_updated)
