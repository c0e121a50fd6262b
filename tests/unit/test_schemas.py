from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from akdata.schemas import (
    RawCharacter,
    RawGachaPool,
    RawHandbookEntry,
    RawItemCost,
    RawKeyFrame,
    RawSkillLevel,
    RawTalent,
)


@pytest.fixture
def sample_character(payload) -> dict[str, Any]:
    return payload["characters"]["char_208_melan"]


def test_character_aliases(sample_character):
    character = RawCharacter.model_validate(sample_character)
    assert character.display_number == "R001"
    assert character.sub_profession_id == "sword"
    assert character.tag_list == ["DPS", "Survival"]
    assert character.phases[1].evolve_cost[0].item_id == "4001"


def test_blank_appellation_becomes_none(sample_character):
    assert RawCharacter.model_validate(sample_character).appellation is None

    sample_character["appellation"] = "Melantha"
    assert RawCharacter.model_validate(sample_character).appellation == "Melantha"


def test_null_lists_become_empty(sample_character):
    sample_character.update(tagList=None, talents=None, skills=None, potentialRanks=None)
    character = RawCharacter.model_validate(sample_character)
    assert character.tag_list == []
    assert character.talents == []
    assert character.skills == []
    assert character.potential_ranks == []
    assert character.phases[0].evolve_cost == []


def test_unknown_fields_are_ignored(sample_character):
    sample_character["trait"] = {"candidates": []}
    assert RawCharacter.model_validate(sample_character).name == "Melantha"


def test_missing_required_field_fails(sample_character):
    del sample_character["profession"]
    with pytest.raises(ValidationError):
        RawCharacter.model_validate(sample_character)


def test_keyframe_def_alias():
    frame = RawKeyFrame.model_validate({"level": 1, "data": {"maxHp": 10, "atk": 2, "def": 3}})
    assert frame.data.defense == 3
    assert frame.data.block_count == 0


def test_models_accept_field_names():
    cost = RawItemCost(item_id="3303", count=2)
    assert cost.model_dump(by_alias=True) == {"id": "3303", "count": 2}


def test_talent_null_blackboard():
    talent = RawTalent.model_validate(
        {
            "candidates": [
                {
                    "unlockCondition": {"phase": 0, "level": 1},
                    "name": "Talent",
                    "description": "text",
                    "blackboard": None,
                }
            ]
        }
    )
    assert talent.candidates[0].blackboard == []
    assert talent.candidates[0].prefab_key == ""


def test_skill_level_blackboard_defaults():
    level = RawSkillLevel.model_validate(
        {"name": "Skill", "skillType": 1, "spData": {"spType": 1}, "blackboard": None}
    )
    assert level.blackboard == []
    assert level.duration == 0.0
    assert level.sp_data.sp_cost == 0


@pytest.mark.parametrize("contract", ["", "   ", None])
def test_gacha_pool_blank_contract(contract):
    pool = RawGachaPool.model_validate(
        {
            "gachaPoolId": "NORM_1",
            "openTime": 1_600_000_000,
            "endTime": 1_601_000_000,
            "gachaPoolName": "Standard",
            "LMTGSID": contract,
        }
    )
    assert pool.contract_item_id is None
    assert pool.open_time == datetime.fromtimestamp(1_600_000_000, UTC)


def test_handbook_story_entry_needs_a_story(payload):
    entry = payload["handbook"]["handbookDict"]["char_208_melan"]
    assert len(RawHandbookEntry.model_validate(entry).story_text_audio) == 4

    entry["storyTextAudio"][0]["stories"] = []
    with pytest.raises(ValidationError):
        RawHandbookEntry.model_validate(entry)
