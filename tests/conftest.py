"""Pytest configuration and raw-table fixtures.

This adds the `src/` directory to `sys.path` so tests can import the
`akdata` package without requiring an editable install in CI, and provides a
small but complete set of exported tables (camelCase JSON shapes) built
around a single playable operator.
"""

import copy
import sys
from pathlib import Path
from typing import Any

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pydantic import TypeAdapter  # noqa: E402

from akdata.schemas import TABLE_FILES, RawTableSet  # noqa: E402

OPERATOR_ID = "char_208_melan"
SKILL_ID = "skchr_melan_1"


def key_frame(level: int, max_hp: int, atk: int, defense: int, **extra: Any) -> dict[str, Any]:
    data = {
        "maxHp": max_hp,
        "atk": atk,
        "def": defense,
        "magicResistance": 0.0,
        "cost": 10,
        "blockCnt": 1,
        "moveSpeed": 1.0,
        "attackSpeed": 100.0,
        "baseAttackTime": 1.25,
        "respawnTime": 70,
        "hpRecoveryPerSec": 0.0,
        "spRecoveryPerSec": 1.0,
        "maxDeployCount": 1,
        "maxDeckStackCnt": 0,
        "tauntLevel": 0,
        "stunImmune": False,
        "silenceImmune": False,
        "sleepImmune": False,
        "frozenImmune": False,
    }
    data.update(extra)
    return {"level": level, "data": data}


def condition(phase: int = 0, level: int = 1) -> dict[str, int]:
    return {"phase": phase, "level": level}


def skill_level(
    atk: float,
    *,
    name: str = "ATK Up",
    skill_type: int = 1,
    sp_type: int = 1,
    description: str | None = "ATK <@ba.vup>+{atk:0%}</> for {duration} seconds",
) -> dict[str, Any]:
    return {
        "name": name,
        "rangeId": None,
        "description": description,
        "skillType": skill_type,
        "spData": {
            "spType": sp_type,
            "maxChargeTime": 1,
            "spCost": 40,
            "initSp": 10,
            "increment": 1.0,
        },
        "prefabId": SKILL_ID,
        "duration": 30.0,
        "blackboard": [{"key": "atk", "value": atk}],
    }


def skill_payload(level_count: int = 10) -> dict[str, Any]:
    return {
        "skillId": SKILL_ID,
        "levels": [skill_level(0.3 + 0.05 * index) for index in range(level_count)],
    }


def character_payload() -> dict[str, Any]:
    return {
        "name": "Melantha",
        "potentialItemId": "p_char_208_melan",
        "nationId": "victoria",
        "groupId": None,
        "teamId": None,
        "displayNumber": "R001",
        "appellation": " ",
        "position": "MELEE",
        "tagList": ["DPS", "Survival"],
        "isNotObtainable": False,
        "rarity": 2,
        "profession": "WARRIOR",
        "subProfessionId": "sword",
        "phases": [
            {
                "rangeId": "1-1",
                "maxLevel": 40,
                "attributesKeyFrames": [
                    key_frame(1, 1395, 396, 83),
                    key_frame(40, 1993, 583, 119),
                ],
                "evolveCost": None,
            },
            {
                "rangeId": "1-1",
                "maxLevel": 55,
                "attributesKeyFrames": [
                    key_frame(1, 1993, 583, 119),
                    key_frame(55, 2745, 738, 155),
                ],
                "evolveCost": [{"id": "4001", "count": 10000, "type": "GOLD"}],
            },
        ],
        "skills": [
            {
                "skillId": SKILL_ID,
                "overridePrefabKey": None,
                "levelUpCostCond": [
                    {
                        "unlockCond": condition(2, 1),
                        "lvlUpTime": 28800 * (index + 1),
                        "levelUpCost": [{"id": "3303", "count": index + 1, "type": "MATERIAL"}],
                    }
                    for index in range(3)
                ],
                "unlockCond": condition(0, 1),
            }
        ],
        "talents": [
            {
                "candidates": [
                    {
                        "unlockCondition": condition(1, 1),
                        "requiredPotentialRank": 0,
                        "prefabKey": "1",
                        "name": "Intimidate",
                        "description": "ATK <@ba.kw>+8%</>",
                        "rangeId": None,
                        "blackboard": [{"key": "atk", "value": 0.08}],
                    },
                    {
                        "unlockCondition": condition(1, 1),
                        "requiredPotentialRank": 4,
                        "prefabKey": "1",
                        "name": "Intimidate",
                        "description": "ATK <@ba.kw>+10%</>",
                        "rangeId": None,
                        "blackboard": None,
                    },
                ]
            }
        ],
        "potentialRanks": [
            {"type": 0, "description": "Deployment Cost -1"},
            {"type": 1, "description": "Improves <@ba.talpu>First Talent</>"},
        ],
        "favorKeyFrames": [
            key_frame(0, 0, 0, 0),
            key_frame(50, 200, 60, 0),
        ],
    }


def token_payload() -> dict[str, Any]:
    payload = character_payload()
    payload.update(
        name="Healing Drone",
        displayNumber=None,
        profession="TOKEN",
        subProfessionId="notchar1",
        skills=[],
        talents=None,
    )
    return payload


def unobtainable_payload() -> dict[str, Any]:
    payload = character_payload()
    payload.update(name="Reserve Operator", isNotObtainable=True, displayNumber="RS01")
    return payload


def skin_payload(skin_id: str, **overrides: Any) -> dict[str, Any]:
    display = {
        "skinName": None,
        "modelName": "Melantha",
        "drawerName": "Artist",
        "skinGroupName": "Default Outfit",
        "content": "<@a.cont>Reporting in.</>",
        "dialog": None,
        "usage": None,
        "description": None,
        "obtainApproach": None,
    }
    payload = {
        "skinId": skin_id,
        "charId": OPERATOR_ID,
        "illustId": f"illust_{skin_id}",
        "dynIllustId": None,
        "avatarId": skin_id,
        "portraitId": f"{skin_id}_portrait",
        "isBuySkin": False,
        "displaySkin": display,
    }
    display.update(overrides.pop("display", {}))
    payload.update(overrides)
    return payload


def tables_payload() -> dict[str, Any]:
    """Raw JSON payload of every table, keyed by ``RawTableSet`` field."""

    return {
        "characters": {
            OPERATOR_ID: character_payload(),
            "token_10000_silent_healrb": token_payload(),
            "char_512_aprot": unobtainable_payload(),
        },
        "skills": {SKILL_ID: skill_payload()},
        "building": {
            "rooms": {
                "MANUFACTURE": {
                    "id": "MANUFACTURE",
                    "name": "Factory",
                    "description": "Produces items",
                    "maxCount": -1,
                    "category": "PRODUCTION",
                    "size": {"row": 1, "col": 2},
                    "phases": [
                        {
                            "unlockCondId": "manufacture_1",
                            "buildCost": {
                                "items": [{"id": "3131", "count": 4, "type": "MATERIAL"}],
                                "labor": 10,
                            },
                            "electricity": -10,
                            "maxStationedNum": 1,
                            "manpowerCost": 0,
                        }
                    ],
                },
                "CONTROL": {
                    "id": "CONTROL",
                    "name": "Control Center",
                    "description": None,
                    "maxCount": 1,
                    "category": "CONTROL",
                    "size": {"row": 2, "col": 3},
                    "phases": [],
                },
            },
            "chars": {
                OPERATOR_ID: {
                    "charId": OPERATOR_ID,
                    "buffChar": [
                        {
                            "buffData": [
                                {"buffId": "manu_prod_spd[000]", "cond": condition(0, 1)},
                                {"buffId": "manu_prod_spd[010]", "cond": condition(1, 1)},
                            ]
                        },
                        {"buffData": []},
                        {"buffData": [{"buffId": "missing_buff", "cond": condition(0, 1)}]},
                    ],
                }
            },
            "buffs": {
                "manu_prod_spd[000]": {
                    "buffId": "manu_prod_spd[000]",
                    "buffName": "Standardization α",
                    "sortId": 1,
                    "buffCategory": "FUNCTION",
                    "roomType": "MANUFACTURE",
                },
                "manu_prod_spd[010]": {
                    "buffId": "manu_prod_spd[010]",
                    "buffName": "Standardization β",
                    "sortId": 2,
                    "buffCategory": "FUNCTION",
                    "roomType": "MANUFACTURE",
                },
            },
        },
        "equip": {
            "equipDict": {
                "uniequip_001_melan": {
                    "uniEquipId": "uniequip_001_melan",
                    "uniEquipName": "Melantha's Standard Module",
                    "uniEquipDesc": "",
                    "unlockEvolvePhase": 0,
                    "unlockLevel": 1,
                    "unlockFavorPoint": 0,
                    "missionList": [],
                    "itemCost": None,
                },
                "uniequip_002_melan": {
                    "uniEquipId": "uniequip_002_melan",
                    "uniEquipName": "Sword of Victoria",
                    "uniEquipDesc": "A well-kept blade.",
                    "unlockEvolvePhase": 1,
                    "unlockLevel": 40,
                    "unlockFavorPoint": 5420,
                    "missionList": ["uniequip_002_melan_1", "uniequip_002_melan_2"],
                    "itemCost": [{"id": "mod_unlock_token", "count": 5, "type": "MATERIAL"}],
                },
            },
            "missionList": {
                "uniequip_002_melan_1": {"desc": "Deploy 20 times", "uniEquipMissionSort": 1},
                "uniequip_002_melan_2": {"desc": "Clear 1-7", "uniEquipMissionSort": 2},
            },
            "charEquip": {OPERATOR_ID: ["uniequip_001_melan", "uniequip_002_melan"]},
        },
        "handbook": {
            "handbookDict": {
                OPERATOR_ID: {
                    "charID": OPERATOR_ID,
                    "drawName": "Artist",
                    "storyTextAudio": [
                        {
                            "stories": [
                                {
                                    "storyText": "[Gender] Female\n[Combat Experience] Two years",
                                    "unLockType": 0,
                                    "unLockParam": "",
                                }
                            ],
                            "storyTitle": "Basic Info",
                        },
                        {
                            "stories": [
                                {"storyText": "Profile text", "unLockType": 2, "unLockParam": "20"}
                            ],
                            "storyTitle": "Profile",
                        },
                        {
                            "stories": [
                                {"storyText": "Archive text", "unLockType": 1, "unLockParam": "1;1"}
                            ],
                            "storyTitle": "Archive File 1",
                        },
                        {
                            "stories": [
                                {
                                    "storyText": "Record text",
                                    "unLockType": 6,
                                    "unLockParam": "char_148_nearl",
                                }
                            ],
                            "storyTitle": "Promotion Record",
                        },
                    ],
                }
            }
        },
        "skins": {
            "charSkins": {
                f"{OPERATOR_ID}#1": skin_payload(f"{OPERATOR_ID}#1"),
                f"{OPERATOR_ID}@summer#1": skin_payload(
                    f"{OPERATOR_ID}@summer#1",
                    isBuySkin=True,
                    display={
                        "skinName": "Summer Blade",
                        "skinGroupName": "Summer",
                        "dialog": "<@a.d>Sun's out.</>",
                        "obtainApproach": "Outfit Store",
                    },
                ),
                f"{OPERATOR_ID}#2": skin_payload(f"{OPERATOR_ID}#2", illustId=None),
            },
            "buildinEvolveMap": {
                OPERATOR_ID: {"0": f"{OPERATOR_ID}#1", "1": f"{OPERATOR_ID}#1"},
            },
        },
        "items": {
            "items": {
                "p_char_208_melan": {
                    "itemId": "p_char_208_melan",
                    "name": "Melantha's Token",
                    "description": "Improves Melantha's potential.",
                    "rarity": 2,
                    "usage": "Used to improve potential.",
                    "obtainApproach": None,
                    "classifyType": "NONE",
                    "itemType": "MATERIAL",
                },
                "3303": {
                    "itemId": "3303",
                    "name": "Skill Summary - 3",
                    "description": None,
                    "rarity": 3,
                    "usage": "Used to upgrade skills.",
                    "obtainApproach": "Tactical Drill",
                    "classifyType": "MATERIAL",
                    "itemType": "CARD_EXP",
                },
            }
        },
        "ranges": {
            "1-1": {"id": "1-1", "direction": 1, "grids": [{"row": 0, "col": 0}]},
            "x-1": {
                "id": "x-1",
                "direction": 1,
                "grids": [{"row": 0, "col": 0}, {"row": 0, "col": 1}, {"row": -1, "col": 1}],
            },
        },
        "gacha": {
            "gachaTags": [
                {"tagId": 1, "tagName": "Guard", "tagGroup": 0},
                {"tagId": 20, "tagName": "DPS", "tagGroup": 1},
                {"tagId": 21, "tagName": "Survival", "tagGroup": 1},
            ],
            "gachaPoolClient": [
                {
                    "gachaPoolId": "LINKAGE_1",
                    "gachaIndex": 2,
                    "openTime": 1_700_000_000,
                    "endTime": 1_701_000_000,
                    "gachaPoolName": "Collab Headhunting",
                    "gachaPoolSummary": "Until Nov 26",
                    "LMTGSID": "",
                    "gachaRuleType": "LINKAGE",
                },
                {
                    "gachaPoolId": "NORM_1",
                    "gachaIndex": 1,
                    "openTime": 1_600_000_000,
                    "endTime": 1_601_000_000,
                    "gachaPoolName": "Standard Headhunting",
                    "gachaPoolSummary": "Until Sep 25",
                    "LMTGSID": None,
                    "gachaRuleType": "NORMAL",
                },
            ],
        },
        "activity": {
            "basicInfo": {
                "act2side": {
                    "id": "act2side",
                    "displayType": "SIDESTORY",
                    "name": "Grani and the Knights' Treasure",
                    "startTime": 1_650_000_000,
                    "endTime": 1_651_000_000,
                    "rewardEndTime": 1_651_500_000,
                    "isReplicate": False,
                },
                "act1mini": {
                    "id": "act1mini",
                    "displayType": "MINISTORY",
                    "name": "A Walk in the Dust",
                    "startTime": 1_640_000_000,
                    "endTime": 1_641_000_000,
                    "rewardEndTime": 1_641_500_000,
                    "isReplicate": True,
                },
                "login_only": {
                    "id": "login_only",
                    "displayType": None,
                    "name": "Login Rewards",
                    "startTime": 1_630_000_000,
                    "endTime": 1_631_000_000,
                    "rewardEndTime": 1_631_000_000,
                    "isReplicate": False,
                },
            }
        },
        "meta": {
            "spCharGroups": {
                "char_002_amiya": ["char_002_amiya", "char_1001_amiya2", "char_1037_amiya3"],
                "char_208_melan": [OPERATOR_ID, "char_1208_melan2"],
            }
        },
    }


def build_tables(payload: dict[str, Any]) -> RawTableSet:
    decoded = {
        table: TypeAdapter(table_type).validate_python(payload[table])
        for table, (_, table_type) in TABLE_FILES.items()
    }
    return RawTableSet(**decoded)


@pytest.fixture
def payload() -> dict[str, Any]:
    return copy.deepcopy(tables_payload())


@pytest.fixture
def raw_tables(payload) -> RawTableSet:
    return build_tables(payload)


@pytest.fixture
def make_tables():
    """Build a ``RawTableSet`` from an edited payload."""

    return build_tables
