"""Assembly of exported Arknights game data tables into one domain model."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from akdata.config import Settings, get_settings
from akdata.domain.assembly import GameDataAssembler, assemble_game_data
from akdata.domain.errors import (
    DataLoadError,
    SchemaDriftError,
    UnknownTagError,
    UnresolvedTemplateKeyError,
)
from akdata.domain.models import GameData
from akdata.domain.rules_config import DEFAULT_RULES, STRICT_RULES, AssemblyRules
from akdata.loader import DEFAULT_WORKERS, load_tables

__version__ = "0.1.0"


def load_game_data(
    gamedata_dir: Path | str,
    rules: AssemblyRules | None = None,
    *,
    last_updated: datetime | None = None,
    max_workers: int = DEFAULT_WORKERS,
) -> GameData:
    """Load the tables under ``gamedata_dir`` and assemble them."""

    tables = load_tables(gamedata_dir, max_workers=max_workers)
    return assemble_game_data(tables, rules or DEFAULT_RULES, last_updated=last_updated)


def load_configured_game_data(
    settings: Settings | None = None, *, last_updated: datetime | None = None
) -> GameData:
    """Load and assemble ``settings.data_dir`` using every configured option."""

    settings = settings or get_settings()
    return load_game_data(
        settings.data_dir,
        settings.to_rules(),
        last_updated=last_updated,
        max_workers=settings.loader_workers,
    )


__all__ = [
    "DEFAULT_RULES",
    "STRICT_RULES",
    "AssemblyRules",
    "DataLoadError",
    "GameData",
    "GameDataAssembler",
    "SchemaDriftError",
    "Settings",
    "UnknownTagError",
    "UnresolvedTemplateKeyError",
    "assemble_game_data",
    "get_settings",
    "load_configured_game_data",
    "load_game_data",
    "load_tables",
]
