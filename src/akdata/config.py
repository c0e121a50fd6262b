"""Environment configuration for the akdata tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from akdata.domain.enums import StrictnessMode
from akdata.domain.rules_config import AssemblyRules


class Settings(BaseSettings):
    """Settings read from ``AKDATA_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="AKDATA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    data_dir: Path = Field(
        default=Path("gamedata"), description="Exported gamedata folder holding excel/*.json"
    )
    snapshot_dir: Path = Field(
        default=Path("snapshots"), description="Where assembled game data snapshots live"
    )
    strict: bool = Field(
        default=False, description="Raise on unknown tags and unresolved template keys"
    )
    require_handbook_entry: bool = Field(
        default=True, description="Drop operators that have no handbook entry"
    )
    loader_workers: int = Field(default=4, description="Threads used to decode tables", gt=0)

    def to_rules(self) -> AssemblyRules:
        return AssemblyRules(
            strictness=StrictnessMode.STRICT if self.strict else StrictnessMode.LENIENT,
            require_handbook_entry=self.require_handbook_entry,
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.snapshot_dir.mkdir(parents=True, exist_ok=True)
    return settings
