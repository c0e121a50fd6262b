"""Raw records of ``excel/char_meta_table.json``."""

from __future__ import annotations

from pydantic import Field

from .base import RawModel


class RawCharacterMetaTable(RawModel):
    # group id -> operator ids sharing one identity (alternate forms)
    sp_char_groups: dict[str, list[str]] = Field(default_factory=dict, alias="spCharGroups")
