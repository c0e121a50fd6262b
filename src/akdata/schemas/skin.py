"""Raw records of ``excel/skin_table.json``."""

from __future__ import annotations

from pydantic import Field

from .base import RawModel


class RawDisplaySkin(RawModel):
    # None for default outfits
    skin_name: str | None = Field(default=None, alias="skinName")
    model_name: str | None = Field(default=None, alias="modelName")
    drawer_name: str | None = Field(default=None, alias="drawerName")
    skin_group_name: str | None = Field(default=None, alias="skinGroupName")
    content: str | None = None
    dialog: str | None = None
    usage: str | None = None
    description: str | None = None
    obtain_approach: str | None = Field(default=None, alias="obtainApproach")


class RawSkin(RawModel):
    skin_id: str = Field(alias="skinId")
    char_id: str = Field(alias="charId")
    illust_id: str | None = Field(default=None, alias="illustId")
    dyn_illust_id: str | None = Field(default=None, alias="dynIllustId")
    avatar_id: str | None = Field(default=None, alias="avatarId")
    portrait_id: str | None = Field(default=None, alias="portraitId")
    is_buy_skin: bool = Field(default=False, alias="isBuySkin")
    display_skin: RawDisplaySkin = Field(default_factory=RawDisplaySkin, alias="displaySkin")


class RawSkinTable(RawModel):
    char_skins: dict[str, RawSkin] = Field(default_factory=dict, alias="charSkins")
    # operator id -> {"0": skin id, "1": ..., "2": ...}
    buildin_evolve_map: dict[str, dict[str, str]] = Field(
        default_factory=dict, alias="buildinEvolveMap"
    )
