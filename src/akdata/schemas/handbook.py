"""Raw records of ``excel/handbook_info_table.json`` (operator files)."""

from __future__ import annotations

from pydantic import Field

from .base import RawModel


class RawStory(RawModel):
    story_text: str = Field(alias="storyText")
    # 0 always, 1 promotion/level, 2 trust, 6 other operator owned
    unlock_type: int = Field(default=0, alias="unLockType")
    unlock_param: str = Field(default="", alias="unLockParam")


class RawStoryEntry(RawModel):
    stories: list[RawStory] = Field(min_length=1)
    story_title: str = Field(alias="storyTitle")


class RawHandbookEntry(RawModel):
    char_id: str = Field(alias="charID")
    draw_name: str = Field(default="", alias="drawName")
    story_text_audio: list[RawStoryEntry] = Field(default_factory=list, alias="storyTextAudio")


class RawHandbookTable(RawModel):
    handbook_dict: dict[str, RawHandbookEntry] = Field(default_factory=dict, alias="handbookDict")
