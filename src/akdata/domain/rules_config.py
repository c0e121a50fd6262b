"""Declarative configuration for the assembly step."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import StrictnessMode


@dataclass(frozen=True, slots=True)
class SkillRules:
    """Shape every skill level table must have."""

    level_count: int = 7
    mastery_count: int = 3


@dataclass(frozen=True, slots=True)
class AssemblyRules:
    """Top-level configuration container for the assembler."""

    strictness: StrictnessMode = StrictnessMode.LENIENT
    require_handbook_entry: bool = True
    skills: SkillRules = SkillRules()

    @property
    def strict(self) -> bool:
        return self.strictness is StrictnessMode.STRICT


DEFAULT_RULES = AssemblyRules()
STRICT_RULES = AssemblyRules(strictness=StrictnessMode.STRICT)
