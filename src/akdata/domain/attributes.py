"""Operator attribute curves.

Within a promotion tier only health, attack and defense grow with level; they
are linearly interpolated between the tier's two keyframes and rounded.  Every
other attribute is constant inside a tier and copied from the first keyframe.

Trust adds a separate bonus on top: the bonus keyframe is reached at 200%
trust and scales linearly from zero below that.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PromotionAttributes, TrustAttributes

MAX_TRUST = 200


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""

    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def lerp_int(start: int, end: int, t: float) -> int:
    return round_half_up(lerp(start, end, t))


def level_t(min_level: int, max_level: int, level: int) -> float:
    """Position of ``level`` inside ``[min_level, max_level]`` as 0..1."""

    if max_level <= min_level:
        return 0.0
    clamped = min(max(level, min_level), max_level)
    return (clamped - min_level) / (max_level - min_level)


def level_attributes(
    min_attributes: PromotionAttributes,
    max_attributes: PromotionAttributes,
    level: int,
) -> PromotionAttributes:
    """Attributes of a tier at ``level``, given its first and last keyframe."""

    t = level_t(min_attributes.level, max_attributes.level, level)
    return replace(
        min_attributes,
        level=level,
        max_hp=lerp_int(min_attributes.max_hp, max_attributes.max_hp, t),
        atk=lerp_int(min_attributes.atk, max_attributes.atk, t),
        defense=lerp_int(min_attributes.defense, max_attributes.defense, t),
    )


def trust_bonus(
    bonus_max: TrustAttributes, trust: int, *, max_trust: int = MAX_TRUST
) -> TrustAttributes:
    """Bonus granted at ``trust`` percent; zero at 0, full at ``max_trust``."""

    t = min(max(trust, 0), max_trust) / max_trust
    return replace(
        bonus_max,
        max_hp=lerp_int(0, bonus_max.max_hp, t),
        atk=lerp_int(0, bonus_max.atk, t),
        defense=lerp_int(0, bonus_max.defense, t),
    )


# Lowest raw trust point value of each percent step.  Past 70% every step is
# 155 points wide.
_TRUST_STEPS: tuple[int, ...] = (
    0, 8, 16, 28, 40, 56, 72, 92, 112, 137,
    162, 192, 222, 255, 288, 325, 362, 404, 446, 491,
    536, 586, 636, 691, 746, 804, 862, 924, 986, 1052,
    1118, 1184, 1250, 1316, 1382, 1457, 1532, 1607, 1682, 1757,
    1832, 1917, 2002, 2087, 2172, 2257, 2352, 2447, 2542, 2637,
    2732, 2840, 2960, 3080, 3200, 3320, 3450, 3580, 3710, 3840,
    3970, 4110, 4250, 4390, 4530, 4670, 4820, 4970, 5120, 5270,
) + tuple(5420 + 155 * step for step in range(MAX_TRUST - 70 + 1))  # fmt: skip


def trust_points_to_percent(points: int) -> int:
    """Map raw trust points to the 0-200 percent scale shown in game."""

    if points <= 0:
        return 0
    return bisect_right(_TRUST_STEPS, points) - 1
