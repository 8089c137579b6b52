"""Achievements, their criteria and a character's achievement progress."""

from __future__ import annotations

from dataclasses import dataclass, field

from wowarmory.item import Item


@dataclass
class AchievementCriteria:
    description: str = ""
    id: int = 0
    max: int = 0
    order_index: int = 0


@dataclass
class AchievementList:
    achievements_completed: list[int] = field(default_factory=list)
    achievements_completed_timestamp: list[int] = field(default_factory=list)
    criteria: list[int] = field(default_factory=list)
    criteria_quantity: list[int] = field(default_factory=list)
    criteria_timestamp: list[int] = field(default_factory=list)
    criteria_created: list[int] = field(default_factory=list)


@dataclass
class Achievement:
    """A single achievement, or a group holding achievements and subgroups."""

    account_wide: bool = False
    criteria: list[AchievementCriteria] = field(default_factory=list)
    description: str = ""
    icon: str = ""
    id: int = 0
    points: int = 0
    reward: str = ""
    reward_items: list[Item] = field(default_factory=list)
    title: str = ""
    achievements: list[Achievement] = field(default_factory=list)
    categories: list[Achievement] = field(default_factory=list)
    name: str = ""

    def is_group(self) -> bool:
        """True when this entry holds achievements or subgroups."""
        return bool(self.achievements or self.categories)