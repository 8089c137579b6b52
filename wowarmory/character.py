"""Full character profiles as returned by the character endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wowarmory.achievement import Achievement, AchievementCriteria, AchievementList
from wowarmory.item import Item
from wowarmory.models import (
    CharacterAppearance,
    CharacterStats,
    CharacterTalentList,
    MountList,
    PetList,
    PetSlot,
    ProfessionList,
    ProgressionList,
    PvPList,
    Reputation,
    SimpleGuild,
    Title,
)


class CharacterError(Exception):
    """Raised when a character cannot answer a question about itself."""


def _ignore(_raw: Any) -> None:
    return None


@dataclass
class FeedEntry:
    type: str = ""
    timestamp: int = 0
    achievement: Achievement | None = None
    feat_of_strength: bool = False
    criteria: AchievementCriteria | None = None
    quantity: int = 0
    name: str = ""
    item_id: int = 0


@dataclass
class ItemList:
    average_item_level: int = 0
    average_item_level_equipped: int = 0
    head: Item | None = None
    neck: Item | None = None
    shoulder: Item | None = None
    back: Item | None = None
    chest: Item | None = None
    shirt: Item | None = None
    wrist: Item | None = None
    hands: Item | None = None
    waist: Item | None = None
    legs: Item | None = None
    feet: Item | None = None
    finger1: Item | None = None
    finger2: Item | None = None
    trinket1: Item | None = None
    trinket2: Item | None = None
    main_hand: Item | None = None
    off_hand: Item | None = None


@dataclass
class Character:
    """A character profile; ``api_client`` is used to resolve the class name."""

    achievement_points: int = 0
    battlegroup: str = ""
    class_id: int = field(default=0, metadata={"json": "class"})
    calc_class: str = ""
    gender: int = 0
    level: int = 0
    name: str = ""
    race: int = 0
    realm: str = ""
    thumbnail: str = ""
    last_modified: int = 0
    guild: SimpleGuild | None = None
    feed: list[FeedEntry] = field(default_factory=list)
    items: ItemList | None = None
    stats: CharacterStats | None = None
    professions: ProfessionList | None = None
    reputation: list[Reputation] = field(default_factory=list)
    titles: list[Title] = field(default_factory=list)
    achievements: AchievementList | None = None
    talents: list[CharacterTalentList] = field(default_factory=list)
    appearance: CharacterAppearance | None = None
    mounts: MountList | None = None
    pets: PetList | None = None
    pet_slots: list[PetSlot] = field(default_factory=list)
    progression: ProgressionList | None = None
    pvp: PvPList | None = None
    quests: list[int] = field(default_factory=list)
    total_honorable_kills: int = 0
    api_client: Any = field(
        default=None, repr=False, compare=False, metadata={"decode": _ignore}
    )

    def class_name(self) -> str:
        """Look up the name of this character's class through the API client."""
        if self.api_client is None:
            raise CharacterError(
                "Character instance does not have an ApiClient reference. "
                "Please set api_client before calling class_name()."
            )
        if self.class_id == 0:
            raise CharacterError("Character instance does not have a class id.")
        matches = [c.name for c in self.api_client.get_classes() if c.id == self.class_id]
        if not matches or not matches[-1]:
            raise CharacterError(f"{self.class_id} is not a valid class id")
        return matches[-1]