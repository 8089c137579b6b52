"""Guilds, their members, news, perks and rewards."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from wowarmory.achievement import Achievement, AchievementList
from wowarmory.item import Item
from wowarmory.models import Challenge, GuildEmblem, SimpleCharacter, Spell


class GuildError(Exception):
    """Raised when guild data cannot provide what was asked for."""


@dataclass
class GuildMember:
    character: SimpleCharacter | None = None
    rank: int = 0


def by_rank(members):
    """Return the members ordered by rank, lowest first."""
    return sorted(members, key=lambda member: member.rank)


@dataclass
class GuildNewsItem:
    type: str = ""
    character: str = ""
    timestamp: int = 0
    item_id: int = 0
    achievement: Achievement | None = None

    def __post_init__(self) -> None:
        self._item: Item | None = None

    def time(self) -> datetime:
        """The moment of the news entry; the timestamp is in milliseconds."""
        return datetime.fromtimestamp(self.timestamp // 1000, tz=timezone.utc)

    def ago(self) -> timedelta:
        """Time elapsed since the news entry."""
        return datetime.now(timezone.utc) - self.time()

    def how_long_ago(self) -> str:
        """A rough human description of how long ago the entry happened."""
        elapsed = self.ago()
        seconds = elapsed.total_seconds()
        if seconds / 3600 > 2:
            return f"{int(seconds / 3600)} hours ago"
        if seconds / 60 > 2:
            return f"{int(seconds / 60)} minutes ago"
        if seconds > 1:
            return f"{int(seconds)} seconds ago"
        nanoseconds = (elapsed // timedelta(microseconds=1)) * 1000
        return f"{nanoseconds} nanoseconds ago"

    def item(self) -> Item:
        """Fetch the item this entry refers to, caching it after the first lookup."""
        if self._item is not None:
            return self._item
        if self.item_id == 0:
            raise GuildError("No ItemId set")
        from wowarmory.client import current_api_client

        client = current_api_client()
        if client is None:
            raise GuildError("No API client created. Create one via new_api_client")
        self._item = client.get_item(self.item_id)
        return self._item


@dataclass
class GuildPerk:
    guild_level: int = 0
    spell: Spell | None = None


@dataclass
class GuildReward:
    min_guild_level: int = 0
    min_guild_rep_level: int = 0
    races: list[int] = field(default_factory=list)
    achievement: Achievement | None = None
    item: Item | None = None


@dataclass
class Guild:
    name: str = ""
    realm: str = ""
    battlegroup: str = ""
    last_modified: int = 0
    level: int = 0
    members: list[GuildMember] = field(default_factory=list)
    achievement_points: int = 0
    emblem: GuildEmblem | None = None
    side: int = 0
    achievements: AchievementList | None = None
    news: list[GuildNewsItem] = field(default_factory=list)
    challenge: list[Challenge] = field(default_factory=list)

    def item_news(self) -> list[GuildNewsItem]:
        """News entries about looted items, in their original order."""
        return [entry for entry in self.news if entry.type == "itemLoot"]