"""HTTP client for the armory web API."""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass, field
from datetime import datetime
from urllib.parse import quote, quote_plus

import requests

from wowarmory.achievement import Achievement
from wowarmory.character import Character
from wowarmory.guild import Guild, GuildPerk, GuildReward
from wowarmory.item import Item, ItemSet, item_from_json
from wowarmory.models import (
    AuctionData,
    BattlePet,
    BattlePetAbility,
    BattlePetSpecies,
    Battlegroup,
    Challenge,
    Class,
    ClassTalentList,
    ItemClass,
    PetType,
    PvPLeaderboardRow,
    Quest,
    Race,
    RealmStatus,
    Recipe,
    Spell,
    decode,
    from_json,
)


class ApiError(Exception):
    """Raised for invalid client settings, invalid fields and failed requests."""


_REGION_TABLE = (
    (("US", "United States"), "us.battle.net", ("en_US", "es_MX", "pt_BR")),
    (
        ("EU", "Europe"),
        "eu.battle.net",
        ("en_GB", "es_ES", "fr_FR", "ru_RU", "de_DE", "pt_PT", "it_IT"),
    ),
    (("KR", "Korea"), "kr.battle.net", ("ko_KR",)),
    (("TW", "Taiwan"), "tw.battle.net", ("zh_TW",)),
    (("ZH", "CN", "China"), "www.battle.com.cn", ("zh_CN",)),
)

REGIONS: dict[str, tuple[str, tuple[str, ...]]] = {
    name: (host, locales) for names, host, locales in _REGION_TABLE for name in names
}

GUILD_FIELDS = ("members", "achievements", "news", "challenge")

CHARACTER_FIELDS = (
    "achievements",
    "appearance",
    "feed",
    "guild",
    "hunterPets",
    "items",
    "mounts",
    "pets",
    "petSlots",
    "professions",
    "progression",
    "pvp",
    "quests",
    "reputation",
    "stats",
    "talents",
    "titles",
)

# Characters Go's path escaping leaves alone besides the unreserved ones.
_PATH_SAFE = "/$&+,:;=@"

_current: ApiClient | None = None


def current_api_client():
    """The client most recently created by :func:`new_api_client`, if any."""
    return _current


def new_api_client(region, locale=""):
    """Create a client for ``region``; an empty ``locale`` picks the region's default."""
    global _current
    try:
        host, valid_locales = REGIONS[region]
    except KeyError:
        raise ApiError(f"Region '{region}' is not valid") from None
    if not locale:
        locale = valid_locales[0]
    elif locale not in valid_locales:
        raise ApiError(f"Locale '{locale}' is not valid for region '{region}'")
    client = ApiClient(host=host, locale=locale)
    _current = client
    return client


def validate_fields(valid_fields, fields):
    """Raise :class:`ApiError` naming every entry of ``fields`` not in ``valid_fields``."""
    bad = [name for name in fields if name not in valid_fields]
    if bad:
        raise ApiError(f"The following fields are not valid: [{' '.join(bad)}]")


def validate_guild_fields(fields):
    """Check optional guild fields."""
    validate_fields(GUILD_FIELDS, fields)


def validate_character_fields(fields):
    """Check optional character fields."""
    validate_fields(CHARACTER_FIELDS, fields)


@dataclass
class _AchievementData:
    achievements: list[Achievement] = field(default_factory=list)


@dataclass
class _BattlegroupList:
    battlegroups: list[Battlegroup] = field(default_factory=list)


@dataclass
class _ChallengeList:
    challenges: list[Challenge] = field(default_factory=list, metadata={"json": "challenge"})


@dataclass
class _ClassList:
    classes: list[Class] = field(default_factory=list)


@dataclass
class _GuildAchievementList:
    achievements: list[Achievement] = field(default_factory=list)


@dataclass
class _GuildPerkList:
    perks: list[GuildPerk] = field(default_factory=list)


@dataclass
class _GuildRewardList:
    rewards: list[GuildReward] = field(default_factory=list)


@dataclass
class _ItemClassList:
    classes: list[ItemClass] = field(default_factory=list)


@dataclass
class _PetTypeList:
    pet_types: list[PetType] = field(default_factory=list)


@dataclass
class _PvPLeaderboard:
    rows: list[PvPLeaderboardRow] = field(default_factory=list)


@dataclass
class _RaceList:
    races: list[Race] = field(default_factory=list)


@dataclass
class _RealmStatusList:
    realms: list[RealmStatus] = field(default_factory=list)


@dataclass
class ApiClient:
    """Client for one regional host; requests are signed when ``secret`` is set."""

    host: str
    locale: str
    secret: str = field(default="", repr=False)
    public_key: str = ""
    timeout: float | None = 30.0

    def get_achievement(self, achievement_id):
        return self._decode(Achievement, f"achievement/{achievement_id}")

    def get_auction_data(self, realm):
        return self._decode(AuctionData, f"auction/data/{realm}")

    def get_battle_pet_ability(self, ability_id):
        return self._decode(BattlePetAbility, f"battlePet/ability/{ability_id}")

    def get_battle_pet_species(self, species_id):
        return self._decode(BattlePetSpecies, f"battlePet/species/{species_id}")

    def get_battle_pet(self, species_id, level, breed_id, quality_id):
        params = {"level": str(level), "breedId": str(breed_id), "qualityId": str(quality_id)}
        return self._decode(BattlePet, f"battlePet/stats/{species_id}", params)

    def get_battle_pet_stats(self, species_id, level, breed_id, quality_id):
        return self.get_battle_pet(species_id, level, breed_id, quality_id)

    def get_challenges(self, realm=""):
        """Challenge mode leaders of ``realm``, or of the whole region when it is empty."""
        return self._decode(_ChallengeList, f"challenge/{realm or 'region'}").challenges

    def get_challenge(self, realm=""):
        return self.get_challenges(realm)

    def get_character(self, realm, character_name):
        return self.get_character_with_fields(realm, character_name, [])

    def get_character_with_fields(self, realm, character_name, fields):
        validate_character_fields(fields)
        character = self._decode(
            Character, f"character/{realm}/{character_name}", {"fields": ",".join(fields)}
        )
        character.api_client = self
        return character

    def get_item(self, item_id) -> Item:
        return item_from_json(self._fetch(f"item/{item_id}"))

    def get_item_set(self, set_id):
        return self._decode(ItemSet, f"item/set/{set_id}")

    def get_guild(self, realm, guild_name):
        return self.get_guild_with_fields(realm, guild_name, [])

    def get_guild_with_fields(self, realm, guild_name, fields):
        validate_guild_fields(fields)
        return self._decode(
            Guild, f"guild/{realm}/{quote_plus(guild_name)}", {"fields": ",".join(fields)}
        )

    def get_pvp_leaderboard(self, bracket):
        return self._decode(_PvPLeaderboard, f"leaderboard/{bracket}").rows

    def get_quest(self, quest_id):
        return self._decode(Quest, f"quest/{quest_id}")

    def get_realm_status(self):
        return self._decode(_RealmStatusList, "realm/status").realms

    def get_recipe(self, recipe_id):
        return self._decode(Recipe, f"recipe/{recipe_id}")

    def get_spell(self, spell_id):
        return self._decode(Spell, f"spell/{spell_id}")

    def get_battlegroups(self):
        return self._decode(_BattlegroupList, "data/battlegroups/").battlegroups

    def get_races(self):
        return self._decode(_RaceList, "data/character/races").races

    def get_classes(self):
        return self._decode(_ClassList, "data/character/classes").classes

    def get_achievements(self):
        return self._decode(_AchievementData, "data/character/achievements").achievements

    def get_guild_rewards(self):
        return self._decode(_GuildRewardList, "data/guild/rewards").rewards

    def get_guild_perks(self):
        return self._decode(_GuildPerkList, "data/guild/perks").perks

    def get_guild_achievements(self):
        return self._decode(_GuildAchievementList, "data/guild/achievements").achievements

    def get_item_classes(self):
        return self._decode(_ItemClassList, "data/item/classes").classes

    def get_talents(self):
        return self._decode(ClassTalentList, "data/talents")

    def get_pet_types(self):
        return self._decode(_PetTypeList, "data/pet/types").pet_types

    def url(self, path, query_params=None, ssl=False):
        """The full request URL for an API ``path``; the locale is always added."""
        params = dict(query_params or {})
        params["locale"] = self.locale
        query = "&".join(f"{key}={value}" for key, value in params.items())
        scheme = "https" if ssl else "http"
        escaped = quote("/api/wow/" + path, safe=_PATH_SAFE)
        return f"{scheme}://{self.host}{escaped}?{query}"

    def authorization_string(self, signature):
        return f"BNET {self.public_key}:{signature}"

    def signature(self, verb, path):
        """Base64 HMAC-SHA1 over the verb, the current time and the request path."""
        message = "\n".join([verb, str(datetime.now()), "/api/wow/" + path, ""])
        digest = hmac.new(self.secret.encode(), message.encode(), hashlib.sha1).digest()
        return base64.b64encode(digest).decode("ascii")

    def _fetch(self, path: str, params: dict[str, str] | None = None) -> bytes:
        signed = bool(self.secret)
        url = self.url(path, params, signed)
        headers = {}
        if signed:
            headers["Authorization"] = self.authorization_string(self.signature("GET", path))
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc
        return response.content

    def _decode(self, cls, path, params=None):
        return from_json(cls, self._fetch(path, params))


__all__ = [
    "ApiClient",
    "ApiError",
    "CHARACTER_FIELDS",
    "GUILD_FIELDS",
    "REGIONS",
    "current_api_client",
    "decode",
    "new_api_client",
    "validate_character_fields",
    "validate_fields",
    "validate_guild_fields",
]