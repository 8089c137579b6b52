"""Data records returned by the armory API and the JSON decoding that fills them.

Decoding follows the service's conventions: object keys are matched to
field names without regard to case (an explicit key may be set per field),
unknown keys are ignored, and ``null`` leaves a field at its default.
"""

import dataclasses
import json
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, NamedTuple, Optional

TALENT_TIERS = 6
TALENT_COLUMNS = 3


class DecodeError(ValueError):
    """Raised when JSON data does not fit the record it is decoded into."""


class _FieldSpec(NamedTuple):
    name: str
    key: str
    type: Any
    decoder: Optional[Callable[[Any], Any]]


def _keyed(key: str, default: Any = None) -> Any:
    """A field whose JSON key is given explicitly."""
    return field(default=default, metadata={"json": key})


@lru_cache(maxsize=None)
def _field_specs(cls: type) -> tuple:
    return tuple(
        _FieldSpec(
            name=f.name,
            key=f.metadata.get("json", f.name.replace("_", "")),
            type=f.type,
            decoder=f.metadata.get("decode"),
        )
        for f in dataclasses.fields(cls)
    )


def _lookup(data: Mapping, key: str) -> Any:
    if key in data:
        return data[key]
    folded = key.lower()
    return next(
        (value for name, value in data.items() if isinstance(name, str) and name.lower() == folded),
        None,
    )


def _is_optional(tp: Any) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def _zero(tp: Any) -> Any:
    if _is_optional(tp):
        return None
    if typing.get_origin(tp) is list:
        return []
    if dataclasses.is_dataclass(tp):
        return tp()
    if tp in (int, float, str, bool):
        return tp()
    raise DecodeError(f"no zero value for {tp!r}")


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _parse_time(value: Any) -> datetime:
    if not isinstance(value, str):
        raise DecodeError(f"expected a timestamp string, got {_type_name(value)}")
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise DecodeError(f"invalid timestamp {value!r}") from exc


def _convert(tp: Any, value: Any) -> Any:
    if _is_optional(tp):
        if value is None:
            return None
        inner = next(arg for arg in typing.get_args(tp) if arg is not type(None))
        return _convert(inner, value)
    if value is None:
        return _zero(tp)
    if typing.get_origin(tp) is list:
        if not isinstance(value, list):
            raise DecodeError(f"expected an array, got {_type_name(value)}")
        (item_type,) = typing.get_args(tp)
        return [_convert(item_type, item) for item in value]
    if dataclasses.is_dataclass(tp):
        return decode(tp, value)
    if tp is bool:
        if not isinstance(value, bool):
            raise DecodeError(f"expected a boolean, got {_type_name(value)}")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"expected an integer, got {_type_name(value)}")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(f"expected a number, got {_type_name(value)}")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise DecodeError(f"expected a string, got {_type_name(value)}")
        return value
    if tp is datetime:
        return _parse_time(value)
    raise DecodeError(f"unsupported field type {tp!r}")


def decode(cls, data):
    """Build an instance of the record class ``cls`` from decoded JSON ``data``."""
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise DecodeError(f"cannot decode {_type_name(data)} into {cls.__name__}")
    values = {}
    for spec in _field_specs(cls):
        raw = _lookup(data, spec.key)
        if raw is None:
            continue
        try:
            values[spec.name] = spec.decoder(raw) if spec.decoder else _convert(spec.type, raw)
        except DecodeError as exc:
            raise DecodeError(f"{cls.__name__}.{spec.name}: {exc}") from None
    return cls(**values)


def from_json(cls, blob):
    """Parse the JSON text or bytes ``blob`` into an instance of ``cls``."""
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    return decode(cls, data)


@dataclass
class ArenaBracket:
    slug: str = ""
    rating: int = 0
    weekly_played: int = 0
    weekly_won: int = 0
    weekly_lost: int = 0
    season_played: int = 0
    season_won: int = 0
    season_lost: int = 0


@dataclass
class AuctionDataFiles:
    last_modified: int = 0
    url: str = ""


@dataclass
class AuctionData:
    files: list[AuctionDataFiles] = field(default_factory=list)


@dataclass
class BattlePet:
    breed_id: int = 0
    health: int = 0
    level: int = 0
    pet_quality_id: int = 0
    power: int = 0
    species_id: int = 0
    speed: int = 0


@dataclass
class BattlePetAbility:
    cooldown: int = 0
    icon: str = ""
    id: int = 0
    is_passive: bool = False
    name: str = ""
    pet_type_id: int = 0
    rounds: int = 0
    show_hints: bool = False


@dataclass
class BattlePetSpecies:
    abilities: list[BattlePetAbility] = field(default_factory=list)
    can_battle: bool = False
    creature_id: int = 0
    description: str = ""
    icon: str = ""
    pet_type_id: int = 0
    source: str = ""
    species_id: int = 0


@dataclass
class Battlegroup:
    name: str = ""
    slug: str = ""


@dataclass
class BracketList:
    arena_bracket_2v2: ArenaBracket | None = _keyed("ARENA_BRACKET_2v2")
    arena_bracket_3v3: ArenaBracket | None = _keyed("ARENA_BRACKET_3v3")
    arena_bracket_5v5: ArenaBracket | None = _keyed("ARENA_BRACKET_5v5")
    arena_bracket_rbg: ArenaBracket | None = _keyed("ARENA_BRACKET_RBG")


@dataclass
class ChallengeTime:
    time: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    is_positive: bool = False


@dataclass
class Spec:
    background_image: str = ""
    description: str = ""
    icon: str = ""
    name: str = ""
    order: int = 0
    role: str = ""


@dataclass
class SimpleCharacter:
    """A character as embedded in other objects, carrying fewer details."""

    name: str = ""
    realm: str = ""
    battlegroup: str = ""
    class_: int = _keyed("class", 0)
    race: int = 0
    gender: int = 0
    level: int = 0
    achievement_points: int = 0
    thumbnail: str = ""
    spec: Spec | None = None
    guild: str = ""
    guild_realm: str = ""


@dataclass
class ChallengeMember:
    character: SimpleCharacter | None = None
    spec: Spec | None = None


@dataclass
class ChallengeGroup:
    date: datetime | None = None
    faction: str = ""
    is_recurring: bool = False
    medal: str = ""
    members: list[ChallengeMember] = field(default_factory=list)
    ranking: int = 0
    time: ChallengeTime | None = None


@dataclass
class Realm:
    name: str = ""
    slug: str = ""
    battlegroup: str = ""
    locale: str = ""
    timezone: str = ""


@dataclass
class Map:
    id: int = 0
    name: str = ""
    slug: str = ""
    has_challenge_mode: bool = False
    bronze: ChallengeTime | None = _keyed("bronzeCriteria")
    silver: ChallengeTime | None = _keyed("silverCriteria")
    gold: ChallengeTime | None = _keyed("goldCriteria")


@dataclass
class Challenge:
    realm: Realm | None = None
    map: Map | None = None
    groups: list[ChallengeGroup] = field(default_factory=list)


@dataclass
class CharacterAppearance:
    face_variation: int = 0
    skin_color: int = 0
    hair_variation: int = 0
    hair_color: int = 0
    feature_variation: int = 0
    show_helm: bool = False
    show_cloak: bool = False


@dataclass
class CharacterStats:
    health: int = 0
    power_type: str = ""
    power: int = 0
    strength: int = _keyed("str", 0)
    agility: int = _keyed("agi", 0)
    stamina: int = _keyed("sta", 0)
    intellect: int = _keyed("int", 0)
    spirit: int = _keyed("spr", 0)
    attack_power: int = 0
    ranged_attack_power: int = 0
    pvp_resilience_bonus: float = 0.0
    mastery: float = 0.0
    mastery_rating: int = 0
    crit: float = 0.0
    crit_rating: int = 0
    hit_percent: float = 0.0
    hit_rating: int = 0
    haste: float = 0.0
    haste_rating: int = 0
    haste_rating_percent: float = 0.0
    expertise_rating: int = 0
    spell_power: int = 0
    spell_pen: int = 0
    spell_crit: float = 0.0
    spell_crit_rating: int = 0
    spell_hit_percent: float = 0.0
    spell_hit_rating: int = 0
    mana5: float = 0.0
    mana5_combat: float = 0.0
    spell_haste: float = 0.0
    spell_haste_rating: int = 0
    spell_haste_rating_percent: float = 0.0
    armor: int = 0
    dodge: float = 0.0
    dodge_rating: int = 0
    parry: float = 0.0
    parry_rating: int = 0
    block: float = 0.0
    block_rating: int = 0
    pvp_resilience: float = 0.0
    pvp_resilience_rating: int = 0
    main_hand_dmg_min: float = 0.0
    main_hand_dmg_max: float = 0.0
    main_hand_speed: float = 0.0
    main_hand_dps: float = 0.0
    main_hand_expertise: float = 0.0
    off_hand_dmg_min: float = 0.0
    off_hand_dmg_max: float = 0.0
    off_hand_speed: float = 0.0
    off_hand_dps: float = 0.0
    off_hand_expertise: float = 0.0
    ranged_dmg_min: float = 0.0
    ranged_dmg_max: float = 0.0
    ranged_speed: float = 0.0
    ranged_dps: float = 0.0
    ranged_expertise: float = 0.0
    ranged_crit: float = 0.0
    ranged_crit_rating: int = 0
    ranged_hit_percent: float = 0.0
    ranged_hit_rating: int = 0
    ranged_haste: float = 0.0
    ranged_haste_rating: int = 0
    ranged_haste_rating_percent: float = 0.0
    pvp_power: float = 0.0
    pvp_power_rating: int = 0
    pvp_power_damage: float = 0.0
    pvp_power_healing: float = 0.0


@dataclass
class Glyph:
    glyph: int = 0
    item: int = 0
    name: str = ""
    icon: str = ""
    type_id: int = 0


@dataclass
class GlyphList:
    major: list[Glyph] = field(default_factory=list)
    minor: list[Glyph] = field(default_factory=list)


@dataclass
class Spell:
    id: int = 0
    name: str = ""
    icon: str = ""
    description: str = ""
    cast_time: str = ""
    cooldown: str = ""
    range: str = ""
    power_cost: str = ""


@dataclass
class Talent:
    tier: int = 0
    column: int = 0
    spell: Spell | None = None


@dataclass
class CharacterTalentList:
    selected: bool = False
    talents: list[Talent] = field(default_factory=list)
    glyphs: GlyphList | None = None
    spec: Spec | None = None
    calc_talent: str = ""
    calc_spec: str = ""
    calc_glyph: str = ""


@dataclass
class Class:
    id: int = 0
    mask: int = 0
    power_type: str = ""
    name: str = ""


def _empty_talent_row() -> list:
    return [None] * TALENT_COLUMNS


def _empty_talent_grid() -> list:
    return [_empty_talent_row() for _ in range(TALENT_TIERS)]


def _decode_talent_row(row: Any) -> list:
    if row is None:
        return _empty_talent_row()
    if not isinstance(row, list):
        raise DecodeError(f"expected an array, got {_type_name(row)}")
    cells = [_convert(Talent | None, cell) for cell in row[:TALENT_COLUMNS]]
    return cells + [None] * (TALENT_COLUMNS - len(cells))


def _decode_talent_grid(value: Any) -> list:
    """Decode a fixed tiers-by-columns grid, padding short input with ``None``."""
    if not isinstance(value, list):
        raise DecodeError(f"expected an array, got {_type_name(value)}")
    rows = [_decode_talent_row(row) for row in value[:TALENT_TIERS]]
    return rows + [_empty_talent_row() for _ in range(TALENT_TIERS - len(rows))]


@dataclass
class TalentList:
    glyphs: list[Glyph] = field(default_factory=list)
    talents: list[list[Talent | None]] = field(
        default_factory=_empty_talent_grid, metadata={"decode": _decode_talent_grid}
    )


@dataclass
class ClassTalentList:
    warrior: TalentList | None = _keyed("1")
    paladin: TalentList | None = _keyed("2")
    hunter: TalentList | None = _keyed("3")
    rogue: TalentList | None = _keyed("4")
    priest: TalentList | None = _keyed("5")
    deathknight: TalentList | None = _keyed("6")
    shaman: TalentList | None = _keyed("7")
    mage: TalentList | None = _keyed("8")
    warlock: TalentList | None = _keyed("9")
    monk: TalentList | None = _keyed("10")
    druid: TalentList | None = _keyed("11")


@dataclass
class GuildEmblem:
    icon: int = 0
    icon_color: str = ""
    border: int = 0
    border_color: str = ""
    background_color: str = ""


@dataclass
class Mount:
    name: str = ""
    spell_id: int = 0
    creature_id: int = 0
    item_id: int = 0
    quality: int = 0
    icon: str = ""
    is_ground: bool = False
    is_flying: bool = False
    is_aquatic: bool = False
    is_jumping: bool = False


@dataclass
class MountList:
    num_collected: int = 0
    num_not_collected: int = 0
    collected: list[Mount] = field(default_factory=list)


@dataclass
class PetStats:
    species_id: int = 0
    breed_id: int = 0
    pet_quality_id: int = 0
    level: int = 0
    health: int = 0
    power: int = 0
    speed: int = 0


@dataclass
class Pet:
    name: str = ""
    spell_id: int = 0
    creature_id: int = 0
    quality: int = 0
    icon: str = ""
    stats: PetStats | None = None
    battle_pet_guid: str = ""
    is_favorite: bool = False
    is_first_ability_slot_selected: bool = False
    is_second_ability_slot_selected: bool = False
    is_third_ability_slot_selected: bool = False
    creature_name: str = ""
    can_battle: bool = False


@dataclass
class PetList:
    num_collected: int = 0
    num_not_collected: int = 0
    collected: list[Pet] = field(default_factory=list)


@dataclass
class PetSlot:
    slot: int = 0
    battle_pet_guid: str = ""
    is_empty: bool = False
    is_locked: bool = False
    abilities: list[int] = field(default_factory=list)


@dataclass
class PetType:
    id: int = 0
    key: str = ""
    name: str = ""
    type_ability_id: int = 0
    strong_against_id: int = 0
    weak_against_id: int = 0


@dataclass
class Profession:
    id: int = 0
    name: str = ""
    icon: str = ""
    rank: int = 0
    max: int = 0
    recipes: list[int] = field(default_factory=list)


@dataclass
class ProfessionList:
    primary: list[Profession] = field(default_factory=list)
    secondary: list[Profession] = field(default_factory=list)


@dataclass
class RaidBoss:
    id: int = 0
    name: str = ""
    normal_kills: int = 0
    normal_timestamp: int = 0
    heroic_kills: int = 0
    heroic_timestamp: int = 0
    lfr_kills: int = 0
    lfr_timestamp: int = 0
    flex_kills: int = 0
    flex_timestamp: int = 0


@dataclass
class Raid:
    name: str = ""
    normal: int = 0
    heroic: int = 0
    id: int = 0
    bosses: list[RaidBoss] = field(default_factory=list)


@dataclass
class ProgressionList:
    raids: list[Raid] = field(default_factory=list)


@dataclass
class PvPLeaderboardRow:
    class_id: int = 0
    faction_id: int = 0
    gender_id: int = 0
    name: str = ""
    race_id: int = 0
    ranking: int = 0
    rating: int = 0
    realm_id: int = 0
    realm_name: str = ""
    realm_slug: str = ""
    season_losses: int = 0
    season_wins: int = 0
    spec_id: int = 0
    weekly_losses: int = 0
    weekly_wins: int = 0


@dataclass
class PvPList:
    brackets: BracketList | None = None


@dataclass
class PvPZoneStatus:
    area: int = 0
    controlling_faction: int = _keyed("controlling-faction", 0)
    status: int = 0
    next: int = 0


@dataclass
class Quest:
    category: str = ""
    id: int = 0
    level: int = 0
    req_level: int = 0
    suggested_party_members: int = 0
    title: str = ""


@dataclass
class Race:
    id: int = 0
    mask: int = 0
    side: str = ""
    name: str = ""


@dataclass
class RealmStatus:
    type: str = ""
    population: str = ""
    queue: bool = False
    wintergrasp: PvPZoneStatus | None = None
    tol_barad: PvPZoneStatus | None = _keyed("tol-barad")
    status: bool = False
    name: str = ""
    slug: str = ""
    battlegroup: str = ""
    locale: str = ""
    timezone: str = ""


@dataclass
class Recipe:
    icon: str = ""
    id: int = 0
    name: str = ""
    profession: str = ""


@dataclass
class Reputation:
    id: int = 0
    name: str = ""
    standing: int = 0
    value: int = 0
    max: int = 0


@dataclass
class SetBonus:
    description: str = ""
    threshold: int = 0


@dataclass
class SimpleGuild:
    name: str = ""
    realm: str = ""
    battlegroup: str = ""
    level: int = 0
    members: int = 0
    achievement_points: int = 0
    emblem: GuildEmblem | None = None


@dataclass
class Stat:
    stat: int = 0
    amount: int = 0
    reforged_amount: int = 0
    reforged: bool = False


@dataclass
class Title:
    id: int = 0
    name: str = ""


@dataclass
class Upgrade:
    current: int = 0
    total: int = 0
    item_level_increment: int = 0


@dataclass
class TooltipParams:
    gem0: int = 0
    gem1: int = 0
    gem2: int = 0
    set: list[int] = field(default_factory=list)
    reforge: int = 0
    transmog_item: int = 0
    upgrade: Upgrade | None = None


@dataclass
class WeaponDamage:
    min: int = 0
    max: int = 0
    exact_min: float = 0.0
    exact_max: float = 0.0


@dataclass
class WeaponInfo:
    damage: WeaponDamage | None = None
    weapon_speed: float = 0.0
    dps: float = 0.0


@dataclass
class ItemSource:
    source_id: int = 0
    source_type: str = ""


@dataclass
class ItemSubclass:
    subclass: int = 0
    name: str = ""


@dataclass
class ItemClass:
    class_: int = _keyed("class", 0)
    name: str = ""
    subclasses: list[ItemSubclass] = field(default_factory=list)