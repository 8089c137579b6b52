"""Items and item sets."""

from __future__ import annotations

from dataclasses import dataclass, field

from wowarmory.models import (
    ItemSource,
    SetBonus,
    Spell,
    Stat,
    TooltipParams,
    WeaponInfo,
    from_json,
)


@dataclass
class Item:
    icon: str = ""
    id: int = 0
    name: str = ""
    quality: int = 0
    tooltip_params: TooltipParams | None = None
    bonus_stats: list[Stat] = field(default_factory=list)
    stats: list[Stat] = field(default_factory=list)
    armor: int = 0
    base_armor: int = 0
    weapon_info: WeaponInfo | None = None
    buy_price: int = 0
    container_slots: int = 0
    description: str = ""
    disenchanting_skill_rank: int = 0
    display_info_id: int = 0
    equipable: bool = False
    has_sockets: bool = False
    heroic_tooltip: bool = False
    inventory_type: int = 0
    is_auctionable: bool = False
    item_bind: int = 0
    item_class: int = 0
    item_level: int = 0
    item_source: ItemSource | None = None
    item_spells: list[Spell] = field(default_factory=list)
    item_subclass: int = 0
    max_count: int = 0
    max_durability: int = 0
    min_faction_id: int = 0
    min_reputation: int = 0
    name_description: str = ""
    name_description_color: str = ""
    required_level: int = 0
    required_skill: int = 0
    required_skill_rank: int = 0
    sell_price: int = 0
    stackable: int = 0
    upgradable: bool = False


@dataclass
class ItemSet:
    id: int = 0
    items: list[int] = field(default_factory=list)
    name: str = ""
    set_bonuses: list[SetBonus] = field(default_factory=list)


def item_from_json(blob):
    """Decode an item, filling whichever of stats and bonus stats is empty from the other."""
    item = from_json(Item, blob)
    if not item.stats:
        item.stats = item.bonus_stats
    if not item.bonus_stats:
        item.bonus_stats = item.stats
    return item