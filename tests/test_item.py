import json

import pytest

from wowarmory.item import Item, ItemSet, item_from_json
from wowarmory.models import DecodeError, SetBonus, Stat, from_json

STATS = [{"stat": 5, "amount": 10}, {"stat": 7, "amount": 20}]


def test_bonus_stats_fill_missing_stats():
    item = item_from_json(json.dumps({"id": 18803, "bonusStats": STATS}))
    assert item.stats == [Stat(stat=5, amount=10), Stat(stat=7, amount=20)]
    assert item.bonus_stats == item.stats


def test_stats_fill_missing_bonus_stats():
    item = item_from_json(json.dumps({"id": 1, "stats": STATS}).encode())
    assert item.bonus_stats == [Stat(stat=5, amount=10), Stat(stat=7, amount=20)]
    assert item.stats == item.bonus_stats


def test_both_present_are_kept_apart():
    item = item_from_json(json.dumps({"stats": STATS[:1], "bonusStats": STATS[1:]}))
    assert item.stats == [Stat(stat=5, amount=10)]
    assert item.bonus_stats == [Stat(stat=7, amount=20)]


def test_no_stats_leaves_both_empty():
    item = item_from_json('{"id": 104426, "armor": 0, "baseArmor": 0}')
    assert item.stats == []
    assert item.bonus_stats == []
    assert item.armor == 0
    assert item.base_armor == 0


def test_nested_item_fields():
    data = {
        "name": "Blade",
        "weaponInfo": {"damage": {"min": 3, "max": 9, "exactMin": 3.5}, "weaponSpeed": 2.6, "dps": 2},
        "itemSource": {"sourceId": 7, "sourceType": "VENDOR"},
        "itemSpells": [{"id": 8056, "castTime": "Instant", "cooldown": "6 sec cooldown"}],
        "tooltipParams": {"gem0": 1, "set": [4, 5], "upgrade": {"current": 1, "total": 2}},
    }
    item = item_from_json(json.dumps(data))
    assert item.weapon_info.damage.min == 3
    assert item.weapon_info.damage.exact_min == 3.5
    assert item.weapon_info.weapon_speed == 2.6
    assert item.weapon_info.dps == 2.0
    assert item.item_source.source_type == "VENDOR"
    assert item.item_spells[0].cast_time == "Instant"
    assert item.item_spells[0].cooldown == "6 sec cooldown"
    assert item.tooltip_params.set == [4, 5]
    assert item.tooltip_params.upgrade.total == 2


def test_item_from_json_matches_plain_decode_when_both_set():
    blob = json.dumps({"id": 3, "stats": STATS, "bonusStats": STATS})
    assert item_from_json(blob) == from_json(Item, blob)


def test_item_from_json_invalid_raises():
    with pytest.raises(DecodeError):
        item_from_json(b"<html>")


def test_item_from_json_wrong_type_raises():
    with pytest.raises(DecodeError):
        item_from_json('{"equipable": "yes"}')


def test_item_set_decodes():
    data = {
        "id": 1060,
        "name": "Set",
        "items": [1, 2, 3, 4, 5],
        "setBonuses": [{"description": "a", "threshold": 2}, {"description": "b", "threshold": 4}],
    }
    item_set = from_json(ItemSet, json.dumps(data))
    assert len(item_set.items) == 5
    assert len(item_set.set_bonuses) == 2
    assert item_set.set_bonuses[1] == SetBonus(description="b", threshold=4)