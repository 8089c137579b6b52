from datetime import datetime, timezone

import pytest

from wowarmory.models import (
    TALENT_COLUMNS,
    TALENT_TIERS,
    AuctionData,
    Battlegroup,
    BracketList,
    Challenge,
    ChallengeGroup,
    CharacterStats,
    ClassTalentList,
    DecodeError,
    ItemClass,
    PetSlot,
    Profession,
    PvPZoneStatus,
    RealmStatus,
    SimpleCharacter,
    TalentList,
    decode,
    from_json,
)


def test_keys_match_field_names_without_case():
    group = decode(Battlegroup, {"NAME": "Vengeance", "Slug": "vengeance"})
    assert group == Battlegroup(name="Vengeance", slug="vengeance")


def test_camel_case_keys_fill_snake_case_fields():
    slot = decode(PetSlot, {"battlePetGuid": "guid", "isLocked": True, "abilities": [1, 2]})
    assert slot.battle_pet_guid == "guid"
    assert slot.is_locked is True
    assert slot.abilities == [1, 2]


def test_unknown_keys_are_ignored():
    group = decode(Battlegroup, {"name": "Shadowburn", "extra": {"x": 1}})
    assert group == Battlegroup(name="Shadowburn")


def test_null_leaves_defaults():
    prof = decode(Profession, {"name": None, "recipes": None, "rank": 75})
    assert prof.name == ""
    assert prof.recipes == []
    assert prof.rank == 75


def test_explicit_keys_are_used():
    zone = decode(PvPZoneStatus, {"area": 1, "controlling-faction": 2, "next": 99})
    assert zone.controlling_faction == 2
    assert zone.next == 99
    status = decode(RealmStatus, {"tol-barad": {"area": 21}, "wintergrasp": {"area": 1}})
    assert status.tol_barad == PvPZoneStatus(area=21)
    assert status.wintergrasp == PvPZoneStatus(area=1)


def test_bracket_list_keys():
    brackets = decode(BracketList, {"ARENA_BRACKET_2v2": {"slug": "2v2", "rating": 1500}})
    assert brackets.arena_bracket_2v2.slug == "2v2"
    assert brackets.arena_bracket_2v2.rating == 1500
    assert brackets.arena_bracket_3v3 is None


def test_class_key_maps_to_class_field():
    assert decode(SimpleCharacter, {"class": 6}).class_ == 6
    item_class = decode(ItemClass, {"class": 4, "subclasses": [{"subclass": 1, "name": "Cloth"}]})
    assert item_class.class_ == 4
    assert item_class.subclasses[0].name == "Cloth"


def test_challenge_map_criteria():
    data = {
        "realm": {
            "name": "Runetotem",
            "slug": "runetotem",
            "battlegroup": "Vengeance",
            "locale": "en_US",
            "timezone": "America/Los_Angeles",
        },
        "map": {
            "id": 962,
            "name": "Gate of the Setting Sun",
            "slug": "gate-of-the-setting-sun",
            "hasChallengeMode": True,
            "bronzeCriteria": {"time": 2700000, "hours": 0, "minutes": 45, "isPositive": True},
            "silverCriteria": {"time": 1320000, "minutes": 22, "seconds": 0},
            "goldCriteria": {"time": 780000, "minutes": 13, "milliseconds": 0, "isPositive": True},
        },
        "groups": [{"ranking": 1}, {"ranking": 2}],
    }
    challenge = decode(Challenge, data)
    assert challenge.realm.timezone == "America/Los_Angeles"
    assert challenge.map.id == 962
    assert challenge.map.has_challenge_mode is True
    assert challenge.map.bronze.time == 2700000
    assert challenge.map.bronze.hours == 0
    assert challenge.map.silver.minutes == 22
    assert challenge.map.gold.is_positive is True
    assert [g.ranking for g in challenge.groups] == [1, 2]


def test_challenge_group_date_is_parsed():
    group = decode(ChallengeGroup, {"date": "2013-09-25T21:25:00Z"})
    assert group.date == datetime(2013, 9, 25, 21, 25, tzinfo=timezone.utc)


def test_invalid_date_raises():
    with pytest.raises(DecodeError):
        decode(ChallengeGroup, {"date": "yesterday"})


def test_class_talent_list_numeric_keys():
    talents = decode(ClassTalentList, {"1": {"glyphs": [{"name": "Glyph"}]}, "11": {}})
    assert talents.warrior.glyphs[0].name == "Glyph"
    assert talents.druid == TalentList()
    assert talents.paladin is None


def test_talent_grid_is_padded():
    talents = decode(TalentList, {"talents": [[{"tier": 0, "column": 0}], None]})
    assert len(talents.talents) == TALENT_TIERS
    assert all(len(row) == TALENT_COLUMNS for row in talents.talents)
    assert talents.talents[0][0].tier == 0
    assert talents.talents[0][1] is None
    assert talents.talents[1] == [None] * TALENT_COLUMNS


def test_talent_grid_is_truncated():
    rows = [[{"tier": n}] * 5 for n in range(8)]
    talents = decode(TalentList, {"talents": rows})
    assert len(talents.talents) == TALENT_TIERS
    assert [row[0].tier for row in talents.talents] == list(range(TALENT_TIERS))
    assert all(len(row) == TALENT_COLUMNS for row in talents.talents)


def test_default_talent_grid_shape():
    grid = TalentList().talents
    assert len(grid) == TALENT_TIERS
    assert all(row == [None] * TALENT_COLUMNS for row in grid)


def test_float_fields_accept_integers():
    stats = decode(CharacterStats, {"crit": 12, "str": 150, "int": 80, "mana5Combat": 1.5})
    assert stats.crit == 12.0
    assert isinstance(stats.crit, float)
    assert stats.strength == 150
    assert stats.intellect == 80
    assert stats.mana5_combat == 1.5


@pytest.mark.parametrize(
    "data",
    [
        {"name": 5},
        {"slug": ["a"]},
    ],
)
def test_wrong_string_type_raises(data):
    with pytest.raises(DecodeError):
        decode(Battlegroup, data)


@pytest.mark.parametrize("value", [1.5, "3", True])
def test_wrong_integer_type_raises(value):
    with pytest.raises(DecodeError):
        decode(Profession, {"rank": value})


def test_wrong_bool_type_raises():
    with pytest.raises(DecodeError):
        decode(RealmStatus, {"queue": 1})


def test_non_object_raises():
    with pytest.raises(DecodeError):
        decode(Battlegroup, [1, 2])


def test_error_names_the_field():
    with pytest.raises(DecodeError, match="Battlegroup.name"):
        decode(Battlegroup, {"name": 5})


def test_list_field_must_be_array():
    with pytest.raises(DecodeError):
        decode(AuctionData, {"files": {"url": "x"}})


def test_from_json_accepts_bytes_and_text():
    blob = '{"files": [{"lastModified": 1380000000000, "url": "http://example.com/a.json"}]}'
    from_text = from_json(AuctionData, blob)
    from_bytes = from_json(AuctionData, blob.encode())
    assert from_text == from_bytes
    assert from_text.files[0].url == "http://example.com/a.json"
    assert from_text.files[0].last_modified == 1380000000000


def test_from_json_null_gives_defaults():
    assert from_json(Battlegroup, "null") == Battlegroup()


def test_from_json_invalid_raises():
    with pytest.raises(DecodeError):
        from_json(Battlegroup, "{not json")


def test_default_lists_are_independent():
    first, second = AuctionData(), AuctionData()
    first.files.append(None)
    assert second.files == []