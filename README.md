# wowarmory

A small client for the World of Warcraft community web API. It fetches
characters, guilds, items, achievements, battle pets, challenge modes,
realm status, PvP leaderboards and the static data lists. It decodes the
JSON replies into plain Python dataclasses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Create a client with `wowarmory.client.new_api_client(region, locale)`.
The region is `US`, `EU`, `KR`, `TW`, `ZH` or `CN`, or one of the long
names `"United States"`, `"Europe"`, `"Korea"`, `"Taiwan"` and `"China"`.
An empty locale selects the region's default locale. The last client
created this way is also returned by `current_api_client()`.

```python
from wowarmory.client import new_api_client

client = new_api_client("US", "")
print(client.host, client.locale)  # us.battle.net en_US

character = client.get_character_with_fields("Runetotem", "Capoferro", ["items"])
print(character.name, character.class_name(), character.items.average_item_level)
```

An invalid region or locale raises `wowarmory.client.ApiError`:

```python
new_api_client("China", "it_IT")
# ApiError: Locale 'it_IT' is not valid for region 'China'
```

`ApiError` is also raised for a request that fails at the network level.
A reply that is not valid JSON, or that does not fit the expected record,
raises `wowarmory.models.DecodeError`, which is a subclass of `ValueError`.

### Endpoints

`ApiClient` has these methods:

- `get_achievement(id)`
- `get_auction_data(realm)`
- `get_battle_pet_ability(id)`
- `get_battle_pet_species(id)`
- `get_battle_pet(species_id, level, breed_id, quality_id)`. It is also available as `get_battle_pet_stats`.
- `get_challenges(realm)` and `get_challenge(realm)`. An empty realm asks for the whole region.
- `get_character(realm, name)` and `get_character_with_fields(realm, name, fields)`
- `get_guild(realm, name)` and `get_guild_with_fields(realm, name, fields)`
- `get_item(id)` and `get_item_set(id)`
- `get_pvp_leaderboard(bracket)`, `get_quest(id)`, `get_realm_status()`, `get_recipe(id)` and `get_spell(id)`
- the static lists `get_battlegroups()`, `get_races()`, `get_classes()`,
  `get_achievements()`, `get_guild_rewards()`, `get_guild_perks()`,
  `get_guild_achievements()`, `get_item_classes()`, `get_talents()` and
  `get_pet_types()`

Requests time out after `timeout` seconds. The default is 30.

### Optional fields

`get_character_with_fields` and `get_guild_with_fields` accept a list of
extra fields. The accepted names are listed in `CHARACTER_FIELDS` and
`GUILD_FIELDS`. Unknown names raise `ApiError` before any request is made:

```python
guild = client.get_guild_with_fields("Runetotem", "Reforged", ["members", "news"])
for entry in guild.item_news():
    print(entry.character, entry.how_long_ago())
```

`GuildNewsItem.item()` fetches the referenced item through the current
client and caches it. It raises `wowarmory.guild.GuildError` when the entry
has no item id or when no client has been created.
`wowarmory.guild.by_rank(members)` returns the members sorted by rank, with
the lowest rank first.

A `Character` returned by the client keeps a reference to that client.
`Character.class_name()` uses the reference to look up the class name.
It raises `wowarmory.character.CharacterError` in three cases: the
character has no client, it has no class id, or the class id is unknown.

### Decoding your own data

`wowarmory.models.decode(cls, data)` fills a record from parsed JSON.
`from_json(cls, blob)` does the same from JSON text or bytes.

Keys are matched to field names without regard to case. Unknown keys are
ignored, and `null` leaves a field at its default.

`wowarmory.item.item_from_json(blob)` decodes an item. If either `stats` or
`bonus_stats` is empty, it is filled from the other.

### Signed requests

Construct the client with a `secret` and a `public_key`:

```python
from wowarmory.client import ApiClient

client = ApiClient(host="us.battle.net", locale="en_US",
                   secret="secret", public_key="my-public-key")
```

Requests then go over HTTPS. Each one carries an `Authorization: BNET
<public_key>:<signature>` header, where the signature is HMAC-SHA1 encoded
in base64. Without a secret, requests use plain HTTP.

## Command line

The package installs one demonstration command, `wowarmory-example`. It
prints a character's class, average item level and achievement points:

```
wowarmory-example
wowarmory-example Runetotem Capoferro --region US --locale en_US
```

Realm and name default to `Runetotem` and `Capoferro`. The command exits
with status 1 and prints the error if the lookup fails.

## What it does not do

The client speaks only to the `/api/wow/` paths of the community API. It
does not obtain OAuth tokens, retry failed requests or cache replies
(apart from the item cached on a guild news entry). It does not check HTTP
status codes: the body of an error reply is decoded like any other.