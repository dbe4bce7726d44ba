# riotkit

This package provides typed dataclass models for Riot Games API responses. It
also has a small caching client for Riot's static game constants: seasons,
queues, maps, game modes and game types.

It has no runtime dependencies and needs Python 3.10 or newer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Static data

`riotkit.static.client.Client` downloads the published constants. Each
kind of data is fetched the first time it is used and then cached. Every call
returns a new list, so changing a returned list does not change the cache.

```python
import logging

from riotkit.static.client import Client, UrllibDoer

client = Client(UrllibDoer(timeout=10.0), logging.getLogger("riotkit"))

seasons = client.get_seasons()
queue = client.get_queue(420)
summoners_rift = client.get_map(11)
classic = client.get_game_mode("CLASSIC")
matched = client.get_game_type("MATCHED_GAME")

client.clear_caches()  # the next call downloads the data again
```

Both arguments of `Client` are optional. The defaults are a `UrllibDoer` and
a module logger.

Errors:

- A response whose status is outside 200–299 raises `riotkit.errors.ApiError`.
  The error has a `message` and a `status_code`.
  - For well-known statuses the message is the reason, for example
    `"not found"` for 404 or `"forbidden"` for 403.
  - For any other status the message is `"unknown error reason"`.
  - `riotkit.errors.error_for_status(code)` builds the same error.
  - Two errors are equal when both their message and their status code match.
- A lookup by id, mode or type that finds nothing raises
  `ApiError("not found", 404)`.
- A body that is not valid JSON raises `json.JSONDecodeError`.

The client accepts any object that has a `do(method, url)` method returning
a `riotkit.static.client.Response(status_code, body)`. `UrllibDoer` does this
with the standard library. It returns error statuses as responses and does
not raise for them. You can pass your own object in tests, or to send
requests through a different HTTP stack.

## Models

Models are dataclasses with snake_case attributes. Each attribute maps to the
API's JSON key. `riotkit.jsonmodel.decode(cls, data)` reads parsed JSON into
a model, and `riotkit.jsonmodel.encode(obj)` turns a model back into
JSON-ready data:

```python
from riotkit.jsonmodel import decode, encode
from riotkit.lol.match import Match

match = decode(Match, {"metadata": {"matchId": "EUW1_1"}, "info": {"queueId": 420}})
print(match.metadata.match_id)             # EUW1_1
print(encode(match)["metadata"]["matchId"])
```

How `decode` treats its input:

- Unknown keys are ignored.
- Missing keys keep the field's default.
- `null` becomes `None` for optional fields, and the zero value (`0`, `""`,
  `False`, empty list or dict) for all other fields.
- A value of the wrong JSON type raises `TypeError`.

`riotkit.jsonmodel.json_field(name, ...)` declares a field for your own
models. With `omitempty=True`, `encode` leaves the field out when its value
is empty.

The models are in these modules:

- `riotkit.lol.match`: matches, participants and their perks, teams, bans and
  objectives, and timelines with frames and events.
  - `MatchEventType` is a string enum.
  - `MatchEvent.type` holds the enum member when the value is known, and the
    raw string otherwise.
  - `MatchInfo.get_queue`, `get_map`, `get_game_type` and `get_game_mode` look
    up the match's constants through a static-data `Client`.
- `riotkit.lol.models`: summoners, champion mastery and the free rotation,
  leagues, spectator games, featured games, service status and tournaments.
  - This module includes the request parameter types for tournaments.
  - `LeagueList.get_rank(i)` returns the entry at position `i` with entries
    ordered by league points, highest first. A negative `i` raises
    `IndexError`.
  - `TournamentCodeParameters.allowed_summoner_ids` is left out of encoded
    output when it is empty.
- `riotkit.lor.models`: `Player` entries of the Legends of Runeterra ranked
  leaderboard (`name`, `rank`, `league_points` from `lp`).

## What this package does not do

The only HTTP client here is the one for static constants. There is no client
for the regional game APIs, such as the summoner, spectator, status, match,
tournament or leaderboard endpoints. There is no rate limiting and no
authentication.

Data Dragon lookups of champions, items, spells and icons are also not
included.

To use the models, fetch the JSON yourself and pass it to `decode`.