"""Static game constants: seasons, queues, maps, game modes and game types."""

from __future__ import annotations

from dataclasses import dataclass

from riotkit.jsonmodel import json_field


@dataclass(frozen=True)
class Season:
    """A season's ID and name."""

    id: int = json_field("id", default=0)
    season: str = json_field("season", default="")


@dataclass(frozen=True)
class Queue:
    """A queue's ID, map, description and notes."""

    id: int = json_field("queueId", default=0)
    map: str = json_field("map", default="")
    description: str = json_field("description", default="")
    notes: str = json_field("notes", default="")


@dataclass(frozen=True)
class Map:
    """A map's ID, name and notes."""

    id: int = json_field("mapId", default=0)
    name: str = json_field("mapName", default="")
    notes: str = json_field("notes", default="")


@dataclass(frozen=True)
class GameMode:
    """A game mode's name and description."""

    mode: str = json_field("gameMode", default="")
    description: str = json_field("description", default="")


@dataclass(frozen=True)
class GameType:
    """A game type's name and description."""

    type: str = json_field("gameType", default="")
    description: str = json_field("description", default="")