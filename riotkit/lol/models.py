"""Champion rotation, mastery, leagues, live games, status, summoners and tournaments."""

from __future__ import annotations

from dataclasses import dataclass

from riotkit.jsonmodel import json_field


def _int(name):
    return json_field(name, default=0)


def _str(name):
    return json_field(name, default="")


def _bool(name):
    return json_field(name, default=False)


def _list(name, *, omitempty=False):
    return json_field(name, default_factory=list, omitempty=omitempty)


def _optional(name):
    return json_field(name, default=None)


@dataclass
class ChampionInfo:
    """The current free champion rotation."""

    free_champion_ids_for_new_players: list[int] = _list("freeChampionIDsForNewPlayers")
    free_champion_ids: list[int] = _list("freeChampionIDs")
    max_new_player_level: int = _int("maxNewPlayerLevel")


@dataclass
class ChampionMastery:
    """A summoner's mastery of one champion."""

    chest_granted: bool = _bool("chestGranted")
    champion_level: int = _int("championLevel")
    champion_points: int = _int("championPoints")
    champion_id: int = _int("championId")
    champion_points_until_next_level: int = _int("championPointsUntilNextLevel")
    last_play_time: int = _int("lastPlayTime")
    tokens_earned: int = _int("tokensEarned")
    champion_points_since_last_level: int = _int("championPointsSinceLastLevel")
    summoner_id: str = _str("summonerId")


@dataclass
class MiniSeries:
    """A promotion series towards the next ranked tier."""

    progress: str = _str("progress")
    losses: int = _int("losses")
    target: int = _int("target")
    wins: int = _int("wins")


@dataclass
class LeagueItem:
    """A summoner's ranked position in a league."""

    queue_type: str = _str("queueType")
    summoner_name: str = _str("summonerName")
    hot_streak: bool = _bool("hotStreak")
    mini_series: MiniSeries | None = _optional("miniSeries")
    wins: int = _int("wins")
    veteran: bool = _bool("veteran")
    losses: int = _int("losses")
    fresh_blood: bool = _bool("freshBlood")
    inactive: bool = _bool("inactive")
    tier: str = _str("tier")
    rank: str = _str("rank")
    summoner_id: str = _str("summonerId")
    league_points: int = _int("leaguePoints")


@dataclass
class LeagueList:
    """A league and all of its entries."""

    league_id: str = _str("leagueId")
    tier: str = _str("tier")
    entries: list[LeagueItem] = _list("entries")
    queue: str = _str("queue")
    name: str = _str("name")

    def get_rank(self, i):
        """Return the entry at position ``i`` when ordered by league points, highest first."""
        if i < 0:
            raise IndexError("rank out of range")
        ranked = getattr(self, "_sorted_entries", None)
        if ranked is None or len(ranked) != len(self.entries):
            ranked = sorted(self.entries, key=lambda entry: entry.league_points, reverse=True)
            self._sorted_entries = ranked
        return ranked[i]


@dataclass
class BannedChampion:
    """A champion banned during the pick/ban phase."""

    pick_turn: int = _int("pickTurn")
    champion_id: int = _int("championId")
    team_id: int = _int("teamId")


@dataclass
class Observer:
    """Observer information of an ongoing game."""

    encryption_key: str = _str("encryptionKey")


@dataclass
class GameCustomizationObject:
    """Game-specific customization of a participant."""

    category: str = _str("category")
    content: str = _str("content")


@dataclass
class Perks:
    """The runes a player uses in an ongoing game."""

    perk_style: int = _int("perkStyle")
    perk_ids: list[int] = _list("perkIds")
    perk_sub_style: int = _int("perkSubStyle")


@dataclass
class CurrentGameParticipant:
    """A player in an ongoing game."""

    profile_icon_id: int = _int("profileIconId")
    champion_id: int = _int("championId")
    summoner_name: str = _str("summonerName")
    game_customization_objects: list[GameCustomizationObject] = _list(
        "gameCustomizationObjects"
    )
    bot: bool = _bool("bot")
    perks: Perks | None = _optional("perks")
    spell2_id: int = _int("spell2Id")
    spell1_id: int = _int("spell1Id")
    team_id: int = _int("teamId")
    summoner_id: str = _str("summonerId")


@dataclass
class GameInfo:
    """An ongoing game."""

    game_id: int = _int("gameId")
    game_start_time: int = _int("gameStartTime")
    platform_id: str = _str("platformId")
    game_mode: str = _str("gameMode")
    map_id: int = _int("mapId")
    game_type: str = _str("gameType")
    banned_champions: list[BannedChampion] = _list("bannedChampions")
    observers: Observer | None = _optional("observers")
    participants: list[CurrentGameParticipant] = _list("participants")
    game_length: int = _int("gameLength")
    game_queue_config_id: int = _int("gameQueueConfigId")


@dataclass
class FeaturedGames:
    """The currently featured games."""

    client_refresh_interval: int = _int("clientRefreshInterval")
    game_list: list[GameInfo] = _list("gameList")


@dataclass
class StatusTranslation:
    """A status message's content in one locale."""

    locale: str = _str("locale")
    content: str = _str("content")
    updated_at: str = _str("updated_at")


@dataclass
class StatusMessage:
    """An update posted for an incident."""

    severity: str = _str("severity")
    author: str = _str("author")
    created_at: str = _str("created_at")
    translations: list[StatusTranslation] = _list("translations")
    updated_at: str = _str("updated_at")
    content: str = _str("content")
    id: str = _str("id")


@dataclass
class Incident:
    """An incident affecting a service."""

    active: bool = _bool("active")
    created_at: str = _str("created_at")
    id: int = _int("id")
    updates: list[StatusMessage] = _list("updates")


@dataclass
class Service:
    """A service and its status."""

    status: str = _str("status")
    incidents: list[Incident] = _list("incidents")
    name: str = _str("name")
    slug: str = _str("slug")


@dataclass
class Status:
    """The status of all services in a region."""

    name: str = _str("name")
    region_tag: str = _str("region_tag")
    hostname: str = _str("hostname")
    services: list[Service] = _list("services")
    slug: str = _str("slug")
    locales: list[str] = _list("locales")


@dataclass
class Summoner:
    """A summoner and its related IDs."""

    profile_icon_id: int = _int("profileIconId")
    name: str = _str("name")
    puuid: str = _str("puuid")
    summoner_level: int = _int("summonerLevel")
    revision_date: int = _int("revisionDate")
    id: str = _str("id")
    account_id: str = _str("accountId")


@dataclass
class LobbyEvent:
    """An event in a tournament lobby."""

    event_type: str = _str("eventType")
    summoner_id: str = _str("summonerId")
    timestamp: str = _str("timestamp")


@dataclass
class LobbyEventList:
    """The lobby events of a tournament lobby."""

    event_list: list[LobbyEvent] = _list("eventList")


@dataclass
class Tournament:
    """The settings of a created tournament."""

    map: str = _str("map")
    code: str = _str("code")
    spectators: str = _str("spectators")
    region: str = _str("region")
    provider_id: int = _int("providerId")
    team_size: int = _int("teamSize")
    participants: list[str] = _list("participants")
    pick_type: str = _str("pickType")
    tournament_id: int = _int("tournamentId")
    lobby_name: str = _str("lobbyName")
    password: str = _str("password")
    id: int = _int("id")
    meta_data: str = _str("metaData")


@dataclass
class TournamentCodeParameters:
    """Parameters for creating tournament codes.

    spectator_type: NONE, LOBBYONLY or ALL. team_size: 1 to 5.
    pick_type: BLIND_PICK, DRAFT_MODE, ALL_RANDOM or TOURNAMENT_DRAFT.
    map_type: SUMMONERS_RIFT, TWISTED_TREELINE or HOWLING_ABYSS.
    """

    spectator_type: str = _str("spectatorType")
    team_size: int = _int("teamSize")
    pick_type: str = _str("pickType")
    allowed_summoner_ids: list[str] = _list("allowedSummonerIds", omitempty=True)
    map_type: str = _str("mapType")
    metadata: str = _str("metadata")


@dataclass
class TournamentUpdateParameters:
    """Parameters for updating an existing tournament."""

    spectator_type: str = _str("spectatorType")
    pick_type: str = _str("pickType")
    allowed_summoner_ids: list[str] = _list("allowedSummonerIds")
    map_type: str = _str("mapType")


@dataclass
class TournamentRegistrationParameters:
    """Parameters for creating a tournament."""

    provider_id: int = _int("providerId")
    name: str = _str("name")


@dataclass
class ProviderRegistrationParameters:
    """Parameters for registering a tournament provider in a region.

    url must use http or https on the protocol's default port.
    """

    url: str = _str("url")
    region: str = _str("region")