"""Finished matches, their participants and teams, and match timelines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from riotkit.jsonmodel import json_field


def _int(name):
    return json_field(name, default=0)


def _str(name):
    return json_field(name, default="")


def _bool(name):
    return json_field(name, default=False)


def _list(name):
    return json_field(name, default_factory=list)


@dataclass
class MatchMetadata:
    """Metadata of a match: data version, match ID and participant PUUIDs."""

    data_version: str = _str("dataVersion")
    match_id: str = _str("matchId")
    participants: list[str] = _list("participants")


@dataclass
class StatPerks:
    """Stat shards chosen for a perk page."""

    defense: int = _int("defense")
    flex: int = _int("flex")
    offense: int = _int("offense")


@dataclass
class Selections:
    """A selected perk and its recorded variables."""

    perk: int = _int("perk")
    var1: int = _int("var1")
    var2: int = _int("var2")
    var3: int = _int("var3")


@dataclass
class Styles:
    """A perk style with its selections."""

    description: str = _str("description")
    selections: list[Selections] = _list("selections")
    style: int = _int("style")


@dataclass
class ParticipantPerks:
    """The perks a participant played with."""

    stat_perks: StatPerks | None = json_field("statPerks", default=None)
    styles: list[Styles] = _list("styles")


@dataclass
class Participant:
    """A participant of a finished match and their statistics."""

    assists: int = _int("assists")
    baron_kills: int = _int("baronKills")
    bounty_level: int = _int("bountyLevel")
    champ_experience: int = _int("champExperience")
    champ_level: int = _int("champLevel")
    champion_id: int = _int("championId")
    champion_name: str = _str("championName")
    # Only used for Kayn: 0 none, 1 slayer, 2 assassin.
    champion_transform: int = _int("championTransform")
    consumables_purchased: int = _int("consumablesPurchased")
    damage_dealt_to_buildings: int = _int("damageDealtToBuildings")
    damage_dealt_to_objectives: int = _int("damageDealtToObjectives")
    damage_dealt_to_turrets: int = _int("damageDealtToTurrets")
    damage_self_mitigated: int = _int("damageSelfMitigated")
    deaths: int = _int("deaths")
    detector_wards_placed: int = _int("detectorWardsPlaced")
    double_kills: int = _int("doubleKills")
    dragon_kills: int = _int("dragonKills")
    first_blood_assist: bool = _bool("firstBloodAssist")
    first_blood_kill: bool = _bool("firstBloodKill")
    first_tower_assist: bool = _bool("firstTowerAssist")
    first_tower_kill: bool = _bool("firstTowerKill")
    game_ended_in_early_surrender: bool = _bool("gameEndedInEarlySurrender")
    game_ended_in_surrender: bool = _bool("gameEndedInSurrender")
    gold_earned: int = _int("goldEarned")
    gold_spent: int = _int("goldSpent")
    individual_position: str = _str("individualPosition")
    inhibitor_kills: int = _int("inhibitorKills")
    inhibitor_takedowns: int = _int("inhibitorTakedowns")
    inhibitors_lost: int = _int("inhibitorsLost")
    item0: int = _int("item0")
    item1: int = _int("item1")
    item2: int = _int("item2")
    item3: int = _int("item3")
    item4: int = _int("item4")
    item5: int = _int("item5")
    item6: int = _int("item6")
    items_purchased: int = _int("itemsPurchased")
    killing_sprees: int = _int("killingSprees")
    kills: int = _int("kills")
    lane: str = _str("lane")
    largest_critical_strike: int = _int("largestCriticalStrike")
    largest_killing_spree: int = _int("largestKillingSpree")
    largest_multi_kill: int = _int("largestMultiKill")
    longest_time_spent_living: int = _int("longestTimeSpentLiving")
    magic_damage_dealt: int = _int("magicDamageDealt")
    magic_damage_dealt_to_champions: int = _int("magicDamageDealtToChampions")
    magic_damage_taken: int = _int("magicDamageTaken")
    neutral_minions_killed: int = _int("neutralMinionsKilled")
    nexus_kills: int = _int("nexusKills")
    nexus_lost: int = _int("nexusLost")
    nexus_takedowns: int = _int("nexusTakedowns")
    objectives_stolen: int = _int("objectivesStolen")
    objectives_stolen_assists: int = _int("objectivesStolenAssists")
    participant_id: int = _int("participantId")
    penta_kills: int = _int("pentaKills")
    perks: ParticipantPerks | None = json_field("perks", default=None)
    physical_damage_dealt: int = _int("physicalDamageDealt")
    physical_damage_dealt_to_champions: int = _int("physicalDamageDealtToChampions")
    physical_damage_taken: int = _int("physicalDamageTaken")
    profile_icon: int = _int("profileIcon")
    puuid: str = _str("puuid")
    quadra_kills: int = _int("quadraKills")
    riot_id_name: str = _str("riotIdName")
    riot_id_tagline: str = _str("riotIdTagline")
    role: str = _str("role")
    sight_wards_bought_in_game: int = _int("sightWardsBoughtInGame")
    spell1_casts: int = _int("spell1Casts")
    spell2_casts: int = _int("spell2Casts")
    spell3_casts: int = _int("spell3Casts")
    spell4_casts: int = _int("spell4Casts")
    summoner1_casts: int = _int("summoner1Casts")
    summoner1_id: int = _int("summoner1Id")
    summoner2_casts: int = _int("summoner2Casts")
    summoner2_id: int = _int("summoner2Id")
    summoner_id: str = _str("summonerId")
    summoner_level: int = _int("summonerLevel")
    summoner_name: str = _str("summonerName")
    team_early_surrendered: bool = _bool("teamEarlySurrendered")
    team_id: int = _int("teamId")
    team_position: str = _str("teamPosition")
    time_ccing_others: int = _int("timeCCingOthers")
    time_played: int = _int("timePlayed")
    total_damage_dealt: int = _int("totalDamageDealt")
    total_damage_dealt_to_champions: int = _int("totalDamageDealtToChampions")
    total_damage_shielded_on_teammates: int = _int("totalDamageShieldedOnTeammates")
    total_damage_taken: int = _int("totalDamageTaken")
    total_heal: int = _int("totalHeal")
    total_heals_on_teammates: int = _int("totalHealsOnTeammates")
    total_minions_killed: int = _int("totalMinionsKilled")
    total_time_cc_dealt: int = _int("totalTimeCCDealt")
    total_time_spent_dead: int = _int("totalTimeSpentDead")
    total_units_healed: int = _int("totalUnitsHealed")
    triple_kills: int = _int("tripleKills")
    true_damage_dealt: int = _int("trueDamageDealt")
    true_damage_dealt_to_champions: int = _int("trueDamageDealtToChampions")
    true_damage_taken: int = _int("trueDamageTaken")
    turret_kills: int = _int("turretKills")
    turret_takedowns: int = _int("turretTakedowns")
    turrets_lost: int = _int("turretsLost")
    unreal_kills: int = _int("unrealKills")
    vision_score: int = _int("visionScore")
    vision_wards_bought_in_game: int = _int("visionWardsBoughtInGame")
    wards_killed: int = _int("wardsKilled")
    wards_placed: int = _int("wardsPlaced")
    win: bool = _bool("win")


@dataclass
class TeamBan:
    """A champion banned by a team and the turn it was banned in."""

    pick_turn: int = _int("pickTurn")
    champion_id: int = _int("championId")


@dataclass
class Objective:
    """Whether a team took an objective first, and how often."""

    first: bool = _bool("first")
    kills: int = _int("kills")


@dataclass
class Objectives:
    """A team's results for each kind of objective."""

    baron: Objective = json_field("baron", default_factory=Objective)
    champion: Objective = json_field("champion", default_factory=Objective)
    dragon: Objective = json_field("dragon", default_factory=Objective)
    inhibitor: Objective = json_field("inhibitor", default_factory=Objective)
    rift_herald: Objective = json_field("riftHerald", default_factory=Objective)
    tower: Objective = json_field("tower", default_factory=Objective)


@dataclass
class Team:
    """A team in a match: its bans, objectives and result."""

    bans: list[TeamBan] = _list("bans")
    objectives: Objectives = json_field("objectives", default_factory=Objectives)
    team_id: int = _int("teamId")
    win: bool = _bool("win")


@dataclass
class MatchInfo:
    """The game data of a finished match."""

    game_creation: int = _int("gameCreation")
    # Milliseconds before patch 11.20 (no gameEndTimestamp), seconds afterwards.
    game_duration: int = _int("gameDuration")
    game_end_timestamp: int = _int("gameEndTimestamp")
    game_id: int = _int("gameId")
    game_mode: str = _str("gameMode")
    game_name: str = _str("gameName")
    game_start_timestamp: int = _int("gameStartTimestamp")
    game_type: str = _str("gameType")
    game_version: str = _str("gameVersion")
    map_id: int = _int("mapId")
    participants: list[Participant] = _list("participants")
    platform_id: str = _str("platformId")
    queue_id: int = _int("queueId")
    teams: list[Team] = _list("teams")
    tournament_code: str = _str("tournamentCode")

    def get_queue(self, client):
        """Return the queue this match was played in, from a static data client."""
        return client.get_queue(self.queue_id)

    def get_map(self, client):
        """Return the map this match was played on, from a static data client."""
        return client.get_map(self.map_id)

    def get_game_type(self, client):
        """Return the game type of this match, from a static data client."""
        return client.get_game_type(self.game_type)

    def get_game_mode(self, client):
        """Return the game mode of this match, from a static data client."""
        return client.get_game_mode(self.game_mode)


@dataclass
class Match:
    """A finished match: metadata and game data."""

    metadata: MatchMetadata | None = json_field("metadata", default=None)
    info: MatchInfo | None = json_field("info", default=None)


@dataclass
class MatchPosition:
    """A position on the map."""

    x: int = _int("x")
    y: int = _int("y")


@dataclass
class ParticipantFrame:
    """A participant's state at one point of the timeline."""

    total_gold: int = _int("totalGold")
    team_score: int = _int("teamScore")
    participant_id: int = _int("participantId")
    level: int = _int("level")
    current_gold: int = _int("currentGold")
    minions_killed: int = _int("minionsKilled")
    dominion_score: int = _int("dominionScore")
    position: MatchPosition | None = json_field("position", default=None)
    xp: int = _int("xp")
    jungle_minions_killed: int = _int("jungleMinionsKilled")


class MatchEventType(str, Enum):
    """The kinds of events in a match timeline."""

    CHAMPION_KILL = "CHAMPION_KILL"
    WARD_PLACED = "WARD_PLACED"
    WARD_KILL = "WARD_KILL"
    BUILDING_KILL = "BUILDING_KILL"
    ELITE_MONSTER_KILL = "ELITE_MONSTER_KILL"
    ITEM_PURCHASED = "ITEM_PURCHASED"
    ITEM_SOLD = "ITEM_SOLD"
    ITEM_DESTROYED = "ITEM_DESTROYED"
    ITEM_UNDO = "ITEM_UNDO"
    SKILL_LEVEL_UP = "SKILL_LEVEL_UP"
    ASCENDED_EVENT = "ASCENDED_EVENT"
    CAPTURE_POINT = "CAPTURE_POINT"
    PORO_KING_SUMMON = "PORO_KING_SUMMON"


@dataclass
class MatchEvent:
    """An event in a match at a certain timestamp.

    ``type`` is a MatchEventType when the value is known, otherwise the raw string.
    """

    event_type: str = _str("eventType")
    tower_type: str = _str("towerType")
    team_id: int = _int("teamId")
    ascended_type: str = _str("ascendedType")
    killer_id: int = _int("killerId")
    level_up_type: str = _str("levelUpType")
    point_captured: str = _str("pointCaptured")
    assisting_participant_ids: list[int] = _list("assistingParticipantIds")
    ward_type: str = _str("wardType")
    monster_type: str = _str("monsterType")
    type: MatchEventType | str | None = json_field("type", default=None)
    skill_slot: int = _int("skillSlot")
    victim_id: int = _int("victimId")
    timestamp: int = _int("timestamp")
    after_id: int = _int("afterId")
    monster_sub_type: str = _str("monsterSubType")
    lane_type: str = _str("laneType")
    item_id: int = _int("itemId")
    participant_id: int = _int("participantId")
    building_type: str = _str("buildingType")
    creator_id: int = _int("creatorId")
    position: MatchPosition | None = json_field("position", default=None)
    before_id: int = _int("beforeId")


@dataclass
class MatchFrame:
    """A single frame of a match timeline."""

    timestamp: int = _int("timestamp")
    participant_frames: dict[str, ParticipantFrame] = json_field(
        "participantFrames", default_factory=dict
    )
    events: list[MatchEvent] = _list("events")


@dataclass
class MatchTimeline:
    """The timeline frames of a match."""

    frames: list[MatchFrame] = _list("frames")
    interval: int = _int("frameInterval")