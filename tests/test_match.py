import json

import pytest

from riotkit.errors import ApiError, error_for_status
from riotkit.jsonmodel import decode, encode
from riotkit.lol.match import (
    Match,
    MatchEvent,
    MatchEventType,
    MatchInfo,
    MatchMetadata,
    MatchPosition,
    MatchTimeline,
    Objective,
    Objectives,
    Participant,
    ParticipantPerks,
    StatPerks,
    Team,
    TeamBan,
)
from riotkit.static.client import (
    ENDPOINT_GAME_MODES,
    ENDPOINT_GAME_TYPES,
    ENDPOINT_MAPS,
    ENDPOINT_QUEUES,
    Client,
    Response,
)
from riotkit.static.models import GameMode, GameType, Map, Queue


class FakeDoer:
    def __init__(self, payload=None, status=200):
        self.body = json.dumps(payload).encode()
        self.status = status
        self.requests = []

    def do(self, method, url):
        self.requests.append((method, url))
        return Response(self.status, self.body)


def test_get_queue():
    doer = FakeDoer([{"queueId": 1}])
    got = MatchInfo(queue_id=1).get_queue(Client(doer))
    assert got == Queue(id=1)
    assert doer.requests == [("GET", ENDPOINT_QUEUES)]


def test_get_map():
    doer = FakeDoer([{"mapId": 1}])
    got = MatchInfo(map_id=1).get_map(Client(doer))
    assert got == Map(id=1)
    assert doer.requests == [("GET", ENDPOINT_MAPS)]


def test_get_game_type():
    doer = FakeDoer([{"gameType": "type"}])
    got = MatchInfo(game_type="type").get_game_type(Client(doer))
    assert got == GameType(type="type")
    assert doer.requests == [("GET", ENDPOINT_GAME_TYPES)]


def test_get_game_mode():
    doer = FakeDoer([{"gameMode": "type"}])
    got = MatchInfo(game_mode="type").get_game_mode(Client(doer))
    assert got == GameMode(mode="type")
    assert doer.requests == [("GET", ENDPOINT_GAME_MODES)]


def test_get_queue_not_found():
    client = Client(FakeDoer([{"queueId": 1}]))
    with pytest.raises(ApiError) as info:
        MatchInfo(queue_id=2).get_queue(client)
    assert info.value == error_for_status(404)


def test_get_map_unknown_status():
    client = Client(FakeDoer(None, status=999))
    with pytest.raises(ApiError) as info:
        MatchInfo(map_id=1).get_map(client)
    assert info.value == ApiError("unknown error reason", 999)


def test_defaults_are_zero_values():
    info = MatchInfo()
    assert info.participants == []
    assert info.teams == []
    assert info.queue_id == 0
    assert Team().objectives.baron == Objective(first=False, kills=0)
    assert Match() == Match(metadata=None, info=None)


def test_decode_match():
    payload = {
        "metadata": {
            "dataVersion": "2",
            "matchId": "NA1_1",
            "participants": ["a", "b"],
        },
        "info": {
            "gameId": 1,
            "queueId": 420,
            "mapId": 11,
            "gameMode": "CLASSIC",
            "participants": [
                {
                    "championId": 7,
                    "item0": 1001,
                    "timeCCingOthers": 12,
                    "totalTimeCCDealt": 30,
                    "win": True,
                    "perks": {
                        "statPerks": {"defense": 1, "flex": 2, "offense": 3},
                        "styles": [
                            {"style": 8000, "selections": [{"perk": 8005}]}
                        ],
                    },
                }
            ],
            "teams": [
                {
                    "teamId": 100,
                    "win": True,
                    "bans": [{"pickTurn": 1, "championId": 5}],
                    "objectives": {"riftHerald": {"first": True, "kills": 2}},
                }
            ],
            "unknownKey": "ignored",
        },
    }
    match = decode(Match, payload)
    assert match.metadata == MatchMetadata("2", "NA1_1", ["a", "b"])
    participant = match.info.participants[0]
    assert participant.champion_id == 7
    assert participant.item0 == 1001
    assert participant.time_ccing_others == 12
    assert participant.total_time_cc_dealt == 30
    assert participant.win is True
    assert participant.perks.stat_perks == StatPerks(defense=1, flex=2, offense=3)
    assert participant.perks.styles[0].selections[0].perk == 8005
    team = match.info.teams[0]
    assert team.bans == [TeamBan(pick_turn=1, champion_id=5)]
    assert team.objectives.rift_herald == Objective(first=True, kills=2)
    assert team.objectives.dragon == Objective()


def test_encode_uses_json_keys():
    data = encode(Participant(summoner1_id=4, riot_id_name="name"))
    assert data["summoner1Id"] == 4
    assert data["riotIdName"] == "name"
    assert data["perks"] is None


def test_match_round_trip():
    match = Match(
        metadata=MatchMetadata(match_id="EUW1_5"),
        info=MatchInfo(
            game_id=5,
            participants=[
                Participant(
                    kills=3,
                    perks=ParticipantPerks(stat_perks=StatPerks(offense=1)),
                )
            ],
            teams=[Team(team_id=200, objectives=Objectives(tower=Objective(True, 4)))],
        ),
    )
    assert decode(Match, encode(match)) == match


def test_decode_timeline():
    payload = {
        "frameInterval": 60000,
        "frames": [
            {
                "timestamp": 0,
                "participantFrames": {
                    "1": {"participantId": 1, "position": {"x": 10, "y": 20}}
                },
                "events": [
                    {"type": "ITEM_PURCHASED", "itemId": 1055},
                    {"type": "SOMETHING_NEW", "assistingParticipantIds": [2, 3]},
                ],
            }
        ],
    }
    timeline = decode(MatchTimeline, payload)
    assert timeline.interval == 60000
    frame = timeline.frames[0]
    assert frame.participant_frames["1"].position == MatchPosition(x=10, y=20)
    assert frame.events[0].type is MatchEventType.ITEM_PURCHASED
    assert frame.events[0].item_id == 1055
    assert frame.events[1].type == "SOMETHING_NEW"
    assert frame.events[1].assisting_participant_ids == [2, 3]


def test_event_type_round_trip():
    event = MatchEvent(type=MatchEventType.WARD_KILL, position=MatchPosition(1, 2))
    data = encode(event)
    assert data["type"] == "WARD_KILL"
    assert decode(MatchEvent, data) == event


def test_match_event_types_in_order():
    values = [
        "CHAMPION_KILL",
        "WARD_PLACED",
        "WARD_KILL",
        "BUILDING_KILL",
        "ELITE_MONSTER_KILL",
        "ITEM_PURCHASED",
        "ITEM_SOLD",
        "ITEM_DESTROYED",
        "ITEM_UNDO",
        "SKILL_LEVEL_UP",
        "ASCENDED_EVENT",
        "CAPTURE_POINT",
        "PORO_KING_SUMMON",
    ]
    decoded = [decode(MatchEvent, {"type": value}).type for value in values]
    assert decoded == list(MatchEventType)
    assert encode(list(MatchEventType)) == values


def test_decode_wrong_type_raises():
    with pytest.raises(TypeError):
        decode(MatchInfo, {"gameId": "not a number"})