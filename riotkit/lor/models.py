"""Ranked players of the card game's leaderboards."""

from __future__ import annotations

from dataclasses import dataclass

from riotkit.jsonmodel import json_field


@dataclass
class Player:
    """A ranked player: name, leaderboard rank and league points."""

    name: str = json_field("name", default="")
    rank: int = json_field("rank", default=0)
    league_points: int = json_field("lp", default=0)