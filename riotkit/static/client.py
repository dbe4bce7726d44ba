"""Cached access to static game data published alongside the API."""

from __future__ import annotations

import json
import logging
import threading
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar

from riotkit.errors import error_for_status
from riotkit.jsonmodel import decode
from riotkit.static.models import GameMode, GameType, Map, Queue, Season

STATIC_DATA_BASE_URL = "https://static.developer.riotgames.com/docs/lol"
ENDPOINT_SEASONS = STATIC_DATA_BASE_URL + "/seasons.json"
ENDPOINT_QUEUES = STATIC_DATA_BASE_URL + "/queues.json"
ENDPOINT_MAPS = STATIC_DATA_BASE_URL + "/maps.json"
ENDPOINT_GAME_MODES = STATIC_DATA_BASE_URL + "/gameModes.json"
ENDPOINT_GAME_TYPES = STATIC_DATA_BASE_URL + "/gameTypes.json"

_ENDPOINTS = {
    "seasons": ENDPOINT_SEASONS,
    "queues": ENDPOINT_QUEUES,
    "maps": ENDPOINT_MAPS,
    "gameModes": ENDPOINT_GAME_MODES,
    "gameTypes": ENDPOINT_GAME_TYPES,
}

T = TypeVar("T")


@dataclass(frozen=True)
class Response:
    """An HTTP response: status code and raw body."""

    status_code: int
    body: bytes = b""


class _Doer(Protocol):
    def do(self, method: str, url: str) -> Response: ...


class UrllibDoer:
    """Performs HTTP requests with the standard library."""

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout

    def do(self, method, url):
        """Send a request and return its response, including error statuses."""
        request = urllib.request.Request(url, method=method)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                return Response(resp.status, resp.read())
        except urllib.error.HTTPError as err:
            try:
                body = err.read()
            finally:
                err.close()
            return Response(err.code, body)


class Client:
    """Static data client; each kind of data is fetched once and then cached."""

    def __init__(self, doer=None, logger=None):
        self._doer: _Doer = doer if doer is not None else UrllibDoer()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._locks = {key: threading.Lock() for key in _ENDPOINTS}
        self._cache: dict[str, tuple[Any, ...]] = {}

    def _get_into(self, endpoint: str, target_type: Any) -> Any:
        response = self._doer.do("GET", endpoint)
        if not 200 <= response.status_code <= 299:
            error = error_for_status(response.status_code)
            self._logger.debug("request to %s failed: %s", endpoint, error)
            raise error
        return decode(target_type, json.loads(response.body))

    def _get_all(self, key: str, item_type: type[T]) -> list[T]:
        with self._locks[key]:
            if key not in self._cache:
                items = self._get_into(_ENDPOINTS[key], list[item_type])
                self._cache[key] = tuple(items)
            items = self._cache[key]
        return list(items)

    @staticmethod
    def _find(items: list[T], predicate: Callable[[T], bool]) -> T:
        found = next((item for item in items if predicate(item)), None)
        if found is None:
            raise error_for_status(404)
        return found

    def get_seasons(self):
        """Return all seasons."""
        return self._get_all("seasons", Season)

    def get_season(self, season_id):
        """Return the season with the given ID; raise a not-found ApiError otherwise."""
        return self._find(self.get_seasons(), lambda s: s.id == season_id)

    def get_queues(self):
        """Return all queues."""
        return self._get_all("queues", Queue)

    def get_queue(self, queue_id):
        """Return the queue with the given ID; raise a not-found ApiError otherwise."""
        return self._find(self.get_queues(), lambda q: q.id == queue_id)

    def get_maps(self):
        """Return all maps."""
        return self._get_all("maps", Map)

    def get_map(self, map_id):
        """Return the map with the given ID; raise a not-found ApiError otherwise."""
        return self._find(self.get_maps(), lambda m: m.id == map_id)

    def get_game_modes(self):
        """Return all game modes."""
        return self._get_all("gameModes", GameMode)

    def get_game_mode(self, mode):
        """Return the named game mode; raise a not-found ApiError otherwise."""
        return self._find(self.get_game_modes(), lambda m: m.mode == mode)

    def get_game_types(self):
        """Return all game types."""
        return self._get_all("gameTypes", GameType)

    def get_game_type(self, game_type):
        """Return the named game type; raise a not-found ApiError otherwise."""
        return self._find(self.get_game_types(), lambda t: t.type == game_type)

    def clear_caches(self):
        """Forget all cached data so the next call fetches it again."""
        self._cache = {}