import logging
import requests

from .errors import TransportFailure
from .models import Game

STEAM_API_BASE = "https://api.steampowered.com"

log = logging.getLogger(__name__)


def get_owned_games(steamid64: str, api_key: str, timeout: int = 15) -> list[Game]:
    """
    Owned games for one account, in the order Steam returns them.
    An empty list is a normal answer (private profile / private game details).
    """
    url = f"{STEAM_API_BASE}/IPlayerService/GetOwnedGames/v1/"
    params = {
        "key": api_key,
        "steamid": steamid64,
        "include_appinfo": 1,
        "include_played_free_games": 1,
    }
    try:
        r = requests.get(url, params=params, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        log.error("GetOwnedGames failed for %s: %s", steamid64, e)
        raise TransportFailure() from e

    try:
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        games = (data.get("response") or {}).get("games", []) or []
        return [Game.from_api(g) for g in games if g.get("appid") is not None]
    except (AttributeError, TypeError, ValueError) as e:
        log.error("GetOwnedGames returned an unusable body for %s: %s", steamid64, e)
        raise TransportFailure() from e
