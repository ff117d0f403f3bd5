import requests

from .errors import DetailLookupFailure
from .models import GameDetails, REQUIREMENTS_KEYS

STEAM_STORE_APPDETAILS = "https://store.steampowered.com/api/appdetails"


def _requirements_block(raw) -> dict:
    # Steam sends [] instead of an object when a game lists nothing
    if not isinstance(raw, dict):
        return {}
    return {k: v for k, v in raw.items() if k in ("minimum", "recommended") and isinstance(v, str)}


def fetch_app_details(appid: int, timeout: int = 15) -> GameDetails:
    """
    Platform flags + raw requirements text for one app, straight from the
    Store appdetails endpoint. Always a fresh request.
    Raises DetailLookupFailure if the store has nothing usable.
    """
    try:
        r = requests.get(
            STEAM_STORE_APPDETAILS,
            params={"appids": appid},
            timeout=timeout
        )
        r.raise_for_status()
        data = (r.json() or {}).get(str(appid), {})
    except (requests.RequestException, ValueError, AttributeError) as e:
        raise DetailLookupFailure(f"appdetails request failed for {appid}: {e}") from e

    if not data.get("success") or not isinstance(data.get("data"), dict):
        raise DetailLookupFailure(f"appdetails has no data for {appid}")

    app = data["data"]
    platforms = app.get("platforms") or {}
    requirements = {}
    for key in REQUIREMENTS_KEYS.values():
        block = _requirements_block(app.get(key))
        if block:
            requirements[key] = block

    return GameDetails(
        appid=appid,
        windows=bool(platforms.get("windows")),
        mac=bool(platforms.get("mac")),
        linux=bool(platforms.get("linux")),
        requirements=requirements,
    )
