from unittest.mock import Mock, patch

import pytest
import requests

from game_suggester.errors import DetailLookupFailure, TransportFailure
from game_suggester.steam_api import get_owned_games
from game_suggester.steam_store_api import fetch_app_details


def _response(payload, status=200):
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status}")
    return resp


@patch("game_suggester.steam_api.requests.get")
def test_owned_games_are_mapped(mock_get):
    mock_get.return_value = _response({"response": {"game_count": 3, "games": [
        {"appid": 620, "name": "Portal 2", "playtime_forever": 125, "img_icon_url": "abc123",
         "playtime_linux_forever": 60, "rtime_last_played": 1700000000},
        {"name": "no appid"},
        {"appid": 440, "name": "Team Fortress 2"},
    ]}})

    games = get_owned_games("76561197960287930", api_key="k", timeout=3)

    assert [g.appid for g in games] == [620, 440]
    portal = games[0]
    assert portal.playtime_forever == 125
    assert portal.playtime_linux_forever == 60
    assert portal.icon_url.endswith("/apps/620/abc123.jpg")
    assert portal.never_played is False
    assert games[1].playtime_forever == 0
    assert games[1].never_played is True

    _, kwargs = mock_get.call_args
    assert kwargs["params"]["steamid"] == "76561197960287930"
    assert kwargs["params"]["include_appinfo"] == 1
    assert kwargs["timeout"] == 3


@patch("game_suggester.steam_api.requests.get")
def test_private_profile_is_an_empty_list(mock_get):
    mock_get.return_value = _response({"response": {}})
    assert get_owned_games("1", api_key="k") == []


@patch("game_suggester.steam_api.requests.get")
def test_http_error_is_a_transport_failure(mock_get):
    mock_get.return_value = _response({}, status=403)
    with pytest.raises(TransportFailure):
        get_owned_games("1", api_key="k")


@patch("game_suggester.steam_api.requests.get")
def test_connection_error_is_a_transport_failure(mock_get):
    mock_get.side_effect = requests.ConnectionError("down")
    with pytest.raises(TransportFailure):
        get_owned_games("1", api_key="k")


@patch("game_suggester.steam_store_api.requests.get")
def test_app_details(mock_get):
    mock_get.return_value = _response({"42": {"success": True, "data": {
        "platforms": {"windows": True, "mac": False, "linux": True},
        "pc_requirements": {"minimum": "<strong>Minimum:</strong> 4 GB RAM", "recommended": "8 GB RAM"},
        "mac_requirements": [],
        "linux_requirements": {"recommended": "16 GB RAM"},
    }}})

    details = fetch_app_details(42)

    assert details.supports("windows") and details.supports("linux")
    assert not details.supports("mac")
    assert details.requirements_text("windows") == "<strong>Minimum:</strong> 4 GB RAM"
    assert details.requirements_text("linux") == "16 GB RAM"
    assert details.requirements_text("mac") == ""
    assert mock_get.call_args.kwargs["params"] == {"appids": 42}


@patch("game_suggester.steam_store_api.requests.get")
def test_unsuccessful_app_details(mock_get):
    mock_get.return_value = _response({"42": {"success": False}})
    with pytest.raises(DetailLookupFailure):
        fetch_app_details(42)


@patch("game_suggester.steam_store_api.requests.get")
def test_app_details_bad_body(mock_get):
    resp = _response(None)
    resp.json.side_effect = ValueError("not json")
    mock_get.return_value = resp
    with pytest.raises(DetailLookupFailure):
        fetch_app_details(42)


@patch("game_suggester.steam_store_api.requests.get")
def test_app_details_timeout(mock_get):
    mock_get.side_effect = requests.Timeout("slow")
    with pytest.raises(DetailLookupFailure):
        fetch_app_details(42)


@pytest.mark.parametrize("payload", [
    None,
    [],
    {"response": {"games": [{"appid": "abc", "name": "Broken"}]}},
    {"response": {"games": ["not a game"]}},
])
@patch("game_suggester.steam_api.requests.get")
def test_unusable_owned_games_body_is_a_transport_failure(mock_get, payload):
    mock_get.return_value = _response(payload)
    with pytest.raises(TransportFailure):
        get_owned_games("1", api_key="k")
