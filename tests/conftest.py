import pytest

from game_suggester import create_app
from game_suggester.config import Config
from game_suggester.models import Game, GameDetails


@pytest.fixture
def config():
    return Config(steam_api_key="test_key", steam_id64="12345678901234567", detail_workers=4)


@pytest.fixture
def app(config):
    """App whose random source always returns 0, so the first pool entry wins."""
    return create_app(config, random_source=lambda: 0.0)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_game():
    def _make(appid, playtime=0, name=None):
        return Game(appid=appid, name=name or f"Game {appid}", playtime_forever=playtime)
    return _make


@pytest.fixture
def details_source():
    """
    Builds a fetch_details callable from {appid: GameDetails}. Appids that
    aren't in the mapping fail the way a bad store lookup would.
    """
    def _build(mapping):
        calls = []

        def fetch(appid, timeout=15):
            calls.append(appid)
            if appid not in mapping:
                raise RuntimeError(f"lookup failed for {appid}")
            return mapping[appid]

        fetch.calls = calls
        return fetch
    return _build


@pytest.fixture
def linux_details():
    def _make(appid, linux=True, minimum=None):
        requirements = {"linux_requirements": {"minimum": minimum}} if minimum else {}
        return GameDetails(appid=appid, linux=linux, requirements=requirements)
    return _make
