from functools import partial

from flask import Blueprint, current_app, request

from .errors import ConfigurationError, NoGamesError, TransportFailure
from .forms import SuggestFiltersForm
from .steam_api import get_owned_games
from .steam_store_api import fetch_app_details
from .suggester import suggest

api = Blueprint("api", __name__, url_prefix="/api")


def _settings():
    return current_app.extensions["game_suggester"]


def _load_library():
    config = _settings()["config"]
    config.require_credentials()
    games = get_owned_games(config.steam_id64, api_key=config.steam_api_key, timeout=config.request_timeout)
    if not games:
        raise NoGamesError()
    return games


@api.errorhandler(ConfigurationError)
@api.errorhandler(TransportFailure)
def server_error(e):
    return {"error": e.message}, 500


@api.errorhandler(NoGamesError)
def no_games(e):
    return {"error": e.message}, 404


@api.route("/health")
def health():
    return {"status": "ok"}


@api.route("/suggest-game")
def suggest_game():
    form = SuggestFiltersForm(formdata=request.args)
    if not form.validate():
        return {"error": form.error_message()}, 400

    settings = _settings()
    config = settings["config"]
    games = _load_library()

    result = suggest(
        games,
        form.to_profile(),
        fetch_details=partial(fetch_app_details, timeout=config.request_timeout),
        random_source=settings["random_source"],
        max_workers=config.detail_workers,
    )
    return result.to_dict()


@api.route("/games")
def library():
    games = _load_library()

    term = (request.args.get("search") or "").strip().lower()
    if term:
        games = [g for g in games if term in g.name.lower()]
    games = sorted(games, key=lambda g: g.name.lower())

    return {"games": [g.to_dict() for g in games], "count": len(games)}
