from __future__ import annotations
import logging
import random
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence

from .errors import NoGamesError
from .models import Game, GameDetails, HardwareProfile, SuggestionResult
from .requirements import meets_requirements, parse_requirements

LEAST_PLAYED_BUCKET = 10
FILTER_PREFIX = 50  # caps appdetails lookups per request

# Used to pick requirements text when hardware is given without an OS
DEFAULT_REQUIREMENTS_OS = "windows"

log = logging.getLogger(__name__)

DetailsFetcher = Callable[[int], GameDetails]
RandomSource = Callable[[], float]


def least_played(games: Sequence[Game]) -> List[Game]:
    # sorted() is stable, so ties keep the order Steam gave us
    return sorted(games, key=lambda g: g.playtime_forever)


def fetch_details_for(games: Sequence[Game], fetch_details: DetailsFetcher, max_workers: int = 16) -> Dict[int, GameDetails]:
    """
    Look up details for every game at once. Settles all lookups and returns
    only the ones that worked, keyed by appid; failures are logged and dropped.
    """
    results: Dict[int, GameDetails] = {}
    if not games:
        return results

    workers = max(1, min(len(games), max_workers))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="appdetails") as executor:
        future_map = {executor.submit(fetch_details, g.appid): g.appid for g in games}
        for future in as_completed(future_map):
            appid = future_map[future]
            try:
                results[appid] = future.result()
            except Exception as exc:
                log.warning("Skipping app %s, detail lookup failed: %s", appid, exc)
    return results


def is_eligible(details: GameDetails, filters: HardwareProfile) -> bool:
    if filters.os and not details.supports(filters.os):
        return False

    if filters.has_hardware():
        text = details.requirements_text(filters.os or DEFAULT_REQUIREMENTS_OS)
        if not meets_requirements(parse_requirements(text), filters):
            return False

    return True


def build_pool(
    games: Sequence[Game],
    filters: HardwareProfile,
    fetch_details: Optional[DetailsFetcher] = None,
    max_workers: int = 16,
) -> List[Game]:
    """
    Candidates for a suggestion. Without filters that's the 10 least-played
    games. With filters, the 50 least-played games are checked against their
    store details; if nothing survives we fall back to those 50 unfiltered,
    so a non-empty library always gives a non-empty pool.
    """
    if not games:
        raise NoGamesError()

    ordered = least_played(games)

    if not filters.wants_filtering():
        return ordered[:LEAST_PLAYED_BUCKET]

    if fetch_details is None:
        raise ValueError("fetch_details is required when filters are set")

    prefix = ordered[:FILTER_PREFIX]
    details = fetch_details_for(prefix, fetch_details, max_workers=max_workers)

    pool = [g for g in prefix if g.appid in details and is_eligible(details[g.appid], filters)]
    if not pool:
        log.info("No game matched %s, falling back to %d least played", filters, len(prefix))
        return prefix

    log.debug("%d of %d games eligible", len(pool), len(prefix))
    return pool


def select_game(pool: Sequence[Game], random_source: RandomSource = random.random) -> Game:
    # random_source returns a float in [0, 1), like random.random
    index = int(random_source() * len(pool))
    return pool[min(index, len(pool) - 1)]


def suggest(
    games: Sequence[Game],
    filters: HardwareProfile,
    fetch_details: Optional[DetailsFetcher] = None,
    random_source: RandomSource = random.random,
    max_workers: int = 16,
) -> SuggestionResult:
    pool = build_pool(games, filters, fetch_details, max_workers=max_workers)
    return SuggestionResult(
        suggestion=select_game(pool, random_source),
        filtered_by_os=filters.os is not None,
        requirements_checked=filters.has_hardware(),
    )
