"""Use case: fill the top-items cache from the listening history source."""

import logging
from concurrent.futures import ThreadPoolExecutor

from spotify_quiz.config import TOP_ITEMS_LIMIT
from spotify_quiz.domain.errors import DataLoadError
from spotify_quiz.domain.model import CATEGORIES, TIME_WINDOWS, TopItem, TopItemsCache
from spotify_quiz.domain.ports import TopItemsSourcePort

logger = logging.getLogger("spotify_quiz.usecases.load_top_items")


class LoadTopItemsUseCase:

    def __init__(self, source: TopItemsSourcePort, limit: int = TOP_ITEMS_LIMIT):
        self.source = source
        self.limit = limit

    def execute(self, cache: TopItemsCache) -> TopItemsCache:
        """Run the six fetches concurrently and fill the cache once all succeed.

        Any failing fetch aborts the load; the cache is left untouched.
        """
        keys = [(category, window) for category in CATEGORIES for window in TIME_WINDOWS]
        results: dict[tuple[str, str], list[TopItem]] = {}

        with ThreadPoolExecutor(max_workers=len(keys), thread_name_prefix="top-items") as pool:
            futures = {
                key: pool.submit(self.source.fetch_top_items, key[0], self.limit, key[1])
                for key in keys
            }
            for key, future in futures.items():
                try:
                    results[key] = list(future.result())
                except Exception as error:
                    raise DataLoadError(f"Could not load top {key[0]} ({key[1]}): {error}") from error

        cache.fill(results)
        logger.info(
            "Top items loaded (%s)",
            ", ".join(f"{c}/{w}={len(items)}" for (c, w), items in results.items()),
        )
        return cache
