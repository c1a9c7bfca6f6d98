"""Caching decorator over any breed fetcher."""

import threading

from loguru import logger

from dogbreeds.apis.base import BreedFetcher


class CachingBreedFetcher(BreedFetcher):
    """Breed fetcher that remembers sub breeds fetched by the underlying `fetcher`.

    Breeds are cached by their trimmed lowercase name.
    Failed lookups are NOT cached, so the next call asks `fetcher` again.
    Blank names are never cached either and always go to `fetcher` as is.
    Entries live as long as the instance, nothing is evicted.

    Every call to `fetcher` is counted in `calls_made`, failed ones included.
    Safe to share between threads, but concurrent misses for the same breed
    may all reach `fetcher`, the first result stored wins.
    """

    def __init__(self, fetcher: BreedFetcher):
        if fetcher is None:
            raise ValueError("Underlying fetcher must not be None.")
        self.fetcher = fetcher
        self.__cache: dict[str, tuple[str, ...]] = {}
        self.__calls_made = 0
        # NOTE: guards both the cache and the counter, never held while `fetcher` works
        self.__lock = threading.Lock()

    @property
    def calls_made(self) -> int:
        """Number of calls made to the underlying fetcher."""
        with self.__lock:
            return self.__calls_made

    def get_calls_made(self) -> int:
        return self.calls_made

    @staticmethod
    def _cache_key(breed: str | None) -> str | None:
        if breed is None:
            return None
        return breed.strip().lower()

    def __len__(self) -> int:
        with self.__lock:
            return len(self.__cache)

    def __contains__(self, breed: str | None) -> bool:
        key = self._cache_key(breed)
        with self.__lock:
            return bool(key) and key in self.__cache

    def get_sub_breeds(self, breed: str | None) -> list[str]:
        """Get sub breeds of `breed`, from the cache if possible.

        A new list is returned on every call, changing it doesn't touch the cache.

        Raises:
            BreedNotFoundError: as raised by the underlying fetcher.
        """
        key = self._cache_key(breed)

        with self.__lock:
            if key:
                cached = self.__cache.get(key)
                if cached is not None:
                    logger.debug("Sub breeds cache hit for {!r}", key)
                    return list(cached)
            self.__calls_made += 1

        if not key:
            logger.debug("Not caching blank breed {!r}", breed)
            return list(self.fetcher.get_sub_breeds(breed))

        logger.debug("Sub breeds cache miss for {!r}", key)
        fetched = tuple(self.fetcher.get_sub_breeds(breed))
        with self.__lock:
            # First stored snapshot wins if another thread got here meanwhile
            fetched = self.__cache.setdefault(key, fetched)
        return list(fetched)
