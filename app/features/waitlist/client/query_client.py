from typing import Any, Awaitable, Callable, Hashable

_MISSING = object()


class QueryClient:
    """
    Per-session cache of fetched query results.

    Build one and hand it to whoever needs it; mutations call invalidate()
    on the keys they make stale so the next fetch() goes back to the loader.
    """

    def __init__(self):
        self._cache: dict[Hashable, Any] = {}

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._cache.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        self._cache[key] = value

    def has(self, key: Hashable) -> bool:
        return key in self._cache

    async def fetch(self, key: Hashable, loader: Callable[[], Awaitable[Any]]) -> Any:
        if key in self._cache:
            return self._cache[key]
        value = await loader()
        self._cache[key] = value
        return value

    def invalidate(self, key: Hashable) -> bool:
        """Drop one key. Returns whether anything was cached under it."""
        return self._cache.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._cache.clear()
