from collections import OrderedDict

from chart_legends.config import settings

_SENTINEL = object()


class RenderCache:
    """LRU of rendered legend cards. Legend data never changes, so entries do not expire."""

    def __init__(self, max_entries: int = settings.render_cache_size):
        self._store: OrderedDict[str, str | bytes] = OrderedDict()
        self._max_entries = max_entries

    @staticmethod
    def _key(kind: str, template: str, format: str) -> str:
        return f"{kind}:{template}:{format}"

    def get(self, kind: str, template: str, format: str) -> str | bytes | object:
        key = self._key(kind, template, format)
        if key not in self._store:
            return _SENTINEL

        self._store.move_to_end(key)
        return self._store[key]

    def set(self, kind: str, template: str, format: str, data: str | bytes) -> None:
        key = self._key(kind, template, format)

        if key in self._store:
            del self._store[key]

        self._store[key] = data

        while len(self._store) > self._max_entries:
            self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


CACHE_MISS = _SENTINEL
render_cache = RenderCache()
