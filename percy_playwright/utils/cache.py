import threading
from typing import Any, Dict, Optional


class Cache:
    """
    String-keyed store shared by everything that talks to one browser session.
    Entries live as long as the cache object; nothing is evicted.
    Single reads and writes are atomic, read-then-write pairs are not.
    """
    def __init__(self):
        self._data: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def put(self, key: str, value: Any):
        with self._lock:
            self._data[key] = value

    def clear(self):
        with self._lock:
            self._data.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


_process_cache: Optional[Cache] = None
_process_cache_lock = threading.Lock()


def process_cache() -> Cache:
    """Returns the cache shared by every client in this process, creating it on first use."""
    global _process_cache
    if _process_cache is None:
        with _process_cache_lock:
            if _process_cache is None:
                _process_cache = Cache()
    return _process_cache
