"""Path keyed cache for the data behind rendered views."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

_KEY_PREFIX = "view:"


class ViewCache:
    """Cache view data by request path on top of a Flask-Caching ``Cache``.

    ``fetch`` returns the stored value for a path or runs the loader and
    stores its result. ``invalidate`` drops the entry so the next ``fetch``
    runs the loader again.
    """

    def __init__(self, backend, timeout: Optional[int] = None) -> None:
        self.backend = backend
        self.timeout = timeout

    @staticmethod
    def key_for(path: str) -> str:
        return f"{_KEY_PREFIX}{path.rstrip('/') or '/'}"

    def fetch(self, path: str, loader: Callable[[], Any]) -> Any:
        key = self.key_for(path)
        value = self.backend.get(key)
        if value is None:
            logger.debug("View cache miss for %s", path)
            value = loader()
            self.backend.set(key, value, timeout=self.timeout)
        return value

    def invalidate(self, path: str) -> None:
        self.backend.delete(self.key_for(path))
        logger.debug("Invalidated cached view %s", path)
