"""Admin operations: hit metrics and development reset."""

import logging

from app.errors import ForbiddenError
from app.repositories.memory import InMemoryStore

logger = logging.getLogger(__name__)


class HitCounter:
    """Counts requests served by the static file server."""

    def __init__(self) -> None:
        self.hits = 0

    def increment(self) -> None:
        self.hits += 1

    def reset(self) -> None:
        self.hits = 0


class AdminService:
    def __init__(self, store: InMemoryStore, counter: HitCounter, platform: str) -> None:
        self._store = store
        self._counter = counter
        self._platform = platform

    def metrics_page(self) -> str:
        return (
            "<html>\n"
            "  <body>\n"
            "    <h1>Welcome, Chirpy Admin</h1>\n"
            f"    <p>Chirpy has been visited {self._counter.hits} times!</p>\n"
            "  </body>\n"
            "</html>\n"
        )

    def reset(self) -> None:
        if self._platform != "dev":
            raise ForbiddenError("Reset is only allowed on the dev platform")
        self._store.reset()
        self._counter.reset()
        logger.warning("admin.reset platform=%s", self._platform)
