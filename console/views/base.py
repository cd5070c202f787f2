import logging
from typing import Any, Awaitable, Dict, Optional

from core.errors import ConsoleError

logger = logging.getLogger(__name__)


class PageView:
    """
    State behind one console page.

    The fetched collections are the only state; nothing is patched locally.
    `load()` refetches everything the page needs, and `perform()` runs a
    mutation followed by a full reload. A generation counter makes sure a
    load that finishes after the page was reloaded again, or invalidated,
    cannot overwrite newer state.
    """

    name = "page"

    def __init__(self):
        self.loading = False
        self.error: Optional[str] = None
        self.action_error: Optional[str] = None
        self.loaded = False
        self._generation = 0
        self._in_flight = 0

    @property
    def generation(self) -> int:
        return self._generation

    def invalidate(self) -> None:
        """Page was closed or replaced; drop whatever is still in flight."""
        self._generation += 1

    async def fetch(self) -> Dict[str, Any]:
        raise NotImplementedError

    def apply(self, data: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def load(self) -> bool:
        """Returns False when the result was discarded as stale."""
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        self.loading = True
        try:
            data = await self.fetch()
        except ConsoleError as e:
            if generation != self._generation:
                return False
            logger.warning("Loading %s failed: %s", self.name, e.message)
            # nothing from this load is applied, even the calls that succeeded
            self.error = e.message
            return True
        finally:
            self._in_flight -= 1
            self.loading = self._in_flight > 0

        if generation != self._generation:
            logger.debug("Discarding stale %s load (generation %s)", self.name, generation)
            return False
        self.apply(data)
        self.error = None
        self.loaded = True
        return True

    async def perform(self, action: Awaitable[Any]) -> Any:
        """Run a mutation. On failure the message is kept inline and data stays as it was."""
        try:
            result = await action
        except ConsoleError as e:
            self.action_error = e.message
            raise
        self.action_error = None
        await self.load()
        return result
