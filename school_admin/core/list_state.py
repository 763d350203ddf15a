from typing import Awaitable, Callable, Generic, List, TypeVar
from school_admin.utils.logger import logger

T = TypeVar("T")


class ListState(Generic[T]):
    """
    Client-side snapshot of a resource's full collection.

    Every refresh replaces the collection wholesale. Refreshes are numbered; only the
    most recently issued one may write `items` (or raise), so a slow response from an
    older fetch can never overwrite a newer one.
    """

    def __init__(self, name: str = "items"):
        self.name = name
        self.items: List[T] = []
        self.loading = False
        self._issued = 0

    @property
    def latest_sequence(self) -> int:
        return self._issued

    async def refresh(self, fetch: Callable[[], Awaitable[List[T]]]) -> bool:
        """
        Runs `fetch` and stores its result if no newer refresh was started meanwhile.

        Returns True when the result was applied, False when it was discarded as stale.
        Errors from the latest refresh propagate; errors from stale ones are dropped.
        """
        self._issued += 1
        sequence = self._issued
        self.loading = True
        try:
            items = await fetch()
        except Exception:
            if sequence != self._issued:
                logger.info(f"Ignoring failure of superseded {self.name} fetch #{sequence}")
                return False
            self.loading = False
            raise
        if sequence != self._issued:
            logger.info(f"Discarding stale {self.name} response #{sequence} (latest is #{self._issued})")
            return False
        self.items = list(items)
        self.loading = False
        return True
