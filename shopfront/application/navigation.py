"""In-memory routing layer.

Models the parts of browser history the catalog view depends on: the
current path and query string, one-shot navigation intents attached to
an entry, replacing an entry without a reload, and back/forward moves.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Self

import httpx
import structlog

from shopfront.domain.base import ValueObject
from shopfront.domain.filters import NavigationIntent

logger = structlog.get_logger()

LocationListener = Callable[["Location"], None]


@dataclass(frozen=True)
class Location(ValueObject):
    """A history entry.

    Attributes:
        path: Route path, e.g. "/products".
        query: Raw query string without the leading "?".
        intent: Pending one-shot navigation intent, if any.
    """

    path: str = "/"
    query: str = ""
    intent: NavigationIntent | None = None

    @classmethod
    def from_href(cls, href: str, intent: NavigationIntent | None = None) -> Self:
        """Parse a relative href such as "/products?category=c1"."""
        url = httpx.URL(href)
        return cls(
            path=url.path or "/",
            query=url.query.decode("ascii"),
            intent=intent,
        )

    @property
    def params(self) -> httpx.QueryParams:
        """Parsed query parameters."""
        return httpx.QueryParams(self.query)

    @property
    def href(self) -> str:
        """Path plus query string."""
        return f"{self.path}?{self.query}" if self.query else self.path


class Navigator:
    """Browser-like history with one-shot navigation intents.

    Every intent attached through ``push`` or ``replace`` gets a fresh
    generation number. ``acknowledge`` clears an intent only if it is still
    the one on the current entry, so a consumed intent cannot be applied a
    second time by a re-render or a back/forward move.
    """

    def __init__(self, initial_href: str = "/") -> None:
        """Initialize history with a single entry.

        Args:
            initial_href: Href of the first entry.
        """
        self._entries: list[Location] = [Location.from_href(initial_href)]
        self._index = 0
        self._generation = 0
        self._listeners: list[LocationListener] = []

    @property
    def location(self) -> Location:
        """The current history entry."""
        return self._entries[self._index]

    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        """Register a callback run after every location change.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def push(
        self,
        href: str,
        state: Mapping[str, Any] | NavigationIntent | None = None,
    ) -> Location:
        """Navigate to a new entry, dropping any forward history.

        Args:
            href: Target href.
            state: Optional route state payload or intent.

        Returns:
            The new current location.
        """
        location = Location.from_href(href, self._stamp(state))
        del self._entries[self._index + 1 :]
        self._entries.append(location)
        self._index += 1
        logger.debug("Navigated", href=location.href, has_intent=location.intent is not None)
        self._notify()
        return location

    def replace(
        self,
        href: str,
        state: Mapping[str, Any] | NavigationIntent | None = None,
    ) -> Location:
        """Rewrite the current entry without adding history.

        Args:
            href: Replacement href.
            state: Optional route state payload or intent.

        Returns:
            The rewritten current location.
        """
        location = Location.from_href(href, self._stamp(state))
        self._entries[self._index] = location
        logger.debug("Replaced location", href=location.href)
        self._notify()
        return location

    def back(self) -> bool:
        """Move one entry back. Returns False at the start of history."""
        if self._index == 0:
            return False
        self._index -= 1
        self._notify()
        return True

    def forward(self) -> bool:
        """Move one entry forward. Returns False at the end of history."""
        if self._index >= len(self._entries) - 1:
            return False
        self._index += 1
        self._notify()
        return True

    def acknowledge(self, intent: NavigationIntent) -> bool:
        """Mark a navigation intent as consumed.

        The current entry is replaced by its bare path with no state.

        Args:
            intent: The intent that was applied.

        Returns:
            True if the intent was pending and is now cleared, False if it
            had already been consumed or superseded.
        """
        pending = self.location.intent
        if pending is None or pending.generation != intent.generation:
            logger.debug(
                "Ignoring stale intent acknowledgement",
                generation=intent.generation,
            )
            return False
        self.replace(self.location.path)
        return True

    def _stamp(self, state: Mapping[str, Any] | NavigationIntent | None) -> NavigationIntent | None:
        if state is None:
            return None
        self._generation += 1
        if isinstance(state, NavigationIntent):
            return state.stamped(self._generation)
        return NavigationIntent.from_state(state, generation=self._generation)

    def _notify(self) -> None:
        location = self.location
        for listener in list(self._listeners):
            listener(location)
