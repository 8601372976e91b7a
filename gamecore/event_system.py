"""Named events with case-insensitive names and consumable callbacks."""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Optional

from .named_strings import NamedStrings

logger = logging.getLogger(__name__)

EventArgs = NamedStrings
EventCallback = Callable[[EventArgs], bool]


class EventSystem:
    """Dispatches named events to subscribed callbacks.

    Event names are compared without regard to case. Callbacks run in the
    order they subscribed; a callback that returns True consumes the event
    and stops the remaining callbacks from running.
    """

    def __init__(self) -> None:
        # Lower-cased name -> (name as first subscribed, subscriber slots).
        self._subscriptions: dict[str, tuple[str, list[Optional[EventCallback]]]] = {}

    def subscribe(self, event_name: str, func: EventCallback) -> None:
        """Add ``func`` to the subscribers of ``event_name``."""
        _, subscribers = self._subscriptions.setdefault(event_name.lower(), (event_name, []))
        subscribers.append(func)

    def unsubscribe(self, event_name: str, func: EventCallback) -> None:
        """Remove every subscription of ``func`` to ``event_name``."""
        entry = self._subscriptions.get(event_name.lower())
        if entry is None:
            return
        subscribers = entry[1]
        subscribers[:] = [None if sub is not None and sub == func else sub for sub in subscribers]

    def fire_event(self, event_name: str, args: EventArgs | None = None) -> int:
        """Call the subscribers of ``event_name`` until one consumes it.

        Returns the number of subscription slots the event has, or 0 when
        nobody ever subscribed to it.
        """
        logger.debug('Firing event "%s"', event_name)
        entry = self._subscriptions.get(event_name.lower())
        if entry is None:
            return 0
        if args is None:
            args = NamedStrings()
        subscribers = entry[1]
        count = len(subscribers)
        for subscriber in itertools.islice(subscribers, count):
            if subscriber is not None and subscriber(args):
                break
        return count

    def registered_event_names(self) -> list[str]:
        """Names of all events ever subscribed to, ordered without regard to case."""
        return [self._subscriptions[key][0] for key in sorted(self._subscriptions)]