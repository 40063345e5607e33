"""In-process event dispatcher for post-commit domain events."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable

from warehouse.domain.events import Event

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], None]


class EventDispatcher:

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[Event], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: Event) -> None:
        logger.debug("Publishing %s", type(event).__name__)
        for handler in self._handlers[type(event)]:
            handler(event)

    def publish_all(self, events: Iterable[Event]) -> None:
        for event in events:
            self.publish(event)
