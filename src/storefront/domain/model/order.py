"""Order subject and the observer contract it broadcasts to.

An Order holds plain references to its observers but does not own them:
the same customer can be attached to several orders, and detaching only
forgets the reference.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class OrderObserver(ABC):

    @abstractmethod
    def receive(self, message: str) -> None:
        """Handle a notification pushed by an order."""


class Order:
    """Subject in the observer pattern.

    Observers are notified synchronously, in attachment order. Attaching
    the same observer twice notifies it twice. An observer that raises
    stops the broadcast and the error reaches the caller.
    """

    PROCESSED_MESSAGE = "Your order has been processed."

    def __init__(self) -> None:
        self._observers: list[OrderObserver] = []

    @property
    def observers(self) -> tuple[OrderObserver, ...]:
        return tuple(self._observers)

    def attach(self, observer: OrderObserver) -> None:
        self._observers.append(observer)

    def detach(self, observer: OrderObserver) -> None:
        """Remove the first matching observer; no-op if it was never attached."""
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.debug("detach ignored, observer %r not attached", observer)

    def process(self) -> None:
        logger.debug("Broadcasting to %d observer(s)", len(self._observers))
        for observer in list(self._observers):
            observer.receive(self.PROCESSED_MESSAGE)
