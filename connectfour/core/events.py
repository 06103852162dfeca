import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

class GameEvents:
    def __init__(self):
        self._on_complete_listeners: List[Callable] = []

    def subscribe_complete(self, callback: Callable):
        self._on_complete_listeners.append(callback)

    def notify_complete(self, match, winner):
        # A failing listener must not stop the others or the round itself
        for listener in self._on_complete_listeners:
            try:
                listener(match, winner)
            except Exception:
                logger.exception("Event Listener Error")
