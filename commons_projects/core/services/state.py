from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from commons_projects.core.schemas.view import ViewModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=ViewModel)
Listener = Callable[[S], None]


class ViewStateStore(Generic[S]):
    """Holds one immutable view-state value and replaces it on each transition.

    After ``teardown()`` every further transition is dropped, so responses that
    arrive for a torn-down view are discarded.
    """

    def __init__(self, initial: S) -> None:
        self._state = initial
        self._listeners: list[Listener] = []
        self._torn_down = False

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def snapshot(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def teardown(self) -> None:
        self._torn_down = True
        self._listeners.clear()

    def _set(self, **changes) -> bool:
        if self._torn_down:
            logger.debug("%s torn down, dropping update %s", type(self).__name__, sorted(changes))
            return False
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)
        return True
