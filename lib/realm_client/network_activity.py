from __future__ import annotations

import threading
from typing import Callable

Listener = Callable[[bool], None]


class NetworkActivity:
    """Counts non-silent requests in flight and tells listeners when the
    indicator should turn on (first request) or off (last one finished).

    Listeners run while the lock is held, so notifications arrive in the
    same order as the count changes. A listener may call back into the
    same instance from its own thread.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._count = 0
        self._listeners: list[Listener] = []

    @property
    def in_flight(self) -> int:
        return self._count

    @property
    def active(self) -> bool:
        return self._count > 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, active: bool) -> None:
        for listener in list(self._listeners):
            listener(active)

    def start(self, is_silent: bool = False) -> None:
        if is_silent:
            return
        with self._lock:
            self._count += 1
            if self._count == 1:
                self._notify(True)

    def stop(self, is_silent: bool = False) -> None:
        if is_silent:
            return
        with self._lock:
            if self._count == 0:
                return
            self._count -= 1
            if self._count == 0:
                self._notify(False)


network_activity = NetworkActivity()


def start(is_silent: bool = False) -> None:
    network_activity.start(is_silent)


def stop(is_silent: bool = False) -> None:
    network_activity.stop(is_silent)
