import threading
from collections.abc import Callable
from typing import Any


class LatestOnly:
    """Keep only the result of the most recently started request.

    Hosts that re-render on every slider tick call :meth:`begin` before each
    conversion and :meth:`publish` after it. A result whose ticket has been
    superseded is dropped; the work itself is never interrupted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0
        self._published = 0
        self._result: Any = None

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest

    def publish(self, ticket: int, result: Any) -> bool:
        with self._lock:
            if ticket != self._latest:
                return False
            self._published = ticket
            self._result = result
            return True

    @property
    def result(self) -> Any:
        with self._lock:
            return self._result

    @property
    def published(self) -> int:
        """Ticket of the stored result, 0 if nothing has been published."""
        with self._lock:
            return self._published

    def run(self, fn: Callable[..., Any], *args, **kwargs) -> tuple[bool, Any]:
        """Run ``fn`` as a new request; returns (published, value)."""
        ticket = self.begin()
        value = fn(*args, **kwargs)
        return self.publish(ticket, value), value
