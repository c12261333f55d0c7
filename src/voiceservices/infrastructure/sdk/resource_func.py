"""Resource handler wrapper with a cooperative deadline."""
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Optional


class OperationContext:
    """Deadline for one handler invocation.

    The deadline is cooperative: handlers pass :meth:`remaining` to the
    remote client, which stops waiting once it is exhausted.
    """

    def __init__(self, timeout: timedelta, clock: Callable[[], float] = time.monotonic):
        self.timeout = timeout
        self._clock = clock
        self._deadline = clock() + timeout.total_seconds()

    def remaining(self) -> float:
        """Seconds left before the deadline, never negative."""
        return max(0.0, self._deadline - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


@dataclass(frozen=True)
class ResourceFunc:
    """A resource handler and the deadline it runs under."""
    func: Callable[[OperationContext, Any], Optional[Any]]
    timeout: timedelta

    def __call__(self, metadata: Any) -> Optional[Any]:
        return self.func(OperationContext(self.timeout), metadata)
