"""Wall-clock timing for synchronous computations."""

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TimedComputation(Generic[T]):
    """Result of a computation paired with how long it took."""

    result: T
    elapsed: float  # seconds

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed * 1000


def timed(fn: Callable[[], T]) -> TimedComputation[T]:
    """Run ``fn`` and measure its wall-clock duration.

    Exceptions raised by ``fn`` propagate unchanged.
    """
    start = time.perf_counter()
    result = fn()
    return TimedComputation(result=result, elapsed=time.perf_counter() - start)
