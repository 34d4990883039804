from __future__ import annotations

from dataclasses import dataclass, field

from tenacity import RetryCallState, wait_exponential

from analytics.constants import (
    DEFAULT_RETRY_FACTOR,
    DEFAULT_RETRY_INITIAL_DELAY,
    DEFAULT_RETRY_MAX_DELAY,
    DEFAULT_RETRY_MIN_DELAY,
)


@dataclass(frozen=True)
class ExponentialBackoff:
    """
    Retry-delay policy mapping the number of attempts made so far to the
    number of seconds to wait before the next one.

    The delay is ``initial * factor ** attempts`` clamped to
    ``[min_delay, max_delay]``. Instances hold no mutable state, so a single
    policy can be shared by every dispatch worker.
    """

    initial: float = DEFAULT_RETRY_INITIAL_DELAY
    factor: float = DEFAULT_RETRY_FACTOR
    min_delay: float = DEFAULT_RETRY_MIN_DELAY
    max_delay: float = DEFAULT_RETRY_MAX_DELAY
    _wait: wait_exponential = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_wait",
            wait_exponential(
                multiplier=self.initial,
                exp_base=float(self.factor),
                min=self.min_delay,
                max=self.max_delay,
            ),
        )

    def __call__(self, attempts: int) -> float:
        # tenacity counts attempts from 1
        state = RetryCallState(retry_object=None, fn=None, args=(), kwargs={})
        state.attempt_number = max(attempts, 0) + 1
        return self._wait(state)
