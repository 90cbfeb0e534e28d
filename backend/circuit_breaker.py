"""Reusable circuit breaker for guarding against cascading LLM failures."""

import time

from logger import logger
from exceptions import CircuitBreakerOpenError


class CircuitBreaker:
    """
    Circuit breaker that opens after consecutive failures and half-opens after a cooldown.

    Usage:
        cb = CircuitBreaker("summary", threshold=5, cooldown_seconds=60)
        cb.check()           # raises CircuitBreakerOpenError while open
        cb.record_success()  # resets failure counter
        cb.record_failure()  # increments counter, opens if threshold reached

    Once the cooldown has elapsed, ``check`` admits a single trial call and
    rejects the rest until that trial reports back. A success closes the
    breaker; a failure re-opens it for another cooldown. A trial that never
    reports back is replaced by a new one after a further cooldown.
    """

    def __init__(
        self,
        name: str,
        threshold: int = 5,
        cooldown_seconds: float = 60.0,
        error_message: str | None = None,
        clock=time.monotonic,
    ):
        self.name = name
        self.threshold = threshold
        self.cooldown_seconds = cooldown_seconds
        self.error_message = error_message
        self._clock = clock
        self._failure_count = 0
        self._opened_at: float | None = None
        self._trial_started_at: float | None = None

    @property
    def is_open(self) -> bool:
        """True while calls are being rejected (cooling down, or a trial call is in flight)."""
        if self._opened_at is None:
            return False
        if self._trial_started_at is not None:
            return (self._clock() - self._trial_started_at) < self.cooldown_seconds
        return (self._clock() - self._opened_at) < self.cooldown_seconds

    @property
    def is_half_open(self) -> bool:
        return self._opened_at is not None and self._trial_started_at is not None

    @property
    def failure_count(self) -> int:
        return self._failure_count

    def check(self) -> None:
        """Raise CircuitBreakerOpenError if the breaker is open; otherwise admit the call."""
        if self._opened_at is None:
            return
        if self.is_open:
            logger.error(
                "%s circuit breaker open (%s consecutive failures), rejecting call",
                self.name,
                self._failure_count,
            )
            raise CircuitBreakerOpenError(self.error_message)

        self._trial_started_at = self._clock()
        logger.info("%s circuit breaker half-open, allowing one trial call", self.name)

    def record_success(self) -> None:
        """Reset failure counter on success."""
        if self._opened_at is not None:
            logger.info("%s circuit breaker closed", self.name)
        self.reset()

    def record_failure(self) -> None:
        """Increment failure counter; open breaker if threshold reached."""
        self._failure_count += 1
        if self._failure_count >= self.threshold:
            self._opened_at = self._clock()
            self._trial_started_at = None
            logger.error(
                "%s circuit breaker opened after %s consecutive failures (cooldown=%ss)",
                self.name,
                self._failure_count,
                self.cooldown_seconds,
            )

    def reset(self) -> None:
        self._failure_count = 0
        self._opened_at = None
        self._trial_started_at = None
