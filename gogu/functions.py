"""Helpers that wrap, delay, repeat or rate-limit function calls."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class RetryError(Exception):
    """Raised when every attempt of a retried call failed.

    ``attempts`` is the number of failed attempts and ``elapsed`` the time in
    seconds spent retrying (0.0 when no delay was involved). The last error
    raised by the callback is chained as ``__cause__``.
    """

    def __init__(self, message: str, attempts: int, elapsed: float = 0.0) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.elapsed = elapsed


def flip(fn: Callable[..., Sequence[T]]) -> Callable[..., list[T]]:
    """Return a function that calls ``fn`` and reverses the result."""

    def flipped(*args: T) -> list[T]:
        return list(reversed(list(fn(*args))))

    return flipped


def delay(seconds: float, fn: Callable[[], Any]) -> threading.Timer:
    """Run ``fn`` after ``seconds``; the returned timer can be cancelled."""
    timer = threading.Timer(seconds, fn)
    timer.daemon = True
    timer.start()
    return timer


def after(n: int, fn: Callable[[], R]) -> Callable[[], R | None]:
    """Return a wrapper that does nothing for the first ``n`` calls.

    From call ``n + 1`` onwards the wrapper invokes ``fn`` and returns its result.
    """
    remaining = n
    lock = threading.Lock()

    def wrapper() -> R | None:
        nonlocal remaining
        with lock:
            due = remaining < 1
            remaining -= 1
        return fn() if due else None

    return wrapper


def before(n: int, fn: Callable[[], R]) -> Callable[[], R | None]:
    """Return a wrapper that invokes ``fn`` on its first ``n`` calls.

    The result of call ``n`` is memoized and returned by every later call.
    If ``n`` is less than one, ``fn`` is never called and None is returned.
    """
    remaining = n
    memo: R | None = None
    lock = threading.Lock()

    def wrapper() -> R | None:
        nonlocal remaining, memo
        with lock:
            remaining -= 1
            if remaining > 0:
                return fn()
            if remaining == 0:
                memo = fn()
            return memo

    return wrapper


def once(fn: Callable[[], R]) -> Callable[[], R]:
    """Return a wrapper that calls ``fn`` once and then returns that result."""
    lock = threading.Lock()
    done = False
    result: Any = None

    def wrapper() -> R:
        nonlocal done, result
        with lock:
            if not done:
                result = fn()
                done = True
            return result

    return wrapper


def retry(value: T, attempts: int, fn: Callable[[T], Any]) -> int:
    """Call ``fn(value)`` up to ``attempts`` times until it stops raising.

    Return the number of failed attempts before the successful one. Raise
    RetryError if every attempt failed and ValueError for a negative count.
    """
    if attempts < 0:
        raise ValueError(
            f"the number of attempts should be a positive number, got {attempts}"
        )
    last: Exception | None = None
    for attempt in range(attempts):
        try:
            fn(value)
        except Exception as exc:  # noqa: BLE001 - any failure triggers a retry
            last = exc
        else:
            return attempt
    if last is None:
        return 0
    raise RetryError(str(last), attempts) from last


def retry_with_delay(
    value: T,
    attempts: int,
    delay: float,
    fn: Callable[[float, T], Any],
) -> tuple[float, int]:
    """Call ``fn(elapsed, value)`` up to ``attempts`` times, sleeping between tries.

    Return ``(elapsed_seconds, failed_attempts)`` on success; raise RetryError
    carrying both figures if every attempt failed.
    """
    start = time.monotonic()
    last: Exception | None = None
    for attempt in range(attempts):
        try:
            fn(time.monotonic() - start, value)
        except Exception as exc:  # noqa: BLE001 - any failure triggers a retry
            last = exc
        else:
            return time.monotonic() - start, attempt
        time.sleep(delay)
    elapsed = time.monotonic() - start
    if last is None:
        return elapsed, 0
    raise RetryError(str(last), attempts, elapsed) from last


class Debouncer:
    """Postpone a call until ``wait`` seconds have passed without another call."""

    def __init__(self, wait: float) -> None:
        self._wait = wait
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def __call__(self, fn: Callable[[], Any]) -> None:
        """Schedule ``fn``, replacing any call still waiting."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._wait, fn)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the scheduled call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class Throttle:
    """Limit how often a consumer loop runs to once per ``wait`` seconds.

    Producers signal work with ``call``; a consumer loops on ``next``, which
    blocks until a signal is due and returns False once ``cancel`` was called.
    With ``trailing`` set, a signal that arrives too early is delivered at the
    end of the current period instead of being dropped.
    """

    def __init__(self, wait: float, trailing: bool = False) -> None:
        self._wait = wait
        self._trailing = trailing
        self._cond = threading.Condition()
        self._last: float | None = None
        self._waiting = False
        self._stop = False

    def _broadcast(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def call(self) -> None:
        """Signal that the throttled work should run."""
        with self._cond:
            if self._waiting or self._stop:
                return
            now = time.monotonic()
            delta = float("inf") if self._last is None else now - self._last
            if delta > self._wait:
                self._waiting = True
                self._cond.notify_all()
            elif self._trailing:
                self._waiting = True
                timer = threading.Timer(self._wait - delta, self._broadcast)
                timer.daemon = True
                timer.start()

    def next(self) -> bool:
        """Block until the work may run; return False once cancelled."""
        with self._cond:
            while not self._waiting and not self._stop:
                self._cond.wait()
            if not self._stop:
                self._waiting = False
                self._last = time.monotonic()
            return not self._stop

    def cancel(self) -> None:
        """Stop the throttle and wake any waiting consumer."""
        with self._cond:
            self._stop = True
            self._cond.notify_all()