#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/scheduling.py
"""Debounced, cancellable comparisons for interactive hosts.

The engine itself is synchronous. Editors and other keystroke-driven hosts
should not re-run it on every change, so :class:`DebouncedComparer` waits
for input to settle, runs the comparison on a timer thread and hands the
result to a callback. Submitting new input aborts any comparison still in
flight; only the result for the latest input is ever delivered.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from splitdiff.api import DiffResult, compare_texts
from splitdiff.constants import DEFAULT_DEBOUNCE_SECONDS
from splitdiff.exceptions import DiffCancelled, SplitDiffError
from splitdiff.options import DiffOptions

logger = logging.getLogger(__name__)

ResultCallback = Callable[[DiffResult], None]
ErrorCallback = Callable[[SplitDiffError], None]


class DebouncedComparer:
    """Run :func:`~splitdiff.api.compare_texts` once input stops changing.

    Parameters
    ----------
    on_result : callable
        Called with the ``DiffResult`` for the most recent submission
    on_error : callable, optional
        Called with engine errors such as ``ResourceLimitExceeded``; when
        omitted, errors are logged
    delay : float, default = DEFAULT_DEBOUNCE_SECONDS
        Seconds of quiet required before comparing
    options : DiffOptions, optional
        Options forwarded to every comparison
    **compare_kwargs
        Extra keyword arguments for ``compare_texts`` (titles, overrides)

    Examples
    --------
    >>> results = []
    >>> comparer = DebouncedComparer(results.append, delay=0.2)
    >>> comparer.submit("a", "b")
    >>> comparer.submit("a", "a")   # replaces the pending comparison
    >>> comparer.flush().has_changes
    False

    """

    def __init__(
        self,
        on_result: ResultCallback,
        *,
        on_error: Optional[ErrorCallback] = None,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        options: Optional[DiffOptions] = None,
        **compare_kwargs: Any,
    ):
        """Initialize the comparer with its callbacks."""
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self.on_result = on_result
        self.on_error = on_error
        self.delay = delay
        self.options = options
        self.compare_kwargs = compare_kwargs

        self._lock = threading.Lock()
        # Held while a result is checked and delivered, and while new work supersedes old
        self._delivery_lock = threading.RLock()
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._cancel_event: Optional[threading.Event] = None
        self._pending: Optional[tuple[str, str]] = None

    @property
    def pending(self) -> bool:
        """True while a submission is waiting for its timer."""
        with self._lock:
            return self._pending is not None

    def submit(self, original_text: str, modified_text: str) -> None:
        """Schedule a comparison, superseding any earlier submission.

        If another thread is delivering a result, this waits until the
        callback returns, so nothing older than this submission is delivered
        once it has been made.
        """
        with self._delivery_lock, self._lock:
            self._supersede()
            generation = self._generation
            cancel_event = threading.Event()
            self._cancel_event = cancel_event
            self._pending = (original_text, modified_text)
            timer = threading.Timer(self.delay, self._fire, args=(generation, cancel_event))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def flush(self) -> Optional[DiffResult]:
        """Run the pending comparison now, on the calling thread.

        Returns
        -------
        DiffResult or None
            The delivered result, or None if nothing was pending or the
            comparison failed

        """
        with self._lock:
            if self._pending is None:
                return None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            generation = self._generation
            cancel_event = self._cancel_event
            texts = self._pending
            self._pending = None
        assert cancel_event is not None
        return self._run(generation, cancel_event, texts)

    def cancel(self) -> None:
        """Drop pending work and abort any comparison in flight."""
        with self._delivery_lock, self._lock:
            self._supersede()
            self._pending = None

    def _supersede(self) -> None:
        # Caller holds the lock
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._cancel_event is not None:
            self._cancel_event.set()
            self._cancel_event = None

    def _fire(self, generation: int, cancel_event: threading.Event) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            texts = self._pending
            self._pending = None
            self._timer = None
        self._run(generation, cancel_event, texts)

    def _is_current(self, generation: int, cancel_event: threading.Event) -> bool:
        with self._lock:
            return generation == self._generation and not cancel_event.is_set()

    def _run(self, generation: int, cancel_event: threading.Event, texts: tuple[str, str]) -> Optional[DiffResult]:
        original_text, modified_text = texts
        try:
            result = compare_texts(
                original_text,
                modified_text,
                self.options,
                cancel_event=cancel_event,
                **self.compare_kwargs,
            )
        except DiffCancelled:
            logger.debug("Discarding cancelled comparison (generation %d)", generation)
            return None
        except SplitDiffError as e:
            with self._delivery_lock:
                if not self._is_current(generation, cancel_event):
                    return None
                if self.on_error is None:
                    logger.warning("Comparison failed: %s", e.message)
                else:
                    self.on_error(e)
            return None

        with self._delivery_lock:
            if not self._is_current(generation, cancel_event):
                logger.debug("Discarding stale comparison (generation %d)", generation)
                return None
            self.on_result(result)
        return result
