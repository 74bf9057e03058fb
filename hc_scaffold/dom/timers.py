"""Single-threaded timer queue standing in for the browser's setTimeout."""

import heapq
import itertools
from typing import Any, Callable, List, Tuple


class Timer:
    """Handle for a scheduled callback."""

    def __init__(self, when: float, callback: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = " cancelled" if self.cancelled else ""
        return f"<Timer at {self.when:.3f}{state}>"


class TimerQueue:
    """Callbacks ordered by due time on a virtual clock.

    Time only moves when :meth:`advance` is called, so a burst of scheduled
    work is fully deterministic. Callbacks run one at a time; an exception
    raised by a callback propagates out of :meth:`advance`.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._heap: List[Tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer in self._heap if not timer.cancelled)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Timer:
        timer = Timer(self._now + max(delay, 0.0), callback, args)
        heapq.heappush(self._heap, (timer.when, next(self._seq), timer))
        return timer

    def cancel(self, timer: Timer) -> None:
        timer.cancel()

    def clear(self) -> None:
        """Drop every pending callback (page unload)."""
        for _, _, timer in self._heap:
            timer.cancel()
        self._heap = []

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns
        -------
        int
            Number of callbacks run.
        """
        deadline = self._now + seconds
        ran = 0
        while self._heap and self._heap[0][0] <= deadline:
            when, _, timer = heapq.heappop(self._heap)
            if timer.cancelled:
                continue
            self._now = when
            ran += 1
            timer.callback(*timer.args)
        self._now = deadline
        return ran

    def run_pending(self) -> int:
        """Run callbacks already due without moving the clock."""
        return self.advance(0.0)
