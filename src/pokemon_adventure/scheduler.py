import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional

LOGGER = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledEvent:
    due: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    owner: Optional[Hashable] = field(default=None, compare=False)
    label: str = field(default="", compare=False)


class Scheduler:
    """
    Single-shot delayed events on a virtual clock

    Nothing fires on its own: the presentation layer calls advance() with the
    elapsed wall time (or flush() to skip the pacing entirely). Events fire in
    due-time order, ties broken by scheduling order. Events are keyed to an
    owner so that everything belonging to a torn-down encounter can be dropped
    in one call.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[ScheduledEvent] = []
        self._sequence = 0

    def schedule(self, delay: float, callback: Callable[[], None], owner: Optional[Hashable] = None, label: str = "") -> ScheduledEvent:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        event = ScheduledEvent(due=self.now + delay, sequence=self._sequence, callback=callback, owner=owner, label=label)
        self._sequence += 1
        heapq.heappush(self._queue, event)
        LOGGER.debug("Scheduled %s at t=%.2f (owner=%s)", label or "event", event.due, owner)
        return event

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire every event that falls due.

        Events scheduled by a firing callback also run if they fall due inside
        the same window. Returns the number of events fired.
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance by a negative amount: {seconds}")
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            fired += self._fire_next()
        self.now = target
        return fired

    def flush(self, max_events: int = 1000) -> int:
        """Fire pending events in order until the queue is empty."""
        fired = 0
        while self._queue:
            if fired >= max_events:
                raise RuntimeError(f"Scheduler did not go idle after {max_events} events")
            fired += self._fire_next()
        return fired

    def cancel_owner(self, owner: Hashable) -> int:
        """Drop all pending events for owner. Returns how many were dropped."""
        kept = [event for event in self._queue if event.owner != owner]
        dropped = len(self._queue) - len(kept)
        if dropped:
            heapq.heapify(kept)
            self._queue = kept
            LOGGER.debug("Cancelled %d pending event(s) for owner %s", dropped, owner)
        return dropped

    def pending(self) -> list[ScheduledEvent]:
        return sorted(self._queue)

    def _fire_next(self) -> int:
        event = heapq.heappop(self._queue)
        self.now = max(self.now, event.due)
        LOGGER.debug("Firing %s at t=%.2f", event.label or "event", self.now)
        event.callback()
        return 1
