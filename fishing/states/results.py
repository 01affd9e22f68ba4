"""fishing/states/results.py — Caught / Lost display states.

Both states raise ``event_ready`` on entry: a one-shot signal that the
owner should publish the matching domain event now.  Whoever publishes
calls ``clear_event_ready()``; ``exit`` clears it regardless, so a
stale flag never survives into the next visit.  After the display time
both hand back to Idle.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, LostReason, PENDING, TransitionTo,
    progress, reached,
)


class _ResultState(FishingStateBase):
    """Shared display-timer / event-flag behaviour."""

    def __init__(self, display_duration: float):
        self.display_duration = max(0.1, display_duration)
        self._elapsed = 0.0
        self._complete = False
        self._event_ready = False

    @property
    def elapsed_time(self) -> float:
        return self._elapsed

    @property
    def display_progress(self) -> float:
        return progress(self._elapsed, self.display_duration)

    @property
    def display_complete(self) -> bool:
        return self._complete

    @property
    def event_ready(self) -> bool:
        return self._event_ready

    def clear_event_ready(self) -> None:
        self._event_ready = False

    def enter(self, ctx):
        self._elapsed = 0.0
        self._complete = False
        self._event_ready = True

    def update(self, ctx, dt):
        if self._complete:
            return
        self._elapsed += dt
        if reached(self._elapsed, self.display_duration):
            self._complete = True

    def exit(self, ctx):
        self._event_ready = False

    def get_next_state(self, ctx):
        if self._complete:
            return TransitionTo(FishingState.IDLE)
        return PENDING


class CaughtState(_ResultState):
    label = FishingState.CAUGHT

    def __init__(self, display_duration: float = 2.0):
        super().__init__(display_duration)


class LostState(_ResultState):
    """Carries the :class:`LostReason` set by the machine before entry."""

    label = FishingState.LOST

    def __init__(self, display_duration: float = 1.5):
        super().__init__(display_duration)
        self.reason = LostReason.UNKNOWN

    def set_reason(self, reason: LostReason | None) -> None:
        self.reason = reason if reason is not None else LostReason.UNKNOWN

    def exit(self, ctx):
        super().exit(ctx)
        self.reason = LostReason.UNKNOWN
