"""fishing/states/lure_drift.py — Lure settling on the water after a cast."""

from __future__ import annotations
import math

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, reached,
)


class LureDriftState(FishingStateBase):
    """Waits at least ``min_drift_time`` and until the lure is nearly still."""

    label = FishingState.LURE_DRIFT

    def __init__(self, velocity_threshold: float = 0.1,
                 min_drift_time: float = 0.5):
        self.velocity_threshold = max(0.01, velocity_threshold)
        self.min_drift_time = max(0.0, min_drift_time)

        self._elapsed = 0.0
        self._settled = False

    @property
    def drift_time(self) -> float:
        return self._elapsed

    @property
    def settled(self) -> bool:
        return self._settled

    def enter(self, ctx):
        self._elapsed = 0.0
        self._settled = False

    def update(self, ctx, dt):
        if self._settled:
            return
        self._elapsed += dt
        if reached(self._elapsed, self.min_drift_time):
            vx, vy = ctx.lure_velocity
            if math.hypot(vx, vy) <= self.velocity_threshold:
                self._settled = True

    def get_next_state(self, ctx):
        if self._settled:
            return TransitionTo(FishingState.STILLNESS)
        return PENDING
