"""fishing/states/casting.py — Throwing the line.

The landing point is rolled once on entry and kept after exit so the
drift phase (and any presentation layer) can read where the lure went::

    distance ∈ [min_cast_distance, max_cast_distance]
    angle    ∈ [0°, 360°)
    landing  = lure_position + distance · (cos θ, sin θ)
"""

from __future__ import annotations
import math

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, progress, reached,
)


class CastingState(FishingStateBase):
    label = FishingState.CASTING

    def __init__(self, cast_duration: float = 0.5,
                 min_cast_distance: float = 2.0,
                 max_cast_distance: float = 8.0):
        self.cast_duration = max(0.1, cast_duration)
        self.min_cast_distance = max(0.0, min_cast_distance)
        self.max_cast_distance = max(self.min_cast_distance, max_cast_distance)

        self._elapsed = 0.0
        self._complete = False
        self._landing: tuple[float, float] = (0.0, 0.0)

    # ── Telemetry ────────────────────────────────────────────────────

    @property
    def landing_position(self) -> tuple[float, float]:
        """Where the lure lands.  Stable from ``enter`` until the next cast."""
        return self._landing

    @property
    def cast_progress(self) -> float:
        return progress(self._elapsed, self.cast_duration)

    @property
    def cast_complete(self) -> bool:
        return self._complete

    # ── Hooks ────────────────────────────────────────────────────────

    def enter(self, ctx):
        self._elapsed = 0.0
        self._complete = False

        distance = ctx.get_random_range(self.min_cast_distance,
                                        self.max_cast_distance)
        angle = math.radians(ctx.get_random_range(0.0, 360.0))
        lx, ly = ctx.lure_position
        self._landing = (lx + math.cos(angle) * distance,
                         ly + math.sin(angle) * distance)

    def update(self, ctx, dt):
        self._elapsed += dt
        if reached(self._elapsed, self.cast_duration):
            self._complete = True

    def get_next_state(self, ctx):
        if self._complete:
            return TransitionTo(FishingState.LURE_DRIFT)
        return PENDING
