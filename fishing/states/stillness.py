"""fishing/states/stillness.py — Lure at rest, building toward a bite check.

A cast press while waiting asks for a micro-twitch.  The twitch request
wins over a reached threshold when both are true on the same frame.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, progress, reached,
)


class StillnessState(FishingStateBase):
    label = FishingState.STILLNESS

    def __init__(self, stillness_threshold: float = 3.0):
        self.stillness_threshold = max(0.1, stillness_threshold)

        self._elapsed = 0.0
        self._twitch_requested = False
        self._threshold_reached = False

    @property
    def stillness_time(self) -> float:
        return self._elapsed

    @property
    def stillness_progress(self) -> float:
        return progress(self._elapsed, self.stillness_threshold)

    @property
    def threshold_reached(self) -> bool:
        return self._threshold_reached

    @property
    def micro_twitch_requested(self) -> bool:
        return self._twitch_requested

    def enter(self, ctx):
        self._elapsed = 0.0
        self._twitch_requested = False
        self._threshold_reached = False

    def update(self, ctx, dt):
        if self._twitch_requested or self._threshold_reached:
            return  # decided; keep the answer stable until exit

        self._elapsed += dt

        # Cast edge stands in for a small rod movement
        if ctx.cast_input_pressed:
            self._twitch_requested = True

        if reached(self._elapsed, self.stillness_threshold):
            self._threshold_reached = True

    def get_next_state(self, ctx):
        if self._twitch_requested:
            return TransitionTo(FishingState.MICRO_TWITCH)
        if self._threshold_reached:
            return TransitionTo(FishingState.BITE_CHECK)
        return PENDING
