"""fishing/states/micro_twitch.py — Short rod twitch, then back to waiting."""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, progress, reached,
)


class MicroTwitchState(FishingStateBase):
    label = FishingState.MICRO_TWITCH

    def __init__(self, twitch_duration: float = 0.2):
        self.twitch_duration = max(0.05, twitch_duration)
        self._elapsed = 0.0
        self._complete = False

    @property
    def twitch_progress(self) -> float:
        return progress(self._elapsed, self.twitch_duration)

    @property
    def twitch_complete(self) -> bool:
        return self._complete

    def enter(self, ctx):
        self._elapsed = 0.0
        self._complete = False

    def update(self, ctx, dt):
        self._elapsed += dt
        if reached(self._elapsed, self.twitch_duration):
            self._complete = True

    def get_next_state(self, ctx):
        if self._complete:
            return TransitionTo(FishingState.STILLNESS)
        return PENDING
