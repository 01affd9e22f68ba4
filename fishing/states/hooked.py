"""fishing/states/hooked.py — Hook-set beat before the fight starts."""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, progress, reached,
)


class HookedState(FishingStateBase):
    """Guarantees the hook-set feedback at least ``hook_set_duration``."""

    label = FishingState.HOOKED

    def __init__(self, hook_set_duration: float = 0.3):
        self.hook_set_duration = max(0.1, hook_set_duration)
        self._elapsed = 0.0
        self._complete = False

    @property
    def hook_set_progress(self) -> float:
        return progress(self._elapsed, self.hook_set_duration)

    @property
    def hook_set_complete(self) -> bool:
        return self._complete

    def enter(self, ctx):
        self._elapsed = 0.0
        self._complete = False

    def update(self, ctx, dt):
        self._elapsed += dt
        if reached(self._elapsed, self.hook_set_duration):
            self._complete = True

    def get_next_state(self, ctx):
        if self._complete:
            return TransitionTo(FishingState.REELING)
        return PENDING
