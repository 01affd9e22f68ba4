"""fishing/states/idle.py — Not fishing; wait for a cast."""

from __future__ import annotations

from fishing.state import FishingState, FishingStateBase, PENDING, TransitionTo


class IdleState(FishingStateBase):
    """Latches the first cast edge and hands over to Casting."""

    label = FishingState.IDLE

    def __init__(self):
        self._cast_requested = False

    @property
    def cast_requested(self) -> bool:
        return self._cast_requested

    def enter(self, ctx):
        self._cast_requested = False

    def update(self, ctx, dt):
        # One-shot latch: a later frame without input does not undo it
        if ctx.cast_input_pressed:
            self._cast_requested = True

    def get_next_state(self, ctx):
        if self._cast_requested:
            return TransitionTo(FishingState.CASTING)
        return PENDING
