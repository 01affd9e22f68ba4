"""fishing/states/hook_opportunity.py — The strike window.

    0 ─── early ───┬──────────── window ───────────┐
      input here   │  input here sets the hook     │ no input by here
      = EARLY_HOOK │                               │ = MISSED_HOOK

The cast button doubles as the hook action.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, LostReason, PENDING, TransitionTo,
    clamp, progress, reached,
)


class HookOpportunityState(FishingStateBase):
    label = FishingState.HOOK_OPPORTUNITY

    def __init__(self, window_duration: float = 0.8,
                 early_input_penalty_window: float = 0.1):
        self.window_duration = max(0.1, window_duration)
        self.early_input_penalty_window = clamp(
            early_input_penalty_window, 0.0, self.window_duration * 0.5)

        self._elapsed = 0.0
        self._received = False
        self._expired = False
        self._early = False

    # ── Telemetry ────────────────────────────────────────────────────

    @property
    def elapsed_time(self) -> float:
        return self._elapsed

    @property
    def window_progress(self) -> float:
        return progress(self._elapsed, self.window_duration)

    @property
    def hook_input_received(self) -> bool:
        return self._received

    @property
    def window_expired(self) -> bool:
        return self._expired

    @property
    def early_input_penalty(self) -> bool:
        return self._early

    # ── Hooks ────────────────────────────────────────────────────────

    def enter(self, ctx):
        self._elapsed = 0.0
        self._received = False
        self._expired = False
        self._early = False

    def update(self, ctx, dt):
        if self._received or self._expired:
            return

        self._elapsed += dt

        if ctx.cast_input_pressed:
            self._received = True
            if self._elapsed < self.early_input_penalty_window:
                self._early = True
        elif reached(self._elapsed, self.window_duration):
            self._expired = True

    def get_next_state(self, ctx):
        if self._expired:
            return TransitionTo(FishingState.LOST, LostReason.MISSED_HOOK)
        if self._received:
            if self._early:
                return TransitionTo(FishingState.LOST, LostReason.EARLY_HOOK)
            return TransitionTo(FishingState.HOOKED)
        return PENDING
