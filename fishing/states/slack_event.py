"""fishing/states/slack_event.py — Standalone slack challenge.

Same rules as the slack handling inside :class:`ReelingState`, as a
state of its own: let go of the reel for ``required_release_duration``
in one unbroken stretch to clear it.  Any hold restarts that stretch,
and still holding once ``max_slack_duration`` has passed snaps the line.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, LostReason, PENDING, TransitionTo,
    progress, reached,
)


class SlackEventState(FishingStateBase):
    label = FishingState.SLACK_EVENT

    def __init__(self, max_slack_duration: float = 1.5,
                 required_release_duration: float = 0.3):
        self.max_slack_duration = max(0.5, max_slack_duration)
        self.required_release_duration = max(0.1, required_release_duration)

        self._elapsed = 0.0
        self._release = 0.0
        self._cleared = False
        self._snapped = False

    @property
    def slack_progress(self) -> float:
        return progress(self._elapsed, self.max_slack_duration)

    @property
    def release_time(self) -> float:
        return self._release

    @property
    def release_progress(self) -> float:
        return progress(self._release, self.required_release_duration)

    @property
    def slack_cleared(self) -> bool:
        return self._cleared

    @property
    def line_snapped(self) -> bool:
        return self._snapped

    def enter(self, ctx):
        self._elapsed = 0.0
        self._release = 0.0
        self._cleared = False
        self._snapped = False

    def update(self, ctx, dt):
        if self._cleared or self._snapped:
            return

        self._elapsed += dt

        if not ctx.reel_input_held:
            self._release += dt
            if reached(self._release, self.required_release_duration):
                self._cleared = True
        else:
            self._release = 0.0
            if reached(self._elapsed, self.max_slack_duration):
                self._snapped = True

    def get_next_state(self, ctx):
        if self._cleared:
            return TransitionTo(FishingState.REELING)
        if self._snapped:
            return TransitionTo(FishingState.LOST, LostReason.SLACK_EVENT_FAILURE)
        return PENDING
