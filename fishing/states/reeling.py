"""fishing/states/reeling.py — The fight.

Line tension is a scalar in ``[0, max_tension]`` that starts at 30 % of
the ceiling.  Each frame, until the fight is decided:

  1. tension   held → +inc·dt (+ 0.5·inc·dt·struggle), released → −dec·dt
  2. snap      tension at the ceiling breaks the line
  3. escape    tension at/below the escape threshold with the reel
               released: escape chance this frame is
               ``(1 − tension / threshold) · dt`` — a brief dip rarely
               loses the fish, a long one usually does
  4. progress  held and below 90 % of the ceiling → progress += rate·dt;
               reaching 1.0 lands the fish
  5. slack     every ``slack_event_check_interval`` seconds roll
               ``chance · (0.5 + tension / max)`` to start a slack event

During a slack event the normal loop pauses.  Releasing the reel for
``slack_release_duration`` clears it and gives back 10 % of the
ceiling; holding instead drives tension up at twice the normal rate and
can snap the line.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, LostReason, PENDING, TransitionTo,
    clamp, clamp01, reached,
)

START_TENSION_FRACTION = 0.3
PROGRESS_TENSION_CEILING = 0.9      # no reel progress above this fraction
STRUGGLE_TENSION_FACTOR = 0.5
SLACK_TENSION_REBATE = 0.1          # fraction of max returned on a clear
SLACK_HOLD_MULTIPLIER = 2.0


class ReelingState(FishingStateBase):
    label = FishingState.REELING

    def __init__(self, tension_increase_rate: float = 0.5,
                 tension_decrease_rate: float = 0.3,
                 max_tension: float = 1.0,
                 progress_per_second: float = 0.2,
                 slack_event_chance: float = 0.15,
                 slack_event_check_interval: float = 2.0,
                 fish_escape_threshold: float = 0.1,
                 slack_release_duration: float = 0.3):
        self.tension_increase_rate = max(0.1, tension_increase_rate)
        self.tension_decrease_rate = max(0.1, tension_decrease_rate)
        self.max_tension = max(0.1, max_tension)
        self.progress_per_second = max(0.01, progress_per_second)
        self.slack_event_chance = clamp01(slack_event_chance)
        self.slack_event_check_interval = max(0.5, slack_event_check_interval)
        self.fish_escape_threshold = clamp(fish_escape_threshold, 0.0,
                                           self.max_tension * 0.5)
        self.slack_release_duration = max(0.1, slack_release_duration)

        self._tension = 0.0
        self._progress = 0.0
        self._since_slack_check = 0.0
        self._slack = False
        self._slack_release = 0.0
        self._snapped = False
        self._snapped_in_slack = False
        self._escaped = False
        self._caught = False

    # ── Telemetry ────────────────────────────────────────────────────

    @property
    def current_tension(self) -> float:
        return self._tension

    @property
    def tension_fraction(self) -> float:
        return self._tension / self.max_tension

    @property
    def reel_progress(self) -> float:
        return self._progress

    @property
    def slack_event_triggered(self) -> bool:
        return self._slack

    @property
    def slack_release_time(self) -> float:
        return self._slack_release

    @property
    def line_snapped(self) -> bool:
        return self._snapped

    @property
    def fish_escaped(self) -> bool:
        return self._escaped

    @property
    def fish_caught(self) -> bool:
        return self._caught

    @property
    def resolved(self) -> bool:
        return self._snapped or self._escaped or self._caught

    # ── Hooks ────────────────────────────────────────────────────────

    def enter(self, ctx):
        self._tension = self.max_tension * START_TENSION_FRACTION
        self._progress = 0.0
        self._since_slack_check = 0.0
        self._slack = False
        self._slack_release = 0.0
        self._snapped = False
        self._snapped_in_slack = False
        self._escaped = False
        self._caught = False

    def update(self, ctx, dt):
        if self.resolved:
            return

        if self._slack:
            self._update_slack(ctx, dt)
            return

        held = ctx.reel_input_held
        self._update_tension(ctx, held, dt)

        if self._tension >= self.max_tension:
            self._snapped = True
            return

        if (not held and self._tension <= self.fish_escape_threshold
                and self.fish_escape_threshold > 0.0):
            escape_chance = 1.0 - self._tension / self.fish_escape_threshold
            if ctx.get_random_value() < escape_chance * dt:
                self._escaped = True
                return

        if held and self._tension < self.max_tension * PROGRESS_TENSION_CEILING:
            self._progress = clamp01(self._progress + self.progress_per_second * dt)
            if self._progress >= 1.0:
                self._caught = True
                return

        self._check_slack(ctx, dt)

    def _update_tension(self, ctx, held: bool, dt: float):
        if held:
            rise = self.tension_increase_rate * dt
            rise += (ctx.fish_struggle_intensity * self.tension_increase_rate
                     * dt * STRUGGLE_TENSION_FACTOR)
            self._tension += rise
        else:
            self._tension -= self.tension_decrease_rate * dt
        self._tension = clamp(self._tension, 0.0, self.max_tension)

    def _check_slack(self, ctx, dt: float):
        self._since_slack_check += dt
        if not reached(self._since_slack_check, self.slack_event_check_interval):
            return
        self._since_slack_check = 0.0

        chance = self.slack_event_chance * (0.5 + self.tension_fraction)
        if ctx.get_random_value() < chance:
            self._slack = True
            self._slack_release = 0.0

    def _update_slack(self, ctx, dt: float):
        if not ctx.reel_input_held:
            self._slack_release += dt
            if reached(self._slack_release, self.slack_release_duration):
                self._slack = False
                self._slack_release = 0.0
                self._tension = max(
                    0.0, self._tension - self.max_tension * SLACK_TENSION_REBATE)
            return

        # Reeling through the slack: release counter starts over
        self._slack_release = 0.0
        self._tension = min(
            self.max_tension,
            self._tension + self.tension_increase_rate * SLACK_HOLD_MULTIPLIER * dt)
        if self._tension >= self.max_tension:
            self._snapped = True
            self._snapped_in_slack = True

    def get_next_state(self, ctx):
        if self._caught:
            return TransitionTo(FishingState.CAUGHT)
        if self._snapped:
            reason = (LostReason.SLACK_EVENT_FAILURE if self._snapped_in_slack
                      else LostReason.LINE_SNAPPED)
            return TransitionTo(FishingState.LOST, reason)
        if self._escaped:
            return TransitionTo(FishingState.LOST, LostReason.FISH_ESCAPED)
        return PENDING
