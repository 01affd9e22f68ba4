"""fishing/states/bite_check.py — Does a fish commit to the lure?

Two clocks run from entry:

  check_duration    when the bite roll happens (exactly once)
  timeout_duration  hard limit; if it elapses first the check is
                    abandoned and the only way out is Idle

The bite roll uses ``clamp01(base × (1 + bite_probability_modifier))``.
A miss gets a second, independent roll: the fish was curious but did
not commit, so the player may go back to Stillness instead of Idle.
Both rolls happen in ``update`` — ``get_next_state`` never draws.
"""

from __future__ import annotations

from fishing.state import (
    FishingState, FishingStateBase, PENDING, TransitionTo, clamp01, reached,
)


class BiteCheckState(FishingStateBase):
    label = FishingState.BITE_CHECK

    def __init__(self, base_bite_probability: float = 0.3,
                 check_duration: float = 0.5,
                 no_bite_return_to_stillness_chance: float = 0.6,
                 timeout_duration: float = 5.0):
        self.base_bite_probability = clamp01(base_bite_probability)
        self.check_duration = max(0.1, check_duration)
        self.no_bite_return_to_stillness_chance = clamp01(
            no_bite_return_to_stillness_chance)
        self.timeout_duration = max(self.check_duration, timeout_duration)

        self._elapsed = 0.0
        self._bite = False
        self._complete = False
        self._timed_out = False
        self._return_to_stillness = False
        self._final_probability = 0.0

    # ── Telemetry ────────────────────────────────────────────────────

    @property
    def elapsed_time(self) -> float:
        return self._elapsed

    @property
    def bite_occurred(self) -> bool:
        return self._bite

    @property
    def check_complete(self) -> bool:
        return self._complete

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    @property
    def final_bite_probability(self) -> float:
        return self._final_probability

    # ── Hooks ────────────────────────────────────────────────────────

    def enter(self, ctx):
        self._elapsed = 0.0
        self._bite = False
        self._complete = False
        self._timed_out = False
        self._return_to_stillness = False
        self._final_probability = 0.0

    def update(self, ctx, dt):
        if self._complete:
            return

        self._elapsed += dt

        if reached(self._elapsed, self.timeout_duration):
            self._timed_out = True
            self._complete = True
            return

        if reached(self._elapsed, self.check_duration):
            self._roll(ctx)

    def _roll(self, ctx):
        self._final_probability = clamp01(
            self.base_bite_probability * (1.0 + ctx.bite_probability_modifier))
        self._bite = ctx.get_random_value() < self._final_probability
        if not self._bite:
            self._return_to_stillness = (
                ctx.get_random_value() < self.no_bite_return_to_stillness_chance)
        self._complete = True

    def get_next_state(self, ctx):
        if not self._complete:
            return PENDING
        if self._timed_out:
            return TransitionTo(FishingState.IDLE)
        if self._bite:
            return TransitionTo(FishingState.HOOK_OPPORTUNITY)
        if self._return_to_stillness:
            return TransitionTo(FishingState.STILLNESS)
        return TransitionTo(FishingState.IDLE)
