"""fishing/state.py — State labels, transition results, and the state interface.

Every concrete state in ``fishing.states`` subclasses
:class:`FishingStateBase` and overrides the four hooks::

    class MyState(FishingStateBase):
        def enter(self, ctx):
            # reset every private timer / flag
            ...

        def update(self, ctx, dt):
            # dt is seconds since last frame; never blocks
            ...

        def exit(self, ctx):
            # clear one-shot flags
            ...

        def get_next_state(self, ctx):
            # pure: PENDING until resolved, then a stable TransitionTo
            return PENDING

States never talk to each other.  They only return a
:class:`FishingState` label and the machine does the swap.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from fishing.context import FishingContext


# ── Labels ──────────────────────────────────────────────────────────

class FishingState(Enum):
    """Every state the machine can be in.

    Rough flow: Idle → Casting → LureDrift → Stillness ⇄ MicroTwitch →
    BiteCheck → HookOpportunity → Hooked → Reeling ⇄ SlackEvent →
    Caught / Lost → Idle.
    """
    IDLE             = "idle"
    CASTING          = "casting"
    LURE_DRIFT       = "lure_drift"
    STILLNESS        = "stillness"
    MICRO_TWITCH     = "micro_twitch"
    BITE_CHECK       = "bite_check"
    HOOK_OPPORTUNITY = "hook_opportunity"
    HOOKED           = "hooked"
    REELING          = "reeling"
    SLACK_EVENT      = "slack_event"
    LOST             = "lost"
    CAUGHT           = "caught"

    def __str__(self):
        return self.name.title().replace("_", "")


class LostReason(Enum):
    """Why the encounter ended in the Lost state."""
    UNKNOWN             = "unknown"
    MISSED_HOOK         = "missed_hook"          # hook window ran out
    EARLY_HOOK          = "early_hook"           # hooked inside the early zone
    LINE_SNAPPED        = "line_snapped"         # tension hit the ceiling
    FISH_ESCAPED        = "fish_escaped"         # tension sat too low
    SLACK_EVENT_FAILURE = "slack_event_failure"  # kept reeling through slack


# ── Transition results ──────────────────────────────────────────────

class Pending:
    """No decision yet.  Use the module-level :data:`PENDING` singleton."""

    _instance: Pending | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "PENDING"


PENDING = Pending()


@dataclass(frozen=True)
class TransitionTo:
    """A resolved decision: move to *state*.

    *lost_reason* travels with transitions into ``FishingState.LOST`` so
    the machine can label the loss before the Lost state is entered.
    """
    state: FishingState
    lost_reason: LostReason | None = None

    def __bool__(self) -> bool:
        return True


Transition = Union[Pending, TransitionTo]


# ── Numeric helpers ─────────────────────────────────────────────────

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


TIME_EPSILON = 1e-9


def reached(elapsed: float, duration: float) -> bool:
    """True once *elapsed* has hit *duration*, allowing for float drift.

    Thirty frames of 1/60 sum to 0.49999999999999994, not 0.5.
    """
    return elapsed >= duration - TIME_EPSILON


def progress(elapsed: float, duration: float) -> float:
    """Normalised 0–1 progress; a non-positive duration counts as done."""
    if duration <= 0.0 or reached(elapsed, duration):
        return 1.0
    return clamp01(elapsed / duration)


# ── Interface ───────────────────────────────────────────────────────

class FishingStateBase:
    """Base class for all fishing states.  Every hook is a no-op."""

    #: Label this implementation is registered under.
    label: FishingState

    def enter(self, ctx: FishingContext) -> None:
        """Called once per activation, before the first ``update``."""
        pass

    def update(self, ctx: FishingContext, dt: float) -> None:
        """Advance timers / rolls by *dt* seconds."""
        pass

    def exit(self, ctx: FishingContext) -> None:
        """Called once when the machine leaves this state."""
        pass

    def get_next_state(self, ctx: FishingContext) -> Transition:
        """Pure: ``PENDING`` until resolved, then the same ``TransitionTo``."""
        return PENDING

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
