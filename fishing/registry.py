"""fishing/registry.py — Hand-written table of every state constructor.

No scanning, no decorators: adding a state means adding a row here.
Each row names the ``[fishing.<table>]`` tuning section and the
constructor keywords that may be read from it::

    machine = build_state_machine(ctx, bus)
    machine.initialize()

Values read from ``data/tuning.toml`` still go through each state's own
clamping, so a bad file can only produce a slow game, never a broken one.
"""

from __future__ import annotations
from typing import Callable, NamedTuple

from core import tuning
from core.events import EventBus
from fishing.context import FishingContext
from fishing.machine import FishingStateMachine
from fishing.state import FishingState, FishingStateBase
from fishing.states import (
    IdleState, CastingState, LureDriftState, StillnessState,
    MicroTwitchState, BiteCheckState, HookOpportunityState, HookedState,
    ReelingState, SlackEventState, CaughtState, LostState,
)


class StateFactory(NamedTuple):
    table: str                                   # tuning section suffix
    build: Callable[..., FishingStateBase]
    keys: tuple[str, ...]                        # tunable constructor kwargs


STATE_FACTORIES: dict[FishingState, StateFactory] = {
    FishingState.IDLE: StateFactory("idle", IdleState, ()),
    FishingState.CASTING: StateFactory(
        "casting", CastingState,
        ("cast_duration", "min_cast_distance", "max_cast_distance")),
    FishingState.LURE_DRIFT: StateFactory(
        "lure_drift", LureDriftState,
        ("velocity_threshold", "min_drift_time")),
    FishingState.STILLNESS: StateFactory(
        "stillness", StillnessState, ("stillness_threshold",)),
    FishingState.MICRO_TWITCH: StateFactory(
        "micro_twitch", MicroTwitchState, ("twitch_duration",)),
    FishingState.BITE_CHECK: StateFactory(
        "bite_check", BiteCheckState,
        ("base_bite_probability", "check_duration",
         "no_bite_return_to_stillness_chance", "timeout_duration")),
    FishingState.HOOK_OPPORTUNITY: StateFactory(
        "hook_opportunity", HookOpportunityState,
        ("window_duration", "early_input_penalty_window")),
    FishingState.HOOKED: StateFactory(
        "hooked", HookedState, ("hook_set_duration",)),
    FishingState.REELING: StateFactory(
        "reeling", ReelingState,
        ("tension_increase_rate", "tension_decrease_rate", "max_tension",
         "progress_per_second", "slack_event_chance",
         "slack_event_check_interval", "fish_escape_threshold",
         "slack_release_duration")),
    FishingState.SLACK_EVENT: StateFactory(
        "slack_event", SlackEventState,
        ("max_slack_duration", "required_release_duration")),
    FishingState.CAUGHT: StateFactory(
        "caught", CaughtState, ("display_duration",)),
    FishingState.LOST: StateFactory(
        "lost", LostState, ("display_duration",)),
}


def tuned_kwargs(factory: StateFactory) -> dict[str, float]:
    """Constructor kwargs present in ``[fishing.<table>]``; others ignored."""
    cfg = tuning.section(f"fishing.{factory.table}")
    return {key: float(cfg[key]) for key in factory.keys if key in cfg}


def build_state(label: FishingState) -> FishingStateBase:
    factory = STATE_FACTORIES[label]
    return factory.build(**tuned_kwargs(factory))


def build_states() -> dict[FishingState, FishingStateBase]:
    """One fresh instance of every state, tuned from the current table."""
    return {label: build_state(label) for label in STATE_FACTORIES}


def build_state_machine(ctx: FishingContext,
                        bus: EventBus | None = None) -> FishingStateMachine:
    """A machine with all twelve states registered (not yet initialized)."""
    machine = FishingStateMachine(ctx, bus)
    for label, impl in build_states().items():
        machine.register_state(label, impl)
    return machine
