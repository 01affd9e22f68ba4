"""fishing.states — One class per fishing state.

Each class is created once and reused for every encounter; all of its
private fields are reset in ``enter``.
"""

from fishing.states.idle import IdleState
from fishing.states.casting import CastingState
from fishing.states.lure_drift import LureDriftState
from fishing.states.stillness import StillnessState
from fishing.states.micro_twitch import MicroTwitchState
from fishing.states.bite_check import BiteCheckState
from fishing.states.hook_opportunity import HookOpportunityState
from fishing.states.hooked import HookedState
from fishing.states.reeling import ReelingState
from fishing.states.slack_event import SlackEventState
from fishing.states.results import CaughtState, LostState

__all__ = [
    "IdleState", "CastingState", "LureDriftState", "StillnessState",
    "MicroTwitchState", "BiteCheckState", "HookOpportunityState",
    "HookedState", "ReelingState", "SlackEventState", "CaughtState",
    "LostState",
]
