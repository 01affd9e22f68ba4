"""fishing — The fishing encounter state machine.

    from fishing import FishingController
    ctrl = FishingController(bus, seed=7)
    ctrl.step(1 / 60)

Layers, leaves first:
  state / context    labels, transition results, the state interface,
                     the read-only context protocol
  states             the twelve concrete states
  machine            the driver (one active state, enter/update/exit)
  registry           explicit label → constructor table, tuned from TOML
  lure / controller  game layer: lure physics, input flags, events
  input              pygame → bus input events
"""

from fishing.state import (
    FishingState, LostReason, PENDING, Pending, TransitionTo,
    FishingStateBase,
)
from fishing.context import FishingContext, SimpleContext
from fishing.machine import FishingStateMachine, FishingError, FishingStateError
from fishing.registry import STATE_FACTORIES, build_state_machine, build_states
from fishing.controller import FishingController

__all__ = [
    "FishingState", "LostReason", "PENDING", "Pending", "TransitionTo",
    "FishingStateBase", "FishingContext", "SimpleContext",
    "FishingStateMachine", "FishingError", "FishingStateError",
    "STATE_FACTORIES", "build_state_machine", "build_states",
    "FishingController",
]
