"""fishing/controller.py — Game-layer owner of one fishing session.

The controller *is* the context the states read.  It owns everything
the states are not allowed to touch:

  - edge / level input flags, fed by input events on the bus
  - the seeded random source
  - lure physics (spawned on LureDrift, removed on Idle / results)
  - zone bite modifier and the hooked fish's struggle intensity

Per frame::

    controller.step(dt)
        bus.drain()             input events → flags
        lure.update(dt)
        machine.update(dt)
        publish Caught / Lost   (once per visit, then clear the flag)
        clear edge flags
        bus.drain()             state-change / result events → listeners
"""

from __future__ import annotations
import math
import random

from core import tuning
from core.events import (
    EventBus, FishingStateChanged, FishCaught, FishLost,
    CastInput, ReelStarted, ReelEnded, SlackInput, CancelInput,
)
from fishing.lure import Lure
from fishing.registry import build_state_machine
from fishing.state import FishingState, LostReason, clamp01
from fishing.states import CastingState, CaughtState, LostState, ReelingState


_LURE_KEYS = ("drift_drag", "min_velocity", "initial_drift_speed")


def _tuned_lure() -> Lure:
    cfg = tuning.section("fishing.lure")
    return Lure(**{k: float(cfg[k]) for k in _LURE_KEYS if k in cfg})


class FishingController:
    """Implements :class:`fishing.context.FishingContext` for the live game."""

    def __init__(self, bus: EventBus, *, seed: int | None = None,
                 zone_id: str | None = None,
                 bite_probability_modifier: float | None = None,
                 debug_logging: bool | None = None,
                 rod_position: tuple[float, float] = (0.0, 0.0)):
        session = tuning.section("fishing.session")

        self._bus = bus
        if seed is None:
            seed = session.get("seed")
        self._rng = random.Random(seed)
        self.debug_logging = bool(session.get("debug_logging", True)
                                  if debug_logging is None else debug_logging)

        # Zone
        self._zone_id = zone_id or session.get("zone_id", "starting_lake")
        if bite_probability_modifier is None:
            bite_probability_modifier = session.get("bite_probability_modifier", 0.0)
        self._bite_modifier = max(0.0, float(bite_probability_modifier))
        self._default_struggle = clamp01(float(session.get("struggle_intensity", 0.5)))

        # Input
        self._cast_pressed = False
        self._reel_held = False
        self._slack_pressed = False
        self._cancel_pressed = False

        # Lure / fish
        self.rod_position = rod_position
        self.lure = _tuned_lure()
        self._hooked_fish_id: str | None = None
        self._has_hooked_fish = False
        self._struggle = 0.0

        self._time_in_state = 0.0

        for name, handler in self._handlers():
            bus.subscribe(name, handler)

        self.machine = build_state_machine(self, bus)
        self.machine.initialize(FishingState.IDLE)
        if self.debug_logging:
            print(f"[FISHING] State machine initialized with "
                  f"{self.machine.registered_state_count} states")

    # ═══════════════════════════════════════════════════════════════
    #  FishingContext
    # ═══════════════════════════════════════════════════════════════

    @property
    def cast_input_pressed(self) -> bool:
        return self._cast_pressed

    @property
    def reel_input_held(self) -> bool:
        return self._reel_held

    @property
    def bite_probability_modifier(self) -> float:
        return self._bite_modifier

    @property
    def fish_struggle_intensity(self) -> float:
        return self._struggle

    @property
    def lure_position(self) -> tuple[float, float]:
        return self.lure.position if self.lure.active else self.rod_position

    @property
    def lure_velocity(self) -> tuple[float, float]:
        return self.lure.velocity if self.lure.active else (0.0, 0.0)

    def get_random_value(self) -> float:
        return self._rng.random()

    def get_random_range(self, lo: float, hi: float) -> float:
        return lo + self._rng.random() * (hi - lo)

    # ── Extra read-only state for UI / tools ──────────────────────────

    @property
    def slack_input_pressed(self) -> bool:
        return self._slack_pressed

    @property
    def cancel_input_pressed(self) -> bool:
        return self._cancel_pressed

    @property
    def current_state(self) -> FishingState:
        return self.machine.current_state or FishingState.IDLE

    @property
    def time_in_state(self) -> float:
        return self._time_in_state

    @property
    def zone_id(self) -> str:
        return self._zone_id

    @property
    def hooked_fish_id(self) -> str | None:
        return self._hooked_fish_id

    @property
    def has_hooked_fish(self) -> bool:
        return self._has_hooked_fish

    @property
    def line_length(self) -> float:
        lx, ly = self.lure_position
        rx, ry = self.rod_position
        return math.hypot(lx - rx, ly - ry)

    @property
    def line_tension(self) -> float:
        """Tension fraction of the fight in progress, else 0."""
        active = self.machine.active_state
        if isinstance(active, ReelingState):
            return active.tension_fraction
        return 0.0

    # ═══════════════════════════════════════════════════════════════
    #  Frame
    # ═══════════════════════════════════════════════════════════════

    def step(self, dt: float) -> None:
        self._bus.drain()
        self.lure.update(dt)

        changed = self.machine.update(dt)
        if changed is not None:
            self._on_state_entered(changed)
            self._time_in_state = dt
        else:
            self._time_in_state += dt

        self._publish_results()
        self._clear_edges()
        self._bus.drain()

    # ═══════════════════════════════════════════════════════════════
    #  Game-layer setters
    # ═══════════════════════════════════════════════════════════════

    def set_zone(self, zone_id: str, bite_probability_modifier: float = 0.0) -> None:
        self._zone_id = zone_id
        self._bite_modifier = max(0.0, bite_probability_modifier)

    def set_hooked_fish(self, fish_id: str | None,
                        struggle_intensity: float | None = None) -> None:
        """Put a fish on the line.  *fish_id* may be ``None`` (unnamed fish)."""
        if struggle_intensity is None:
            struggle_intensity = self._default_struggle
        self._has_hooked_fish = True
        self._hooked_fish_id = fish_id or None
        self._struggle = clamp01(struggle_intensity)

    def set_fish_struggle_intensity(self, intensity: float) -> None:
        self._struggle = clamp01(intensity)

    def clear_hooked_fish(self) -> None:
        self._has_hooked_fish = False
        self._hooked_fish_id = None
        self._struggle = 0.0

    def force_transition(self, state: FishingState,
                         lost_reason: LostReason | None = None) -> None:
        """Jump straight to *state* (debug keys, cut-scenes)."""
        if not self.machine.is_initialized:
            return
        self.machine.transition_to(state, lost_reason)
        self._on_state_entered(state)
        self._publish_results()

    def reset_to_idle(self) -> None:
        self.clear_hooked_fish()
        self.lure.despawn()
        self.force_transition(FishingState.IDLE)

    def reload_tuning(self) -> None:
        """Rebuild every state from the current tuning table.

        The encounter in progress is abandoned; the new machine starts in
        Idle.  Bus subscriptions are kept.
        """
        self.machine.reset()
        self.clear_hooked_fish()
        self.lure = _tuned_lure()
        self.machine = build_state_machine(self, self._bus)
        self.machine.initialize(FishingState.IDLE)
        self._time_in_state = 0.0
        if self.debug_logging:
            print(f"[FISHING] Tuning reloaded, rebuilt "
                  f"{self.machine.registered_state_count} states")

    def close(self) -> None:
        """Exit the active state and detach from the bus."""
        self.machine.reset()
        self.lure.despawn()
        for name, handler in self._handlers():
            self._bus.unsubscribe(name, handler)

    # ═══════════════════════════════════════════════════════════════
    #  Internals
    # ═══════════════════════════════════════════════════════════════

    def _on_state_entered(self, state: FishingState) -> None:
        self._time_in_state = 0.0

        if state is FishingState.LURE_DRIFT:
            casting = self.machine.get_state(FishingState.CASTING)
            if isinstance(casting, CastingState):
                rx, ry = self.rod_position
                lx, ly = casting.landing_position
                self.lure.spawn((lx, ly), (lx - rx, ly - ry))
        elif state is FishingState.HOOKED:
            if not self._has_hooked_fish:
                self.set_hooked_fish(None)
        elif state in (FishingState.CAUGHT, FishingState.LOST):
            self.lure.despawn()
        elif state is FishingState.IDLE:
            self.lure.despawn()
            self.clear_hooked_fish()

    def _publish_results(self) -> None:
        active = self.machine.active_state
        if isinstance(active, CaughtState) and active.event_ready:
            self._bus.emit(FishCaught(zone_id=self._zone_id,
                                      fish_id=self._hooked_fish_id))
            if self.debug_logging:
                print(f"[FISHING] Fish caught in {self._zone_id}")
            active.clear_event_ready()
        elif isinstance(active, LostState) and active.event_ready:
            self._bus.emit(FishLost(zone_id=self._zone_id,
                                    reason=active.reason.value,
                                    fish_id=self._hooked_fish_id))
            if self.debug_logging:
                print(f"[FISHING] Fish lost in {self._zone_id}: "
                      f"{active.reason.value}")
            active.clear_event_ready()

    def _clear_edges(self) -> None:
        self._cast_pressed = False
        self._slack_pressed = False
        self._cancel_pressed = False

    # ── Bus handlers ──────────────────────────────────────────────────

    def _handlers(self):
        return (
            ("CastInput", self._on_cast),
            ("ReelStarted", self._on_reel_started),
            ("ReelEnded", self._on_reel_ended),
            ("SlackInput", self._on_slack),
            ("CancelInput", self._on_cancel),
            ("FishingStateChanged", self._on_state_changed),
        )

    def _on_cast(self, evt: CastInput) -> None:
        self._cast_pressed = True

    def _on_reel_started(self, evt: ReelStarted) -> None:
        self._reel_held = True

    def _on_reel_ended(self, evt: ReelEnded) -> None:
        self._reel_held = False

    def _on_slack(self, evt: SlackInput) -> None:
        self._slack_pressed = True

    def _on_cancel(self, evt: CancelInput) -> None:
        self._cancel_pressed = True

    def _on_state_changed(self, evt: FishingStateChanged) -> None:
        if self.debug_logging:
            print(f"[FISHING] State: {evt.previous or 'None'} -> {evt.new}")

    def __repr__(self) -> str:
        return (f"FishingController(state={self.current_state}, "
                f"zone={self._zone_id!r})")
