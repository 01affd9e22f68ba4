"""fishing/machine.py — The driver.

Holds exactly one active state and runs the per-frame protocol::

    machine.update(dt)
        active.update(ctx, dt)
        decision = active.get_next_state(ctx)
        if decision is a TransitionTo:
            active.exit(ctx)
            (Lost only) lost.set_reason(decision.lost_reason)
            new.enter(ctx)
            bus.emit(FishingStateChanged(...))

Only one state is updated per frame and a state that has reported a
transition is always exited before anything else touches it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.events import EventBus, FishingStateChanged
from fishing.state import (
    FishingState, FishingStateBase, LostReason, TransitionTo,
)

if TYPE_CHECKING:
    from fishing.context import FishingContext


class FishingError(Exception):
    """Base class for fishing-layer errors."""


class FishingStateError(FishingError):
    """The machine was driven in a way its protocol does not allow."""


class FishingStateMachine:
    """Registry of state instances plus the single active one."""

    def __init__(self, ctx: FishingContext, bus: EventBus | None = None):
        if ctx is None:
            raise FishingStateError("state machine needs a context")
        self._ctx = ctx
        self._bus = bus
        self._states: dict[FishingState, FishingStateBase] = {}
        self._current: FishingState | None = None
        self._active: FishingStateBase | None = None
        self._initialized = False
        self.transition_count = 0

    # ── Registration ────────────────────────────────────────────────

    def register_state(self, label: FishingState, impl: FishingStateBase) -> None:
        if impl is None:
            raise FishingStateError(f"no implementation given for {label}")
        if label in self._states:
            raise FishingStateError(f"state {label} is already registered")
        self._states[label] = impl

    def has_state(self, label: FishingState) -> bool:
        return label in self._states

    def get_state(self, label: FishingState) -> FishingStateBase | None:
        return self._states.get(label)

    @property
    def registered_state_count(self) -> int:
        return len(self._states)

    # ── Introspection ───────────────────────────────────────────────

    @property
    def current_state(self) -> FishingState | None:
        return self._current

    @property
    def active_state(self) -> FishingStateBase | None:
        """The live state object (``None`` before ``initialize``)."""
        return self._active

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def context(self) -> FishingContext:
        return self._ctx

    # ── Lifecycle ───────────────────────────────────────────────────

    def initialize(self, initial: FishingState = FishingState.IDLE) -> None:
        """Enter *initial*.  Must be called once before ``update``."""
        if self._initialized:
            raise FishingStateError("state machine is already initialized")
        impl = self._require(initial)

        self._current = initial
        self._active = impl
        self._initialized = True
        impl.enter(self._ctx)
        self._emit(None, initial)

    def update(self, dt: float) -> FishingState | None:
        """Run one frame.  Returns the new label if a swap happened."""
        if not self._initialized:
            raise FishingStateError(
                "state machine must be initialized before update()")
        if self._active is None:
            return None

        self._active.update(self._ctx, dt)
        decision = self._active.get_next_state(self._ctx)
        if isinstance(decision, TransitionTo):
            self._swap(decision.state, decision.lost_reason)
            return decision.state
        return None

    def transition_to(self, label: FishingState,
                      lost_reason: LostReason | None = None) -> None:
        """Force a swap, e.g. on cancel input or an external reset."""
        if not self._initialized:
            raise FishingStateError(
                "state machine must be initialized before transition_to()")
        self._swap(label, lost_reason)

    def reset(self) -> None:
        """Exit the active state and drop back to uninitialized."""
        if self._initialized and self._active is not None:
            self._active.exit(self._ctx)
        self._active = None
        self._current = None
        self._initialized = False

    # ── Internals ───────────────────────────────────────────────────

    def _require(self, label: FishingState) -> FishingStateBase:
        impl = self._states.get(label)
        if impl is None:
            raise FishingStateError(f"state {label} is not registered")
        return impl

    def _swap(self, label: FishingState, lost_reason: LostReason | None):
        impl = self._require(label)
        previous = self._current

        if self._active is not None:
            self._active.exit(self._ctx)

        if label is FishingState.LOST and hasattr(impl, "set_reason"):
            impl.set_reason(lost_reason)

        self._current = label
        self._active = impl
        impl.enter(self._ctx)
        self.transition_count += 1
        self._emit(previous, label)

    def _emit(self, previous: FishingState | None, new: FishingState):
        if self._bus is not None:
            self._bus.emit(FishingStateChanged(
                previous=str(previous) if previous is not None else None,
                new=str(new),
            ))

    def __repr__(self) -> str:
        return (f"FishingStateMachine(current={self._current}, "
                f"states={len(self._states)})")
