"""fishing/context.py — What the states are allowed to read.

The states only ever see a :class:`FishingContext`.  The game layer
(``fishing.controller.FishingController``) is the production
implementation; :class:`SimpleContext` is a plain headless one for
scripted runs, balance sweeps and tests.

Nothing in ``fishing.states`` writes to a context.
"""

from __future__ import annotations
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


Vec2 = tuple[float, float]


@runtime_checkable
class FishingContext(Protocol):
    """Read-only view polled by every state each frame."""

    # ── Input ────────────────────────────────────────────────────────
    @property
    def cast_input_pressed(self) -> bool:
        """True only on the frame the cast button went down (edge)."""
        ...

    @property
    def reel_input_held(self) -> bool:
        """True while the reel button is down (level)."""
        ...

    # ── Modifiers ────────────────────────────────────────────────────
    @property
    def bite_probability_modifier(self) -> float: ...

    @property
    def fish_struggle_intensity(self) -> float: ...

    # ── Lure ─────────────────────────────────────────────────────────
    @property
    def lure_position(self) -> Vec2: ...

    @property
    def lure_velocity(self) -> Vec2: ...

    # ── Randomness ───────────────────────────────────────────────────
    def get_random_value(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def get_random_range(self, lo: float, hi: float) -> float:
        """Uniform float in [lo, hi)."""
        ...


@dataclass
class SimpleContext:
    """Mutable, headless :class:`FishingContext`.

    Random draws come from *rng* unless values were queued with
    :meth:`queue_rolls`, in which case those are consumed first (FIFO).
    ``get_random_range`` maps a queued roll onto ``[lo, hi)``.
    """
    cast_input_pressed: bool = False
    reel_input_held: bool = False
    bite_probability_modifier: float = 0.0
    fish_struggle_intensity: float = 0.0
    lure_position: Vec2 = (0.0, 0.0)
    lure_velocity: Vec2 = (0.0, 0.0)
    rng: random.Random = field(default_factory=random.Random)
    _rolls: deque = field(default_factory=deque, repr=False)

    def queue_rolls(self, *values: float) -> None:
        self._rolls.extend(values)

    def pending_rolls(self) -> int:
        return len(self._rolls)

    def get_random_value(self) -> float:
        if self._rolls:
            return self._rolls.popleft()
        return self.rng.random()

    def get_random_range(self, lo: float, hi: float) -> float:
        return lo + self.get_random_value() * (hi - lo)
