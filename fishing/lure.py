"""fishing/lure.py — Lure drift physics.

The lure is spawned where the cast lands, carried along the cast
direction at ``initial_drift_speed`` and slowed by linear drag until it
falls under ``min_velocity`` and stops dead.  The LureDrift state only
watches the resulting velocity; it never moves the lure itself.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass
class Lure:
    drift_drag: float = 2.0
    min_velocity: float = 0.01
    initial_drift_speed: float = 3.0

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    active: bool = False

    def __post_init__(self):
        self.drift_drag = max(0.0, self.drift_drag)
        self.min_velocity = max(0.0, self.min_velocity)
        self.initial_drift_speed = max(0.0, self.initial_drift_speed)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def spawn(self, position: tuple[float, float],
              direction: tuple[float, float] = (0.0, 0.0)) -> None:
        """Place the lure at *position* moving along *direction*."""
        self.x, self.y = position
        dx, dy = direction
        mag = math.hypot(dx, dy)
        if mag > 0.0:
            self.vx = dx / mag * self.initial_drift_speed
            self.vy = dy / mag * self.initial_drift_speed
        else:
            self.vx = self.vy = 0.0
        self.active = True

    def despawn(self) -> None:
        self.vx = self.vy = 0.0
        self.active = False

    def add_impulse(self, ix: float, iy: float) -> None:
        self.vx += ix
        self.vy += iy

    def update(self, dt: float) -> None:
        if not self.active:
            return
        if self.speed < self.min_velocity:
            self.vx = self.vy = 0.0
            return
        drag = max(0.0, 1.0 - self.drift_drag * dt)
        self.vx *= drag
        self.vy *= drag
        self.x += self.vx * dt
        self.y += self.vy * dt
