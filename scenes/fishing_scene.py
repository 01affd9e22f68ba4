"""
scenes/fishing_scene.py — One fishing session in the app shell.

Wires pygame input into the bus and steps the controller once per
frame.  Nothing about the encounter is drawn here; presentation layers
subscribe to the bus (``FishingStateChanged``, ``FishCaught``,
``FishLost``) and read the states' telemetry properties.

Controls:
  Space / LMB  cast, twitch, set the hook
  R / RMB      hold to reel
  Esc          abandon the current cast (quit when already idle)
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.events import EventBus
from core.scene import Scene
from fishing.controller import FishingController
from fishing.input import FishingInput
from fishing.state import FishingState

if TYPE_CHECKING:
    import pygame
    from core.app import App

_BG = (12, 24, 32)


class FishingScene(Scene):
    def __init__(self, bus: EventBus | None = None, *,
                 seed: int | None = None, zone_id: str | None = None):
        self.bus = bus if bus is not None else EventBus()
        self._seed = seed
        self._zone_id = zone_id
        self.controller: FishingController | None = None
        self.input = FishingInput(self.bus)

    def on_enter(self, app: App):
        if self.controller is None:
            self.controller = FishingController(
                self.bus, seed=self._seed, zone_id=self._zone_id)
        self.input.restart()

    def on_tuning_reloaded(self, app: App):
        if self.controller is not None:
            self.controller.reload_tuning()

    def on_exit(self, app: App):
        if self.controller is not None:
            self.controller.close()
            self.controller = None

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def end_events(self, app: App):
        self.input.end_frame()

    def update(self, dt: float, app: App):
        ctrl = self.controller
        if ctrl is None:
            return

        if self.input.just("cancel"):
            if ctrl.current_state is FishingState.IDLE:
                app.pop_scene()
                return
            ctrl.reset_to_idle()

        ctrl.step(dt)
        self.input.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(_BG)
