"""fishing/input.py — Keyboard/mouse → fishing intents → bus events.

Sits between raw pygame events and the controller.  The scene feeds in
raw events; the mapper turns them into intents and emits the matching
input events on the bus.  The controller never sees a keycode.

Usage (in the fishing scene)::

    self.input = FishingInput(bus)
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # held-state snapshot + bus events

Intents
    cast     Space / LMB      press  → CastInput (also the hook action)
    reel     R / RMB          hold   → ReelStarted / ReelEnded on change
    slack    S                press  → SlackInput
    cancel   Esc              press  → CancelInput
"""

from __future__ import annotations
import pygame

from core.events import (
    EventBus, CastInput, ReelStarted, ReelEnded, SlackInput, CancelInput,
)


# Each binding is (pygame key constant, modifier mask or 0).
# Mouse buttons use negative constants: -1 = LMB, -3 = RMB.
_FISHING_BINDS: dict[str, list[tuple[int, int]]] = {
    "cast":   [(pygame.K_SPACE, 0), (-1, 0)],
    "reel":   [(pygame.K_r, 0), (-3, 0)],
    "slack":  [(pygame.K_s, 0)],
    "cancel": [(pygame.K_ESCAPE, 0)],
}

_PRESS_EVENTS = {
    "cast": CastInput,
    "slack": SlackInput,
    "cancel": CancelInput,
}


class FishingInput:
    """Maps pygame events to intents and forwards them to the bus."""

    def __init__(self, bus: EventBus,
                 binds: dict[str, list[tuple[int, int]]] | None = None):
        self._bus = bus
        self._binds = dict(binds) if binds is not None else dict(_FISHING_BINDS)
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held
        self._held: set[str] = set()
        self._mouse_held: set[int] = set()
        self._reel_was_held = False
        # Unhandled raw events the scene may still want (e.g. QUIT)
        self.raw_events: list[pygame.event.Event] = []

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        self._pressed.clear()
        self.raw_events.clear()

    def feed(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            mods = pygame.key.get_mods()
            for intent, key_list in self._binds.items():
                for key, req_mod in key_list:
                    if key >= 0 and event.key == key and (req_mod == 0 or mods & req_mod):
                        self._pressed.add(intent)
                        break
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._mouse_held.add(event.button)
            self._press_mouse(-event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._mouse_held.discard(event.button)
        else:
            self.raw_events.append(event)

    def end_frame(self):
        """Snapshot held state, then emit this frame's input events."""
        self._held.clear()
        keys = pygame.key.get_pressed()
        mods = pygame.key.get_mods()
        for intent, key_list in self._binds.items():
            for key, req_mod in key_list:
                if key < 0:
                    down = -key in self._mouse_held
                else:
                    down = bool(keys[key]) and (req_mod == 0 or bool(mods & req_mod))
                if down:
                    self._held.add(intent)
                    break
        self._emit()

    def restart(self):
        """Forget what was last sent; the next ``end_frame`` re-announces
        any intent still held (e.g. after the scene was covered)."""
        self.begin_frame()
        self._reel_was_held = False

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        return intent in self._held

    # ── internal ────────────────────────────────────────────────

    def _press_mouse(self, neg_button: int):
        for intent, key_list in self._binds.items():
            if any(key == neg_button for key, _mod in key_list):
                self._pressed.add(intent)

    def _emit(self):
        for intent, event_cls in _PRESS_EVENTS.items():
            if intent in self._pressed:
                self._bus.emit(event_cls())

        reel = "reel" in self._held
        if reel and not self._reel_was_held:
            self._bus.emit(ReelStarted())
        elif not reel and self._reel_was_held:
            self._bus.emit(ReelEnded())
        self._reel_was_held = reel
