"""core/events.py — Queue-and-drain event bus for the fishing layer.

Decouples the code that *notices* something (the state machine, the
input mapper) from the code that *reacts* to it (HUD, journal, audio —
all outside this package).  The bus is a plain object created once at
startup and handed to whoever needs it::

    bus = EventBus()
    bus.subscribe("FishCaught", on_catch)
    bus.emit(FishCaught(zone_id="starting_lake"))
    bus.drain()          # calls on_catch

Design rules:
  - Events are plain dataclasses — no behaviour.
  - ``emit()`` only appends; nothing runs until ``drain()``.
  - ``drain()`` processes queued events in FIFO order.
  - Handlers may emit new events; those run in the same drain pass.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict
import traceback


# ═══════════════════════════════════════════════════════════════════
#  Fishing events
# ═══════════════════════════════════════════════════════════════════

@dataclass
class FishingStateChanged:
    """The state machine swapped its active state."""
    previous: str | None = None
    new: str = ""


@dataclass
class FishCaught:
    """A fish was landed.  Emitted once per visit to the Caught state."""
    zone_id: str = ""
    fish_id: str | None = None


@dataclass
class FishLost:
    """A hooked (or nibbling) fish got away."""
    zone_id: str = ""
    reason: str = "unknown"       # LostReason value, e.g. "line_snapped"
    fish_id: str | None = None


# ═══════════════════════════════════════════════════════════════════
#  Input events (emitted by fishing.input, consumed by the controller)
# ═══════════════════════════════════════════════════════════════════

@dataclass
class CastInput:
    """Cast button pressed this frame (also used as the hook action)."""


@dataclass
class ReelStarted:
    """Reel hold began."""


@dataclass
class ReelEnded:
    """Reel hold released."""


@dataclass
class SlackInput:
    """Slack button pressed this frame."""


@dataclass
class CancelInput:
    """Cancel button pressed this frame."""


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus.  One instance per game session."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* for events whose class name is *event_type*.

        Subscribing the same handler twice is a no-op.
        """
        handlers = self._subs[event_type]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        """Remove *handler*; silently ignores unknown handlers."""
        handlers = self._subs.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, event_type: str) -> int:
        return len(self._subs.get(event_type, []))

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events — those are processed in the
        same drain pass (breadth-first).
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                # Copy so handlers may (un)subscribe while we iterate
                for handler in list(self._subs.get(name, [])):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events (subscribers are kept)."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def pending(self) -> list[Any]:
        """Shallow copy of the queue, oldest first."""
        return list(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
