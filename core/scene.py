"""
core/scene.py — Scene interface

The app holds a stack of scenes.  Only the top scene gets
handle_event / update / draw calls; scenes below stay frozen.

    class MyScene(Scene):
        def on_enter(self, app):
            # setup, called when scene becomes active
            pass

        def update(self, dt, app):
            # dt is seconds since last frame
            pass

A scene decides *when* the fishing session exists; it never decides how
the session behaves.  That lives in ``fishing``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""
        pass

    def end_events(self, app: App):
        """Called once per frame after the last ``handle_event``."""
        pass

    def on_tuning_reloaded(self, app: App):
        """Called after ``data/tuning.toml`` was re-read (F5)."""
        pass

    def update(self, dt: float, app: App):
        """Advance simulation. dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the screen surface."""
        pass
