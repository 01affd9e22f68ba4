"""
core/app.py — Pygame application shell

Owns the window, the frame clock, and the scene stack.  Every frame:

    events → top scene.handle_event / end_events
    update → top scene.update(dt)
    draw   → top scene.draw(surface)

    app = App(title="Stillwater")
    app.push_scene(FishingScene(bus))
    app.run()

F5 hot-reloads ``data/tuning.toml`` and tells the top scene, which
rebuilds whatever reads the table.
"""

from __future__ import annotations
import pygame

from core import tuning
from core.scene import Scene


class App:
    def __init__(self, title: str = "Stillwater", width: int = 640,
                 height: int = 360, fps: int = 60):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0
        # Longest frame fed to the simulation; a stalled window must not
        # turn into one giant update
        self.max_dt = 0.1

        # Scene stack; only the top scene is active
        self._scenes: list[Scene] = []

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = min(self.clock.tick(self.fps) / 1000.0, self.max_dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F5:
                    tuning.reload()
                    if self.scene:
                        self.scene.on_tuning_reloaded(self)
                elif self.scene:
                    self.scene.handle_event(event, self)
            if self.scene:
                self.scene.end_events(self)

            if self.scene:
                self.scene.update(self.dt, self)

            if self.scene:
                self.scene.draw(self.screen, self)
            pygame.display.flip()

        while self._scenes:
            self._scenes.pop().on_exit(self)
        pygame.quit()
