"""core package initialization.

Engine-level pieces shared by the fishing layer: the event bus, the
tuning table, and the pygame app / scene shell.
"""

__all__ = ["app", "events", "scene", "tuning"]
