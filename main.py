"""
main.py — Bootstrap

1. Load tuning
2. Create the event bus (one per session, passed to everyone)
3. Create the app and push the fishing scene
4. Run
"""

from core import tuning
from core.app import App
from core.events import EventBus
from scenes.fishing_scene import FishingScene


def main():
    tuning.load()
    bus = EventBus()

    app = App(title="Stillwater")
    app.push_scene(FishingScene(bus))
    app.run()


if __name__ == "__main__":
    main()
