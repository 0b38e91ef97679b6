import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom:
    """Stands in for numpy's Generator.integers; replays queued values, then returns 0."""

    def __init__(self, values=()):
        self.values = list(values)

    def integers(self, low, high=None):
        if self.values:
            return self.values.pop(0)
        return 0
