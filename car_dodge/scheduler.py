from car_dodge.config import TICK_MS


class TickScheduler:
    """
    Fixed-interval timer driven by the frame loop.

    Each frame passes the milliseconds that elapsed to ``update()``; the
    callback fires at most once per frame. Intervals missed during a long
    frame are merged into one tick so input and redraw happen in between.
    """

    def __init__(self, callback, interval_ms=TICK_MS):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.callback = callback
        self.interval_ms = interval_ms
        self.running = False
        self._elapsed = 0

    def start(self):
        self.running = True
        self._elapsed = 0

    def stop(self):
        self.running = False
        self._elapsed = 0

    def update(self, elapsed_ms):
        if not self.running:
            return 0

        self._elapsed += elapsed_ms
        if self._elapsed < self.interval_ms:
            return 0

        self._elapsed = min(self._elapsed - self.interval_ms, self.interval_ms)
        self.callback()
        return 1
