class FixedStep:
    """Fixed-timestep gate for a frame loop.

    ``ready(now)`` is polled once per frame with a millisecond timestamp and
    returns True at most once per call, when at least one interval has passed
    since the last committed step. Late frames are dropped: the committed
    time jumps to ``now`` instead of catching up.
    """

    def __init__(self, fps, now=0):
        self.interval = 1000.0 / fps
        self.last_time = now

    def reset(self, now):
        self.last_time = now

    def ready(self, now):
        if now - self.last_time >= self.interval:
            self.last_time = now
            return True
        return False
