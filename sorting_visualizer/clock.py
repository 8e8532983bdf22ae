import logging
import time

log = logging.getLogger(__name__)


class FrameClock:
    """
    Turns elapsed real time into a whole number of algorithm steps.

    Time not yet worth a full step carries over to the next call. A late
    frame yields several ticks, capped at max_ticks; the rest of the
    backlog is dropped so a long stall does not replay as a burst. With
    max_ticks=None every step that is due is returned.
    """

    def __init__(self, target_rate: float = 60, max_ticks: int | None = 10,
                 time_source=time.monotonic):
        if target_rate <= 0:
            raise ValueError(f"target_rate must be positive, got {target_rate}")
        if max_ticks is not None and max_ticks < 1:
            raise ValueError(f"max_ticks must be >= 1 or None, got {max_ticks}")
        self.target_rate = target_rate
        self.max_ticks   = max_ticks
        self._now        = time_source
        self._last       = time_source()
        self._residual   = 0.0

    @property
    def step_interval(self) -> float:
        return 1.0 / self.target_rate

    def reset(self):
        self._last     = self._now()
        self._residual = 0.0

    def tick(self) -> int:
        now = self._now()
        self._residual += max(0.0, now - self._last)
        self._last = now

        dt    = self.step_interval
        ticks = 0
        while self._residual >= dt and (self.max_ticks is None or ticks < self.max_ticks):
            self._residual -= dt
            ticks += 1
        if self._residual >= dt:
            log.debug("Dropping %.3fs of step backlog", self._residual)
            self._residual = 0.0
        return ticks
