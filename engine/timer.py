"""
Round Timer - Cancellable one-second countdown for quiz rounds.

Every countdown runs under a generation token. Cancelling or restarting
bumps the generation, and ticks belonging to an older generation are
dropped even if their timeout was already queued on the event loop.
"""

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, Signal, QTimer


logger = logging.getLogger(__name__)


class RoundTimer(QObject):
    """
    Countdown timer for a single question round.

    Emits tick once per elapsed second and fires expired exactly once when
    the countdown reaches zero. Timeouts are delivered on the thread that
    owns the timer, so callbacks never interleave with game operations.

    Usage:
        timer = RoundTimer()
        timer.tick.connect(on_tick)
        timer.expired.connect(on_expired)
        generation = timer.start(10)

        # End the round early
        timer.cancel()
    """

    # Signals
    tick = Signal(int)      # seconds remaining
    expired = Signal()      # time's up

    # Constants
    TICK_INTERVAL_MS = 1000

    def __init__(self, tick_interval_ms: int = None, parent: QObject = None):
        """
        Initialize the round timer.

        Args:
            tick_interval_ms: Length of one countdown second (default: 1000)
            parent: Optional Qt parent
        """
        super().__init__(parent)

        self._interval_ms = tick_interval_ms or self.TICK_INTERVAL_MS
        self._generation = 0
        self._started_generation = 0
        self._remaining = 0
        self._is_running = False

        self._on_tick_cb: Optional[Callable[[int], None]] = None
        self._on_expire_cb: Optional[Callable[[], None]] = None

        # Internal Qt timer, reused by every countdown
        self._timer = QTimer(self)
        self._timer.setInterval(self._interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def generation(self) -> int:
        """Token of the most recent start or cancel."""
        return self._generation

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, duration_seconds: int,
              on_tick: Callable[[int], None] = None,
              on_expire: Callable[[], None] = None) -> int:
        """
        Start a new countdown, cancelling any countdown still active.

        Args:
            duration_seconds: Seconds to count down from
            on_tick: Called with the remaining seconds after each second
            on_expire: Called once when the countdown reaches zero

        Returns:
            The generation token of the new countdown
        """
        if duration_seconds < 1:
            raise ValueError(f"Countdown must be at least 1 second, got {duration_seconds}")

        self.cancel()

        self._remaining = duration_seconds
        self._on_tick_cb = on_tick
        self._on_expire_cb = on_expire
        self._is_running = True
        self._started_generation = self._generation

        self._timer.start()
        return self._started_generation

    def cancel(self) -> None:
        """
        Stop the countdown.

        No tick or expiry of the cancelled countdown is delivered after
        this returns. Safe to call when idle.
        """
        self._timer.stop()
        self._generation += 1
        self._is_running = False
        self._on_tick_cb = None
        self._on_expire_cb = None

    def _on_timeout(self) -> None:
        self._on_tick(self._started_generation)

    def _on_tick(self, generation: int) -> None:
        """Handle one elapsed countdown second."""
        if generation != self._generation or not self._is_running:
            logger.debug("Dropping stale tick (generation %d, current %d)",
                         generation, self._generation)
            return

        self._remaining = max(0, self._remaining - 1)
        on_tick = self._on_tick_cb
        on_expire = self._on_expire_cb

        if on_tick is not None:
            on_tick(self._remaining)
        self.tick.emit(self._remaining)

        # The tick callback may have cancelled or restarted the countdown
        if generation != self._generation:
            return

        if self._remaining == 0:
            self._timer.stop()
            self._is_running = False
            self._on_tick_cb = None
            self._on_expire_cb = None
            # Announce before the callback, which may start the next countdown
            self.expired.emit()
            if on_expire is not None:
                on_expire()
