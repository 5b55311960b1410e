"""
Event Bus - Central signal hub for inter-module communication.

Presentation layers connect to this single object rather than directly to
the game engine, so screens can be swapped without touching game logic.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for QuizNight.

    The EventBus acts as a mediator between application components:
    - GameOrchestrator emits navigation, round and scoring events
    - Screens listen and update their displays
    - The application controller reports system messages

    Usage:
        # In QuizNightApp
        orchestrator.round_scored.connect(event_bus.round_scored.emit)

        # In a scoreboard screen
        event_bus.state_changed.connect(self._on_state_changed)
    """

    # ============ Navigation ============
    screen_changed = Signal(str)        # Screen value
    state_changed = Signal(object)      # GameSnapshot

    # ============ Round Lifecycle ============
    round_started = Signal(int)         # round index
    answer_submitted = Signal(str, int) # player id, option index
    round_scored = Signal(object)       # RoundResult
    game_over = Signal(object)          # winning Player or None

    # ============ Timer Events ============
    timer_tick = Signal(int)            # seconds remaining

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("warning", "Bank not found")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
