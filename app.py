"""
QuizNight Application Controller

Top-level controller that wires together all application components.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from PySide6.QtCore import QObject

from services.event_bus import EventBus
from engine.game import GameOrchestrator
from engine.question_bank import QuestionBank, QuestionBankError
from config import GameSettings, GAME_SETTINGS, PATHS, DEFAULT_ROSTER, LOCAL_PLAYER_NAME


logger = logging.getLogger(__name__)


class QuizNightApp(QObject):
    """
    Top-level application controller.
    Wires the game orchestrator to the event bus.
    """

    def __init__(self, roster: Iterable[str] = DEFAULT_ROSTER,
                 settings: GameSettings = GAME_SETTINGS,
                 bank_path: Optional[Path] = None,
                 local_player_name: str = LOCAL_PLAYER_NAME):
        """
        Initialize the application.

        Args:
            roster: Player names in roster order
            settings: Session settings
            bank_path: Question bank JSON file (default: PATHS.question_bank)
            local_player_name: Player whose answers come from this screen
        """
        super().__init__()

        self.event_bus = EventBus()
        self.settings = settings
        self.local_player_name = local_player_name

        self.question_bank = self._load_question_bank(bank_path or PATHS.question_bank)
        self.game = GameOrchestrator(roster, self.question_bank, settings=settings)

        # Wire up signals to event bus
        self.game.state_changed.connect(self.event_bus.state_changed.emit)
        self.game.screen_changed.connect(self.event_bus.screen_changed.emit)
        self.game.round_started.connect(self.event_bus.round_started.emit)
        self.game.timer_tick.connect(self.event_bus.timer_tick.emit)
        self.game.answer_submitted.connect(self.event_bus.answer_submitted.emit)
        self.game.round_scored.connect(self.event_bus.round_scored.emit)
        self.game.game_over.connect(self.event_bus.game_over.emit)

    def _load_question_bank(self, path: Path) -> QuestionBank:
        """Use a custom question bank file when one exists."""
        shuffle = self.settings.shuffle_questions
        if not path.exists():
            return QuestionBank.builtin(shuffle=shuffle)

        try:
            return QuestionBank.from_json(path, shuffle=shuffle)
        except QuestionBankError as e:
            logger.warning("%s; falling back to built-in questions", e)
            self.event_bus.emit_message("warning", str(e))
            return QuestionBank.builtin(shuffle=shuffle)

    @property
    def local_player(self):
        return self.game.player_by_name(self.local_player_name)

    def submit_local_answer(self, option_index: int) -> bool:
        """
        Record the on-screen selection for the local player.

        Returns:
            True if the selection was recorded
        """
        player = self.local_player
        if player is None:
            logger.debug("No local player named %s in roster", self.local_player_name)
            return False
        return self.game.submit_answer(player.id, option_index)

    def local_selection(self) -> Optional[int]:
        """Option currently highlighted for the local player."""
        player = self.local_player
        if player is None:
            return None
        return self.game.selection_for(player.id)
