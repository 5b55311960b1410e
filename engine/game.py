"""
Game Orchestrator - Core state machine for a quiz night.

Owns all mutable game state, drives screen transitions, runs the round
countdown and applies scoring when a round ends. Presentation layers
only observe state (properties, snapshots and signals) and call the
public operations below.
"""

import logging
from functools import partial
from typing import Iterable, Optional, Union

from PySide6.QtCore import QObject, Signal

from config import GameSettings
from engine.question_bank import QuestionBank
from engine.scoring import ScoringPolicy, RoundResult
from engine.timer import RoundTimer
from models.game_state import Screen, GameSnapshot
from models.genre import Genre
from models.player import Player
from models.question import Question, OPTION_COUNT
from models.schemas import RosterCreate


logger = logging.getLogger(__name__)


class GameOrchestrator(QObject):
    """
    Finite state machine for one quiz session.

    Screens flow HOME -> LOBBY -> GENRE_SELECT -> (QUESTION -> SCOREBOARD)*
    -> GAME_OVER. Each round counts down, collects answers, reveals the
    correct option and scores exactly once.

    Every public operation applies its changes completely before any signal
    is emitted, so observers never see a half-finished transition. Calls
    made outside their window (late answers, early advances) are ignored.
    """

    # Signals
    state_changed = Signal(object)          # GameSnapshot
    screen_changed = Signal(str)            # Screen value
    round_started = Signal(int)             # round index
    timer_tick = Signal(int)                # seconds remaining
    answer_submitted = Signal(str, int)     # player id, option index
    round_scored = Signal(object)           # RoundResult
    game_over = Signal(object)              # winning Player or None

    def __init__(self, roster: Iterable[str], question_bank: QuestionBank,
                 settings: GameSettings = None, scoring: ScoringPolicy = None,
                 timer: RoundTimer = None):
        """
        Initialize the orchestrator.

        Args:
            roster: Player names in roster order
            question_bank: Source of questions per genre
            settings: Session settings (default: GameSettings())
            scoring: Scoring policy (default: flat points from settings)
            timer: Countdown timer (default: RoundTimer on the settings interval)
        """
        super().__init__()

        names = RosterCreate(names=list(roster)).names
        self._settings = settings or GameSettings()
        self._bank = question_bank
        self._scoring = scoring or ScoringPolicy(self._settings.correct_answer_points)
        self._timer = timer or RoundTimer(self._settings.tick_interval_ms, parent=self)

        self._players: list[Player] = [Player(name=name) for name in names]
        self._round_generation = 0
        self._pending: list[tuple] = []
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset all round state to initial values."""
        self._screen = Screen.HOME
        self._genre: Optional[Genre] = None
        self._questions: list[Question] = []
        self._round_index = 0
        self._timer_seconds = self._settings.time_per_question
        self._is_counting_down = False
        self._revealed_correct = False
        self._answers: dict[str, int] = {}
        self._scored_rounds: set[int] = set()

    # ============ Observation ============

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def timer(self) -> RoundTimer:
        return self._timer

    @property
    def screen(self) -> Screen:
        """Current screen. The single source of truth for navigation."""
        return self._screen

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def genre(self) -> Optional[Genre]:
        return self._genre

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def round_index(self) -> int:
        return self._round_index

    @property
    def current_question(self) -> Optional[Question]:
        if self._round_index < len(self._questions):
            return self._questions[self._round_index]
        return None

    @property
    def timer_seconds(self) -> int:
        return self._timer_seconds

    @property
    def is_counting_down(self) -> bool:
        return self._is_counting_down

    @property
    def revealed_correct(self) -> bool:
        return self._revealed_correct

    @property
    def answers(self) -> dict[str, int]:
        """Copy of the current round's selections keyed by player id."""
        return dict(self._answers)

    @property
    def timer_generation(self) -> int:
        """Generation token of the current round's countdown."""
        return self._round_generation

    @property
    def winner(self) -> Optional[Player]:
        """
        Player with the highest score, ties going to the earlier roster
        position. None if the roster is empty.
        """
        if not self._players:
            return None
        return max(self._players, key=lambda p: p.score)

    @property
    def standings(self) -> list[Player]:
        """Players by descending score, roster order among equals."""
        return sorted(self._players, key=lambda p: p.score, reverse=True)

    def player_by_name(self, name: str) -> Optional[Player]:
        for player in self._players:
            if player.name == name:
                return player
        return None

    def selection_for(self, player_id: str) -> Optional[int]:
        """The option a player currently has selected this round."""
        return self._answers.get(player_id)

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the current state."""
        return GameSnapshot(
            screen=self._screen,
            players=self.players,
            genre=self._genre,
            round_index=self._round_index,
            question_count=len(self._questions),
            current_question=self.current_question,
            timer_seconds=self._timer_seconds,
            time_per_question=self._settings.time_per_question,
            is_counting_down=self._is_counting_down,
            revealed_correct=self._revealed_correct,
            answers=dict(self._answers),
            winner=self.winner if self._screen == Screen.GAME_OVER else None,
        )

    # ============ Navigation ============

    def reset_all(self) -> None:
        """Zero every score and return to the home screen."""
        self._cancel_countdown()
        self._players = [p.with_score(0) for p in self._players]
        self._reset_state()
        self._emit_later(self.screen_changed, self._screen.value)
        logger.info("Game reset")
        self._notify()

    def enter_lobby(self) -> None:
        self._set_screen(Screen.LOBBY)
        self._notify()

    def open_genre_select(self) -> None:
        self._set_screen(Screen.GENRE_SELECT)
        self._notify()

    def play_again(self) -> None:
        """Reset scores and go straight to genre selection."""
        self.reset_all()
        self.open_genre_select()

    def choose_genre(self, genre: Union[Genre, str]) -> None:
        """
        Load a genre's questions and start the first round.

        Unrecognized genres play the default question sequence.
        """
        parsed = Genre.parse(genre)
        if parsed is None:
            logger.warning("Unknown genre %r, using default questions", genre)

        questions = self._bank.load_questions(parsed)
        self._genre = parsed
        self._questions = questions[:self._settings.rounds_per_game]
        self._round_index = 0
        self._scored_rounds = set()
        logger.info("Genre chosen: %s (%d questions)",
                    parsed.value if parsed else "default", len(self._questions))

        self._set_screen(Screen.QUESTION)
        self._begin_round()
        self._notify()

    def start_question(self) -> None:
        """
        Start the countdown for the current round.

        A round that has already been scored is not reopened.
        """
        if self._round_index in self._scored_rounds:
            logger.debug("Ignoring restart of scored round %d", self._round_index + 1)
            return
        self._begin_round()
        self._notify()

    def advance_to_scoreboard(self) -> None:
        """Show the scoreboard once the round has been revealed."""
        if not self._revealed_correct:
            logger.debug("Ignoring scoreboard request before reveal")
            return
        self._set_screen(Screen.SCOREBOARD)
        self._notify()

    def advance_from_scoreboard(self) -> None:
        """Move to the next round, or to game over after the last one."""
        self._cancel_countdown()
        self._round_index = min(self._round_index + 1, len(self._questions))
        if self._round_index >= len(self._questions):
            self._finish_game()
        else:
            self._set_screen(Screen.QUESTION)
            self._begin_round()
        self._notify()

    def go_to_winner(self) -> None:
        self._finish_game()
        self._notify()

    # ============ Answers and Scoring ============

    def submit_answer(self, player_id: str, option_index: int) -> bool:
        """
        Record a player's selection for the current round.

        Later selections overwrite earlier ones. Ignored outside the
        countdown, for unknown players and for out-of-range options.

        Returns:
            True if the selection was recorded
        """
        if not self._is_counting_down:
            logger.debug("Ignoring answer from %s outside countdown", player_id)
            return False
        if (not isinstance(option_index, int) or isinstance(option_index, bool)
                or not 0 <= option_index < OPTION_COUNT):
            logger.debug("Ignoring out-of-range option %r from %s", option_index, player_id)
            return False
        if all(p.id != player_id for p in self._players):
            logger.debug("Ignoring answer from unknown player %s", player_id)
            return False

        self._answers[player_id] = option_index
        self._emit_later(self.answer_submitted, player_id, option_index)
        self._notify()
        return True

    def end_question_and_score(self) -> Optional[RoundResult]:
        """
        Stop the countdown, reveal the answer and score the round.

        The only path by which points are awarded. Runs at most once per
        round; later calls return None.
        """
        question = self.current_question
        if (self._revealed_correct or question is None
                or self._round_index in self._scored_rounds):
            return None

        self._cancel_countdown()
        self._revealed_correct = True
        self._scored_rounds.add(self._round_index)

        result = self._scoring.score_round(
            self._round_index, question, self._answers, [p.id for p in self._players]
        )
        self._players = [p.add_points(result.deltas.get(p.id, 0)) for p in self._players]

        logger.info("Round %d scored: %d correct, %d points awarded",
                    self._round_index + 1, len(result.correct_player_ids),
                    result.points_awarded)
        self._emit_later(self.round_scored, result)
        self._notify()
        return result

    # ============ Internals ============

    def _begin_round(self) -> None:
        if self._round_index >= len(self._questions):
            self._finish_game()
            return

        self._timer_seconds = self._settings.time_per_question
        self._is_counting_down = True
        self._revealed_correct = False
        self._answers = {}

        self._round_generation += 1
        generation = self._round_generation
        self._timer.start(
            self._settings.time_per_question,
            on_tick=partial(self._on_timer_tick, generation),
            on_expire=partial(self._on_timer_expired, generation),
        )
        logger.info("Round %d/%d started", self._round_index + 1, len(self._questions))
        self._emit_later(self.round_started, self._round_index)

    def _finish_game(self) -> None:
        self._cancel_countdown()
        self._set_screen(Screen.GAME_OVER)
        winner = self.winner
        logger.info("Game over, winner: %s", winner.name if winner else "none")
        self._emit_later(self.game_over, winner)

    def _cancel_countdown(self) -> None:
        self._timer.cancel()
        self._round_generation += 1
        self._is_counting_down = False

    def _on_timer_tick(self, generation: int, remaining: int) -> None:
        if generation != self._round_generation or not self._is_counting_down:
            logger.debug("Discarding stale timer tick for generation %d", generation)
            return
        self._timer_seconds = max(0, min(remaining, self._settings.time_per_question))
        self._emit_later(self.timer_tick, self._timer_seconds)
        self._notify()

    def _on_timer_expired(self, generation: int) -> None:
        if generation != self._round_generation or not self._is_counting_down:
            logger.debug("Discarding stale timer expiry for generation %d", generation)
            return
        self.end_question_and_score()

    def _set_screen(self, screen: Screen) -> None:
        if screen != self._screen:
            self._screen = screen
            self._emit_later(self.screen_changed, screen.value)

    def _emit_later(self, signal, *args) -> None:
        """Queue a signal until the current operation has finished mutating."""
        self._pending.append((signal, args))

    def _notify(self) -> None:
        """Flush queued signals and publish the new snapshot."""
        pending, self._pending = self._pending, []
        for signal, args in pending:
            signal.emit(*args)
        self.state_changed.emit(self.snapshot())
