"""
QuizNight Configuration

Centralized settings, paths, and constants for the application.
"""

import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import appdirs


# Application info
APP_NAME = "QuizNight"
APP_AUTHOR = "QuizNight"
APP_VERSION = "1.0.0"

# Players sharing the screen, in roster order
DEFAULT_ROSTER = ("Mom", "Dad", "Sam", "Ava")

# The one player whose selections are captured from the local screen
LOCAL_PLAYER_NAME = "Sam"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Config directory (stores a custom question bank)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def question_bank(self) -> Path:
        return self.config_dir / "questions.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "quiznight.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Per-session game settings. Fixed for the lifetime of a game."""
    # Questions drawn per game
    rounds_per_game: int = 5

    # Countdown per question in seconds
    time_per_question: int = 10

    # Points for a correct answer
    correct_answer_points: int = 20

    # Countdown tick interval in milliseconds
    tick_interval_ms: int = 1000

    # Shuffle each genre's questions before drawing
    shuffle_questions: bool = False

    def __post_init__(self):
        for name in ("rounds_per_game", "time_per_question", "tick_interval_ms"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.correct_answer_points < 0:
            raise ValueError("correct_answer_points cannot be negative")


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Configure console and file logging for the application.

    Args:
        level: Root log level
        log_file: Log file path (default: PATHS.log_file)
    """
    log_file = log_file or PATHS.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(console)
    root.addHandler(file_handler)
