"""
Quiz genres offered on the genre selection screen.
"""

import enum
from typing import Optional, Union


class Genre(enum.Enum):
    """The fixed set of genres a game can be played in."""
    MUSIC = "Music"
    CINEMA = "Cinema"
    KDRAMA = "K-Drama"
    NETFLIX = "Netflix Originals"
    TV = "TV Series"

    @classmethod
    def parse(cls, value: Union["Genre", str, None]) -> Optional["Genre"]:
        """
        Resolve a genre from a member, its display value or its member name.

        Returns None for anything that does not name a genre.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        wanted = value.strip().lower()
        for genre in cls:
            if wanted in (genre.value.lower(), genre.name.lower()):
                return genre
        return None
