"""Game domain services: dice, scoring, sessions and the scorecard archive.

This package contains the pure game mechanics plus the registry and archive
that own their lifecycle. HTTP routes and socket handlers import from here,
keeping transport concerns separated from core game mechanics.
"""

from .categories import Category
from .dice import Die
from .errors import ArchiveError, GameError, SessionBusy, SessionNotFound
from .scorecard import Scorecard, ScorecardEntry
from .scoring import joker_eligible, score
from .session import GameSession
from .registry import SessionRegistry
from .archive import ScorecardArchive
from .play import MarkResult, mark_category, parse_session_id, roll_dice

__all__ = [
    'ArchiveError',
    'Category',
    'Die',
    'GameError',
    'GameSession',
    'MarkResult',
    'Scorecard',
    'ScorecardArchive',
    'ScorecardEntry',
    'SessionBusy',
    'SessionNotFound',
    'SessionRegistry',
    'joker_eligible',
    'mark_category',
    'parse_session_id',
    'roll_dice',
    'score',
]
