"""Client operations: look up a session, mutate it under its lock, archive on completion."""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Sequence

from .categories import Category
from .scorecard import Scorecard

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkResult:
    category: Optional[Category] = None
    scorecard: Optional[Scorecard] = None

    @property
    def changed(self) -> bool:
        return self.category is not None

    @property
    def completed(self) -> bool:
        return self.scorecard is not None


def parse_session_id(raw) -> Optional[str]:
    """Canonical form of a well-formed session id, None for anything else."""
    if not raw or not isinstance(raw, str):
        return None
    try:
        return str(uuid.UUID(raw))
    except ValueError:
        return None


def roll_dice(registry, session_id: str, held_mask: Sequence[bool]) -> bool:
    with registry.locked(session_id) as game:
        rolled = game.roll(held_mask)
        log.info(f"[roll] id={session_id} rolled={rolled} rolls_used={game.rolls_used}")
    return rolled


def mark_category(registry, archive, session_id: str, index) -> MarkResult:
    """Mark row ``index`` for the session, archiving the game if it was the last row.

    The session leaves the registry only once the archive write succeeded;
    an ArchiveError propagates with the session unchanged.
    """
    archived = []

    def _archive(scorecard: Scorecard) -> None:
        archive.save(session_id, scorecard)
        archived.append(scorecard)

    with registry.locked(session_id) as game:
        category = game.mark(index, on_complete=_archive)
        if category is None:
            log.info(f"[mark-skip] id={session_id} index={index} rolls_used={game.rolls_used}")
            return MarkResult()
        log.info(f"[mark] id={session_id} category={category.name} value={game.filled[category]}")
        if archived:
            registry.remove(session_id)
            log.info(f"[complete] id={session_id} total={archived[0].total}")
            return MarkResult(category=category, scorecard=archived[0])
    return MarkResult(category=category)
