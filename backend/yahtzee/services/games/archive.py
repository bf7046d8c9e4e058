import json
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from yahtzee import db
from yahtzee.models import ScorecardRecord
from .errors import ArchiveError
from .scorecard import Scorecard

log = logging.getLogger(__name__)


class ScorecardArchive:
    """Write-once store of finished scorecards keyed by session id."""

    def save(self, session_id: str, scorecard: Scorecard) -> None:
        payload = scorecard.to_dict()
        try:
            if db.session.get(ScorecardRecord, session_id) is not None:
                raise ArchiveError(f"scorecard {session_id} is already archived")
            record = ScorecardRecord(
                id=session_id,
                scores=json.dumps(payload['scores']),
                total=payload['total'],
            )
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error(f"[archive-fail] id={session_id} error={exc}")
            raise ArchiveError(f"could not archive scorecard {session_id}") from exc
        log.info(f"[archive] id={session_id} total={scorecard.total}")

    def load(self, session_id: str) -> Optional[Scorecard]:
        try:
            record = db.session.get(ScorecardRecord, session_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise ArchiveError(f"could not read scorecard {session_id}") from exc
        if record is None:
            return None
        try:
            return Scorecard.from_dict(record.to_dict())
        except (ValueError, KeyError, TypeError) as exc:
            raise ArchiveError(f"scorecard {session_id} is corrupt") from exc

    def exists(self, session_id: str) -> bool:
        return self.load(session_id) is not None
