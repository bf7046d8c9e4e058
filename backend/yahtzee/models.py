from datetime import datetime, timezone
import json

from yahtzee import db


def _utcnow():
    return datetime.now(timezone.utc)


class ScorecardRecord(db.Model):
    """One archived game. Written once when the game completes, never updated."""

    __tablename__ = 'scorecard'
    id = db.Column(db.String(36), primary_key=True)
    scores = db.Column(db.Text, nullable=False)  # JSON-encoded list of {kind, value}
    total = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    def to_dict(self):
        return {
            'scores': json.loads(self.scores),
            'total': self.total,
        }
