from dataclasses import dataclass
from typing import Mapping, Tuple

from .categories import Category


@dataclass(frozen=True)
class ScorecardEntry:
    kind: str
    value: int

    def to_dict(self):
        return {'kind': self.kind, 'value': self.value}


@dataclass(frozen=True)
class Scorecard:
    """Final tally of a finished game, rows in category order."""

    scores: Tuple[ScorecardEntry, ...]
    total: int

    @classmethod
    def from_filled(cls, filled: Mapping[Category, int]) -> 'Scorecard':
        entries = tuple(ScorecardEntry(kind=c.display_name, value=int(filled[c])) for c in Category)
        return cls(scores=entries, total=sum(e.value for e in entries))

    @classmethod
    def from_dict(cls, data) -> 'Scorecard':
        entries = tuple(ScorecardEntry(kind=str(s['kind']), value=int(s['value'])) for s in data['scores'])
        return cls(scores=entries, total=int(data['total']))

    def to_dict(self):
        return {
            'scores': [e.to_dict() for e in self.scores],
            'total': self.total,
        }
