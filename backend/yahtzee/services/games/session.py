import random
from typing import Callable, Dict, List, Optional, Sequence

from .categories import CATEGORY_COUNT, Category
from .dice import DICE_COUNT, Die, roll_die, throw_dice
from .scorecard import Scorecard
from .scoring import joker_eligible, score

MAX_ROLLS = 3


class GameSession:
    """One player's game in progress.

    State only changes through :meth:`roll` and :meth:`mark`. Both are
    silent no-ops when the move is not allowed in the current state;
    callers redisplay the unchanged state in that case.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng
        self.dice: List[Die] = throw_dice(rng)
        self.rolls_used = 0
        self.filled: Dict[Category, int] = {}

    @property
    def rolls_remaining(self) -> int:
        return MAX_ROLLS - self.rolls_used

    @property
    def is_complete(self) -> bool:
        return len(self.filled) == CATEGORY_COUNT

    @property
    def total(self) -> int:
        return sum(self.filled.values())

    @property
    def joker_eligible(self) -> bool:
        return joker_eligible(self.filled)

    def roll(self, held_mask: Sequence[bool] = ()) -> bool:
        """Throw the dice, keeping those flagged in ``held_mask``.

        The first roll of a turn throws all five dice whatever the mask says.
        Returns False, changing nothing, once three rolls have been used.
        """
        if self.rolls_used >= MAX_ROLLS:
            return False
        mask = [bool(h) for h in list(held_mask)[:DICE_COUNT]]
        mask += [False] * (DICE_COUNT - len(mask))

        self.rolls_used += 1
        if self.rolls_used == 1:
            self.dice = throw_dice(self._rng)
            return True
        for i, hold in enumerate(mask):
            if hold:
                self.dice[i].held = True
            else:
                self.dice[i] = roll_die(self._rng)
        return True

    def potential(self, category: Category) -> Optional[int]:
        """Score marking ``category`` now would give, None once it is filled."""
        if category in self.filled:
            return None
        return score(category, self.dice, self.joker_eligible)

    def can_mark(self, category: Optional[Category]) -> bool:
        return category is not None and self.rolls_used > 0 and category not in self.filled

    def mark(self, category_index, on_complete: Optional[Callable[[Scorecard], None]] = None) -> Optional[Category]:
        """Score the current dice into the row at ``category_index``.

        Returns the category marked, or None when nothing changed (no roll
        yet this turn, index out of range, row already filled). When this
        fills the last row, ``on_complete`` receives the final scorecard
        before the change is applied; if it raises, the session is left as
        it was so the mark can be retried.
        """
        category = Category.from_index(category_index)
        if not self.can_mark(category):
            return None

        filled = dict(self.filled)
        filled[category] = score(category, self.dice, self.joker_eligible)
        if len(filled) == CATEGORY_COUNT:
            if on_complete is not None:
                on_complete(Scorecard.from_filled(filled))
            self.filled = filled
            return category

        self.filled = filled
        self.rolls_used = 0
        return category

    def scorecard(self) -> Scorecard:
        if not self.is_complete:
            raise ValueError('scorecard requested for an unfinished game')
        return Scorecard.from_filled(self.filled)

    def view(self):
        """Read-only view model for the index page."""
        rows = []
        for category in Category:
            value = self.filled.get(category)
            rows.append({
                'index': int(category),
                'kind': category.display_name,
                'value': value,
                'markable': value is None and self.rolls_used > 0,
                'potential': self.potential(category),
            })
        return {
            'scores': rows,
            'total': self.total,
            'dice': [d.to_dict() for d in self.dice],
            'rolls_remaining': self.rolls_remaining,
            'complete': self.is_complete,
        }
