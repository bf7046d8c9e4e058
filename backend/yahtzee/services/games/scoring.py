from collections import Counter
from typing import Mapping

from .categories import Category
from .dice import face_values

JOKER_BONUS = 100
FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
YAHTZEE_SCORE = 50

SMALL_STRAIGHTS = ({1, 2, 3, 4}, {2, 3, 4, 5}, {3, 4, 5, 6})
LARGE_STRAIGHT_CORE = {2, 3, 4, 5}

# Rows that score the joker bonus when five of a kind is rolled
JOKER_CATEGORIES = frozenset({
    Category.THREE_OF_A_KIND,
    Category.FOUR_OF_A_KIND,
    Category.FULL_HOUSE,
    Category.SMALL_STRAIGHT,
    Category.LARGE_STRAIGHT,
    Category.CHANCE,
})


def joker_eligible(filled: Mapping[Category, int]) -> bool:
    """Whether a five of a kind may still be played as a joker.

    True while Yahtzee is unscored or was scored with points; only a Yahtzee
    row scratched with 0 disables the bonus for the rest of the game.
    """
    yahtzee = filled.get(Category.YAHTZEE)
    return yahtzee is None or yahtzee != 0


def is_yahtzee(values) -> bool:
    return len(set(values)) == 1


def _has_n_of_a_kind(counts: Counter, n: int) -> bool:
    return any(c >= n for c in counts.values())


def _is_full_house(counts: Counter) -> bool:
    return sorted(counts.values()) == [2, 3]


def _is_small_straight(values) -> bool:
    faces = set(values)
    return any(straight <= faces for straight in SMALL_STRAIGHTS)


def _is_large_straight(values) -> bool:
    faces = set(values)
    return LARGE_STRAIGHT_CORE <= faces and (1 in faces or 6 in faces)


def score(category: Category, dice, yahtzee_joker_eligible: bool) -> int:
    """Points the five ``dice`` are worth in ``category``.

    ``dice`` may be Die objects or face values. Pure and defined for every
    category; unmatched patterns score 0.
    """
    category = Category(category)
    values = face_values(dice)
    counts = Counter(values)
    total = sum(values)

    if category.face is not None:
        return counts[category.face] * category.face

    if category is Category.YAHTZEE:
        return YAHTZEE_SCORE if is_yahtzee(values) else 0

    if yahtzee_joker_eligible and is_yahtzee(values) and category in JOKER_CATEGORIES:
        return JOKER_BONUS

    if category is Category.THREE_OF_A_KIND:
        return total if _has_n_of_a_kind(counts, 3) else 0
    if category is Category.FOUR_OF_A_KIND:
        return total if _has_n_of_a_kind(counts, 4) else 0
    if category is Category.FULL_HOUSE:
        return FULL_HOUSE_SCORE if _is_full_house(counts) else 0
    if category is Category.SMALL_STRAIGHT:
        return SMALL_STRAIGHT_SCORE if _is_small_straight(values) else 0
    if category is Category.LARGE_STRAIGHT:
        return LARGE_STRAIGHT_SCORE if _is_large_straight(values) else 0
    if category is Category.CHANCE:
        return total
    raise ValueError(f"unknown category {category!r}")
