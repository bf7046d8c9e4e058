from enum import IntEnum
from typing import Optional


class Category(IntEnum):
    """The thirteen scorecard rows.

    The ordinal is part of the public interface: it is the index used by
    ``POST /mark/<index>`` and the order rows are displayed and archived in.
    """

    ACES = 0
    TWOS = 1
    THREES = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    THREE_OF_A_KIND = 6
    FOUR_OF_A_KIND = 7
    FULL_HOUSE = 8
    SMALL_STRAIGHT = 9
    LARGE_STRAIGHT = 10
    YAHTZEE = 11
    CHANCE = 12

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def face(self) -> Optional[int]:
        """Die face counted by an upper-section row, None for the lower section."""
        if self <= Category.SIXES:
            return int(self) + 1
        return None

    @classmethod
    def from_index(cls, index) -> Optional['Category']:
        try:
            return cls(int(index))
        except (TypeError, ValueError):
            return None

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Category.ACES: 'Aces',
    Category.TWOS: 'Twos',
    Category.THREES: 'Threes',
    Category.FOURS: 'Fours',
    Category.FIVES: 'Fives',
    Category.SIXES: 'Sixes',
    Category.THREE_OF_A_KIND: 'Three of a kind',
    Category.FOUR_OF_A_KIND: 'Four of a kind',
    Category.FULL_HOUSE: 'Full house',
    Category.SMALL_STRAIGHT: 'Small straight',
    Category.LARGE_STRAIGHT: 'Large straight',
    Category.YAHTZEE: 'Yahtzee',
    Category.CHANCE: 'Chance',
}

CATEGORY_COUNT = len(Category)
