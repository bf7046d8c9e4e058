import random
from dataclasses import dataclass
from typing import Optional

DICE_COUNT = 5
MIN_FACE = 1
MAX_FACE = 6


@dataclass
class Die:
    value: int
    held: bool = False

    def to_dict(self):
        return {'value': self.value, 'held': self.held}


def roll_die(rng: Optional[random.Random] = None) -> Die:
    """A freshly thrown, unheld die."""
    rng = rng or random
    return Die(value=rng.randint(MIN_FACE, MAX_FACE), held=False)


def throw_dice(rng: Optional[random.Random] = None):
    return [roll_die(rng) for _ in range(DICE_COUNT)]


def face_values(dice):
    """Face values of ``dice``, which may hold Die objects or plain ints."""
    return [d.value if isinstance(d, Die) else int(d) for d in dice]
