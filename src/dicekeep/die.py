"""Dice producing the rolls handed to combiners."""

import logging
import operator

import numpy as np

from .combiners import Combiner, SingleValueCombiner
from .exceptions import ConfigurationError, InvalidValueError
from .utils import to_py_scalar
from .validators import check_integer, check_non_negative_integer


def create_sides(first, last, increment, less_equal=operator.le):
    """Lists `first`, `increment(first)`, ... while values stay `less_equal` to `last`.

    `increment` may return `None` to stop early.
    """
    sides = []
    cursor = first
    while cursor is not None and less_equal(cursor, last):
        sides.append(cursor)
        cursor = increment(cursor)
    return sides


def create_die_sides(side_count=6):
    """Numeric sides of a die.

    A positive `side_count` gives 1..side_count, a negative one gives
    -1..side_count counting down, and zero gives no sides.
    """
    try:
        check_integer(side_count)
    except InvalidValueError as exc:
        raise ConfigurationError(f"Invalid number of sides {side_count!r}") from exc

    if side_count < 0:
        return create_sides(-1, side_count, lambda value: value - 1, operator.ge)
    return create_sides(1, side_count, lambda value: value + 1)


def _generator(rng):
    return rng if rng is not None else np.random.default_rng()


class SimpleDie:

    def __init__(self, sides=None, side_count=6):
        if sides is None:
            sides = create_die_sides(side_count)
        if isinstance(sides, (str, bytes)) or not hasattr(sides, "__len__"):
            raise ConfigurationError(f"Cannot construct a die from sides {sides!r}")
        if len(sides) == 0:
            raise ConfigurationError("A die needs at least one side")
        self._sides = tuple(to_py_scalar(side) for side in sides)

    def __repr__(self):
        return f"SimpleDie({list(self._sides)})"

    @property
    def sides(self):
        return self._sides

    @property
    def side_count(self):
        return len(self._sides)

    def roll(self, rng=None):
        """Rolls the die once.

        Args:
          rng: A `numpy.random.Generator`. Defaults to a freshly seeded one.
        """
        return self._sides[int(_generator(rng).integers(self.side_count))]

    def roll_many(self, count, rng=None):
        """Rolls the die `count` times in one draw."""
        indexes = _generator(rng).integers(self.side_count, size=count)
        return [self._sides[index] for index in indexes]

    def repeat(self, count, combiner=None):
        """A pool of `count` copies of this die."""
        try:
            check_non_negative_integer(count)
        except InvalidValueError as exc:
            raise ConfigurationError(f"Invalid number of dice {count!r}") from exc
        return DicePool([self] * count, combiner)


class DicePool:
    """A group of dice rolled together.

    Members are dice or other pools. Rolling a pool rolls every member in
    order and concatenates their results into one roll. If a combiner is
    set, the pool result is the combiner's result for that roll.
    """

    def __init__(self, members, combiner=None):
        members = list(members)
        for member in members:
            if not callable(getattr(member, "roll", None)):
                raise ConfigurationError(f"Pool member {member!r} cannot be rolled")
        if combiner is not None and not isinstance(combiner, Combiner):
            raise ConfigurationError(f"{combiner!r} is not a combiner")
        self.members = tuple(members)
        self.combiner = combiner

    def __len__(self):
        return len(self.members)

    def roll_values(self, rng=None):
        """The roll before combining: one entry per die.

        A nested pool contributes its own result. It is spliced in unless the
        nested pool chooses a single value.
        """
        rng = _generator(rng)
        roll = []
        for member in self.members:
            result = member.roll(rng)
            if (isinstance(member, DicePool)
                    and not isinstance(member.combiner, SingleValueCombiner)):
                roll.extend(result)
            else:
                roll.append(result)
        return roll

    def roll(self, rng=None):
        roll = self.roll_values(rng)
        logging.debug("Rolled %s.", roll)
        if self.combiner is None:
            return roll
        return self.combiner.combine(roll)
