"""Policies reducing a roll to the values kept from it.

A roll is a list, tuple or one-dimensional numpy array of values. Every
policy is an immutable `Combiner`; `combine(roll)` may be called any
number of times and keeps no state between calls.

>>> KeepBest(2).combine([3, 5, 2, 5, 1])
[5, 5]
>>> KeepWorst(3).combine([3, 5, 2, 1, 0])
[0, 1, 2]
>>> KeepLast(2).combine([1, 2, 3, 4, 5, 6])
[5, 6]
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from .comparison import Comparison, default_comparison, reversed_comparison
from .exceptions import (
    ComparabilityError,
    ConfigurationError,
    InvalidRollError,
    InvalidValueError,
)
from .search import indirect_binary_search_with_duplicates, insertion_point
from .utils import to_py_scalar
from .validators import check_non_negative_integer

INVALID_ROLL_MESSAGE = "Invalid roll to combine"
EMPTY_ROLL_MESSAGE = "Cannot choose a value from an empty roll"
NON_COMPARABLE_MESSAGE = "Cannot combine a roll containing non-comparable values"


def check_roll(roll) -> Sequence:
    """Returns `roll` if it is a usable roll, otherwise raises `InvalidRollError`."""
    if isinstance(roll, (list, tuple)):
        return roll
    if isinstance(roll, np.ndarray) and roll.ndim == 1:
        return roll
    raise InvalidRollError(INVALID_ROLL_MESSAGE, roll)


def check_count(count):
    try:
        return int(check_non_negative_integer(count))
    except InvalidValueError as exc:
        raise ConfigurationError(
            f"The number of kept values must be a non-negative integer, not {count!r}"
        ) from exc


class Combiner(ABC):
    """A rule choosing the kept values of a roll."""

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def select(self, roll) -> list:
        """Positions in `roll` of the kept values, in result order."""
        ...

    def combine(self, roll):
        """The kept values of `roll`.

        Raises:
          InvalidRollError: `roll` is not a list, tuple or 1-d array, or it is
            empty where a value is required.
          ComparabilityError: Two values of `roll` could not be ordered.
        """
        roll = check_roll(roll)
        return [to_py_scalar(roll[index]) for index in self.select(roll)]

    def show(self, roll, console=None):
        from rich import box
        from rich.console import Console
        from rich.table import Table

        roll = check_roll(roll)
        ranks = {index: rank for rank, index in enumerate(self.select(roll), 1)}

        table = Table(title=self.description, box=box.SIMPLE_HEAVY,
                      min_width=len(self.description) + 4)
        table.add_column("#", justify="right")
        table.add_column("rolled", justify="right")
        table.add_column("kept")
        for index, value in enumerate(roll):
            rank = ranks.get(index)
            table.add_row(
                str(index),
                str(to_py_scalar(value)),
                "" if rank is None else f"[bold green]{rank}[/bold green]",
            )

        console = console if console is not None else Console()
        console.print(table)


class RankingCombiner(Combiner):
    """Keeps the `count` first values of a roll ranked by `ordering()`.

    The roll is consumed in one pass. Kept positions live in a list of
    indexes into the roll, sorted by the ranking, which never grows past
    `count + 1` entries. Values equal under the ranking keep the order in
    which they were rolled.
    """

    count: int
    compare: Comparison

    def __post_init__(self):
        object.__setattr__(self, "count", check_count(self.count))

    @abstractmethod
    def ordering(self) -> Comparison:
        ...

    def select(self, roll):
        roll = check_roll(roll)
        if self.count == 0:
            return []

        compare = self.ordering()
        kept = []
        for index in range(len(roll)):
            value = roll[index]
            position = indirect_binary_search_with_duplicates(
                roll, kept, value, compare=compare)
            if position is None:
                logging.debug("Aborting `%s` at roll index %s.", self.description, index)
                raise ComparabilityError(NON_COMPARABLE_MESSAGE, value, index)
            kept.insert(insertion_point(position), index)
            del kept[self.count:]

        logging.debug("`%s` kept indexes %s of %s values.",
                      self.description, kept, len(roll))
        return kept


@dataclasses.dataclass(frozen=True)
class KeepBest(RankingCombiner):
    """Keeps the `count` greatest values under `compare`, best first."""

    count: int = 1
    compare: Comparison = default_comparison

    @property
    def description(self):
        return f"Keeps the {self.count} best results"

    def ordering(self):
        return reversed_comparison(self.compare)


@dataclasses.dataclass(frozen=True)
class KeepWorst(RankingCombiner):
    """Keeps the `count` least values under `compare`, worst first."""

    count: int = 1
    compare: Comparison = default_comparison

    @property
    def description(self):
        return f"Keeps the {self.count} worst results"

    def ordering(self):
        return self.compare


@dataclasses.dataclass(frozen=True)
class KeepLast(Combiner):
    """Keeps the `count` most recent values in the order they were rolled."""

    count: int = 1

    def __post_init__(self):
        object.__setattr__(self, "count", check_count(self.count))

    @property
    def description(self):
        return f"Keeps the {self.count} last results"

    def select(self, roll):
        length = len(check_roll(roll))
        return list(range(max(0, length - self.count), length))


class SingleValueCombiner(Combiner):
    """A policy whose result is one value rather than a list of values."""

    def combine(self, roll):
        roll = check_roll(roll)
        if len(roll) == 0:
            raise InvalidRollError(EMPTY_ROLL_MESSAGE, roll)
        (index,) = self.select(roll)
        return to_py_scalar(roll[index])


@dataclasses.dataclass(frozen=True)
class KeepNewest(SingleValueCombiner):

    @property
    def description(self):
        return "Chooses the most recent value"

    def select(self, roll):
        return KeepLast(1).select(roll)


@dataclasses.dataclass(frozen=True)
class KeepSingleBest(SingleValueCombiner):

    compare: Comparison = default_comparison

    @property
    def description(self):
        return "Chooses the best of the values"

    def select(self, roll):
        return KeepBest(1, self.compare).select(roll)


@dataclasses.dataclass(frozen=True)
class KeepSingleWorst(SingleValueCombiner):

    compare: Comparison = default_comparison

    @property
    def description(self):
        return "Chooses the worst of the values"

    def select(self, roll):
        return KeepWorst(1, self.compare).select(roll)


KEEP_NEW = KeepNewest()
KEEP_BEST = KeepSingleBest()
KEEP_WORST = KeepSingleWorst()
