"""Challenge generation for the units game.

A challenge shows two values of the same quantity in two different units. The generator
places both values a fixed gap apart in the coarser unit of the pair, then rounds each
displayed value away from the other so that exactly one side is larger after conversion.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from py_unitsgame.exceptions import DegenerateWindowError
from py_unitsgame.logger import logger
from py_unitsgame.unit import Number, Quantity, Unit, UnitPair, convert

__all__ = (
    'ChoiceSelection',
    'Choice',
    'Challenge',
    'generate_challenge',
)


class ChoiceSelection(Enum):
    """Side of the card picked by the player."""

    Left = 'left'
    Right = 'right'


@dataclass(frozen=True)
class Choice:
    """One side of a challenge.

    Attributes:
        unit: Unit the value is displayed in.
        value: Displayed value, rounded to the unit's accuracy.
        equivalent: `value` converted into the other unit of the pair.
    """

    unit: Unit
    value: float
    equivalent: float

    def __str__(self) -> str:
        return f'{self.value:.{self.unit.accuracy}f} {self.unit.symbol}'


@dataclass(frozen=True)
class Challenge:
    """Two choices to compare, generated for a unit pair."""

    unit_pair: UnitPair
    left: Choice
    right: Choice

    @property
    def quantity(self) -> Quantity:
        return self.unit_pair.quantity

    def is_correct(self, selection: ChoiceSelection) -> bool:
        """Whether the selected side holds the larger value."""
        if selection is ChoiceSelection.Left:
            return self.left.value > self.right.equivalent
        return self.right.value > self.left.equivalent

    @property
    def correct_selection(self) -> ChoiceSelection:
        if self.is_correct(ChoiceSelection.Left):
            return ChoiceSelection.Left
        return ChoiceSelection.Right

    def __str__(self) -> str:
        return f'1) {self.left}   2) {self.right}'


def _round_up(value: Number, accuracy: int) -> float:
    scale = 10 ** accuracy
    return math.ceil(value * scale) / scale


def _round_down(value: Number, accuracy: int) -> float:
    scale = 10 ** accuracy
    return math.floor(value * scale) / scale


def _choice(unit: Unit, value: float, other: Unit) -> Choice:
    return Choice(unit=unit, value=value, equivalent=convert(value, unit, other))


def generate_challenge(unit_pair: UnitPair, level: int, rng: Optional[random.Random] = None) -> Challenge:
    """Generate a challenge for `unit_pair` at difficulty `level`.

    Both values are placed `delta / 2` either side of a random midpoint drawn in the
    coarser unit, where `delta` is that unit's `level_delta(level)`, so the values end up
    at least the full `delta` apart after rounding. The midpoint window
    keeps both values inside the unit's plausible range.

    Args:
        unit_pair: Pair of units to compare.
        level: Difficulty level, 0 or more.
        rng: Random source; a fresh unseeded `random.Random` when omitted.

    Returns:
        Challenge with exactly one correct side; the coarser unit lands left or right at random.

    Raises:
        DegenerateWindowError: If the coarser unit's range can't hold the value gap.
    """
    if rng is None:
        rng = random.Random()
    big, small = unit_pair.high, unit_pair.low
    delta = big.level_delta(level)
    half = delta / 2

    min_allowed = big.min_value + half
    max_allowed = big.max_value - half
    if min_allowed >= max_allowed:
        raise DegenerateWindowError(big, level, delta)
    midpoint = rng.uniform(min_allowed, max_allowed)

    if rng.random() < 0.5:
        big_value = _round_up(midpoint + half, big.accuracy)
        small_value = _round_down(convert(midpoint - half, big, small), small.accuracy)
    else:
        big_value = _round_down(midpoint - half, big.accuracy)
        small_value = _round_up(convert(midpoint + half, big, small), small.accuracy)

    big_choice = _choice(big, big_value, small)
    small_choice = _choice(small, small_value, big)
    if rng.random() < 0.5:
        challenge = Challenge(unit_pair, left=big_choice, right=small_choice)
    else:
        challenge = Challenge(unit_pair, left=small_choice, right=big_choice)

    logger.debug(f"Generated '{challenge}' for {unit_pair} at {level=} ({delta=:.3f})")
    return challenge
