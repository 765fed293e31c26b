"""Game engine: per-unit-pair difficulty progression.

A game tracks one level per unit pair. Each correct pick raises the level of the pair that
was just answered and draws the next pair uniformly among all tracked pairs, so difficulty
progresses independently per pair while pairs are interleaved. The first wrong pick ends
the game.

Examples:
    >>> game = Game.new_with_single_quantity(Quantity.Temperature)
    >>> game.in_progress
    True
    >>> game.pick(game.challenge.correct_selection)
    >>> game.levels[UnitPair.of(Unit.Celsius, Unit.Fahrenheit)]
    1
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple

from py_unitsgame.challenge import Challenge, ChoiceSelection, generate_challenge
from py_unitsgame.logger import logger
from py_unitsgame.unit import Quantity, Unit, UnitPair

__all__ = (
    'GameState',
    'Game',
)


class GameState(Enum):
    InProgress = 'in progress'
    Ended = 'ended'


class Game:
    """One round of play, from the first challenge to the first wrong pick.

    Attributes:
        state: `GameState.InProgress` until a wrong pick, then `GameState.Ended` for good.
        levels: Level per tracked unit pair.
        challenge: Current challenge; left in place after the game ends.
        score: Number of correct picks so far.

    Note:
        Not safe for concurrent `pick` calls; serialize access externally.
    """

    def __init__(self, levels: Mapping[UnitPair, int], rng: Optional[random.Random] = None):
        """
        Args:
            levels: Initial level per unit pair; at least one pair is required.
            rng: Random source for pair selection and challenge generation;
                 a fresh unseeded `random.Random` when omitted.

        Raises:
            ValueError: If `levels` is empty.
        """
        if not levels:
            raise ValueError("Game needs at least one unit pair")
        self._rng: random.Random = rng if rng is not None else random.Random()
        self.levels: Dict[UnitPair, int] = dict(levels)
        self.state: GameState = GameState.InProgress
        self.score: int = 0
        self.challenge: Challenge = self._next_challenge()

    @classmethod
    def new_with_single_quantity(cls, quantity: Quantity, rng: Optional[random.Random] = None) -> Game:
        """Start a game over all unit pairs of `quantity`, each at level 0."""
        return cls.new_with_quantities((quantity,), rng)

    @classmethod
    def new_with_quantities(cls, quantities: Iterable[Quantity], rng: Optional[random.Random] = None) -> Game:
        """Start a game over the unit pairs of several quantities, each at level 0.

        Raises:
            ValueError: If no quantity is given.
        """
        quantities = tuple(dict.fromkeys(quantities))
        if not quantities:
            raise ValueError("At least one quantity is required")
        levels = {pair: 0 for quantity in quantities for pair in quantity.unit_pairs}
        game = cls(levels, rng)
        logger.info(f"New game: {', '.join(q.name for q in quantities)} ({len(levels)} unit pairs)")
        return game

    @property
    def in_progress(self) -> bool:
        return self.state is GameState.InProgress

    @property
    def quantities(self) -> Tuple[Quantity, ...]:
        return tuple(dict.fromkeys(pair.quantity for pair in self.levels))

    def level_of(self, a: Unit, b: Unit) -> int:
        """Level of the pair formed by `a` and `b`, in either order; 0 if untracked."""
        return self.levels.get(UnitPair.of(a, b), 0)

    def _next_challenge(self) -> Challenge:
        pair = self._rng.choice(list(self.levels))
        return generate_challenge(pair, self.levels.get(pair, 0), self._rng)

    def pick(self, selection: ChoiceSelection) -> None:
        """Submit the player's pick for the current challenge.

        A correct pick raises the level of the answered pair and replaces the challenge
        with one for a randomly chosen tracked pair. A wrong pick ends the game and keeps
        the challenge for display. Picks on an ended game are ignored.
        """
        if not self.in_progress:
            logger.warning(f"Ignoring {selection.name} pick: game has ended")
            return
        if self.challenge.is_correct(selection):
            pair = self.challenge.unit_pair
            self.levels[pair] = self.levels.get(pair, 0) + 1
            self.score += 1
            logger.debug(f"Correct {selection.name} pick, {pair} is now at level {self.levels[pair]}")
            self.challenge = self._next_challenge()
        else:
            self.state = GameState.Ended
            logger.info(f"Game over after {self.score} correct picks")

    def __repr__(self) -> str:
        levels = ', '.join(f'{pair}: {level}' for pair, level in self.levels.items())
        return f'<Game: {self.state.value}, score={self.score}, levels={{{levels}}}, challenge={self.challenge}>'
