import logging
import random

import pytest

from py_unitsgame.challenge import Challenge, Choice, ChoiceSelection
from py_unitsgame.game import Game, GameState
from py_unitsgame.unit import Quantity, Unit, UnitPair

TEMPERATURE = UnitPair.of(Unit.Celsius, Unit.Fahrenheit)


def _wrong(game):
    if game.challenge.correct_selection is ChoiceSelection.Left:
        return ChoiceSelection.Right
    return ChoiceSelection.Left


def _fixed_challenge():
    return Challenge(
        TEMPERATURE,
        left=Choice(Unit.Celsius, 30.0, 30.0),
        right=Choice(Unit.Celsius, 10.0, 10.0),
    )


class TestNewGame:
    @pytest.mark.parametrize("quantity", list(Quantity), ids=lambda q: q.name)
    def test_new_with_single_quantity(self, quantity, rng):
        game = Game.new_with_single_quantity(quantity, rng)
        assert game.in_progress
        assert game.state is GameState.InProgress
        assert game.score == 0
        assert set(game.levels) == set(quantity.unit_pairs)
        assert all(level == 0 for level in game.levels.values())
        assert game.challenge.unit_pair in quantity.unit_pairs
        assert game.quantities == (quantity,)

    def test_new_with_quantities(self, rng):
        game = Game.new_with_quantities([Quantity.Length, Quantity.Mass, Quantity.Length], rng)
        assert game.quantities == (Quantity.Length, Quantity.Mass)
        assert set(game.levels) == set(Quantity.Length.unit_pairs) | set(Quantity.Mass.unit_pairs)

    def test_new_with_all_quantities(self, rng):
        game = Game.new_with_quantities(Quantity, rng)
        assert len(game.levels) == sum(len(q.unit_pairs) for q in Quantity)

    def test_empty_selection(self):
        with pytest.raises(ValueError):
            Game.new_with_quantities([])
        with pytest.raises(ValueError):
            Game({})

    def test_default_random_source(self):
        assert Game.new_with_single_quantity(Quantity.Temperature).in_progress

    def test_initial_pair_is_uniform(self, rng):
        seen = {Game.new_with_single_quantity(Quantity.Length, rng).challenge.unit_pair for _ in range(200)}
        assert seen == set(Quantity.Length.unit_pairs)


class TestPick:
    def test_correct_pick_increases_level(self, rng):
        game = Game({TEMPERATURE: 3}, rng)
        game.challenge = _fixed_challenge()
        game.pick(ChoiceSelection.Left)
        assert game.levels[TEMPERATURE] == 4
        assert game.in_progress
        assert game.score == 1

    def test_wrong_pick_stops_game(self, rng):
        game = Game({TEMPERATURE: 3}, rng)
        challenge = _fixed_challenge()
        game.challenge = challenge
        game.pick(ChoiceSelection.Right)
        assert game.levels[TEMPERATURE] == 3
        assert not game.in_progress
        assert game.state is GameState.Ended
        assert game.challenge is challenge

    def test_level_monotonic_on_success(self, rng):
        game = Game.new_with_single_quantity(Quantity.Temperature, rng)
        for expected in range(1, 51):
            game.pick(game.challenge.correct_selection)
            assert game.in_progress
            assert game.levels[TEMPERATURE] == expected
            assert game.score == expected

    def test_untracked_pair_defaults_to_first_level(self, rng):
        game = Game({TEMPERATURE: 0}, rng)
        meter_foot = UnitPair.of(Unit.Meter, Unit.Foot)
        game.challenge = Challenge(
            meter_foot,
            left=Choice(Unit.Meter, 10.0, 32.8),
            right=Choice(Unit.Foot, 20.0, 6.1),
        )
        game.pick(ChoiceSelection.Left)
        assert game.levels[meter_foot] == 1
        assert game.level_of(Unit.Foot, Unit.Meter) == 1

    def test_levels_are_tracked_per_pair(self, rng):
        game = Game.new_with_single_quantity(Quantity.Length, rng)
        for _ in range(200):
            pair = game.challenge.unit_pair
            before = dict(game.levels)
            game.pick(game.challenge.correct_selection)
            assert game.levels[pair] == before[pair] + 1
            assert {p: lvl for p, lvl in game.levels.items() if p != pair} == \
                   {p: lvl for p, lvl in before.items() if p != pair}
        assert sum(game.levels.values()) == 200
        assert all(level > 0 for level in game.levels.values())

    def test_next_challenge_uses_tracked_level(self, monkeypatch, rng):
        import py_unitsgame.game as game_module

        calls = []
        real = game_module.generate_challenge

        def spy(pair, level, rng_):
            calls.append((pair, level))
            return real(pair, level, rng_)

        monkeypatch.setattr(game_module, 'generate_challenge', spy)
        game = Game.new_with_single_quantity(Quantity.Temperature, rng)
        game.pick(game.challenge.correct_selection)
        game.pick(game.challenge.correct_selection)
        assert calls == [(TEMPERATURE, 0), (TEMPERATURE, 1), (TEMPERATURE, 2)]

    def test_terminal_on_failure(self, rng, caplog):
        game = Game.new_with_single_quantity(Quantity.Length, rng)
        game.pick(_wrong(game))
        assert not game.in_progress
        levels = dict(game.levels)
        challenge = game.challenge
        with caplog.at_level(logging.WARNING, logger='py_unitsgame'):
            for selection in (ChoiceSelection.Left, ChoiceSelection.Right) * 5:
                game.pick(selection)
                assert not game.in_progress
        assert game.levels == levels
        assert game.challenge is challenge
        assert game.score == 0
        assert "game has ended" in caplog.text

    def test_seeded_games_are_reproducible(self):
        def run(seed):
            game = Game.new_with_quantities(Quantity, random.Random(seed))
            for _ in range(20):
                game.pick(game.challenge.correct_selection)
            return game.levels, game.challenge

        assert run(42) == run(42)

    def test_repr(self, rng):
        game = Game.new_with_single_quantity(Quantity.Temperature, rng)
        assert repr(game).startswith('<Game: in progress, score=0, levels={°C/°F: 0}')
