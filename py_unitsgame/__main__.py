"""Text front end: `pyug` / `python -m py_unitsgame`."""
import argparse
import logging
import random
from typing import Callable, Iterable, Optional, Sequence, Tuple

from py_unitsgame import __version__, basicConfig
from py_unitsgame.challenge import ChoiceSelection
from py_unitsgame.exceptions import QuantityAliasError
from py_unitsgame.game import Game
from py_unitsgame.logger import logger
from py_unitsgame.unit import Quantity

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

ALL_QUANTITIES = {'*', 'all'}
QUIT_COMMANDS = {'q'}
SELECTIONS = {'1': ChoiceSelection.Left, '2': ChoiceSelection.Right}


def get_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f'pyug v{__version__}',
        description="Pick the larger of two quantities expressed in different units"
    )
    parser.add_argument('quantities', nargs='*', type=str,
                        help="Quantities to play, by key or name ('*' or 'all' for every quantity); "
                             "shows a menu when omitted")
    parser.add_argument("-s", "--seed", action="store", type=int, default=None,
                        help="Seed the random source for a reproducible game")
    parser.add_argument("-c", "--config", action="store", default=None,
                        help="Path to a .pyug.toml file with tuning")
    parser.add_argument("-v", "--version", action='version',
                        version=f'pyug v{__version__}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")
    return parser


def parse_quantities(values: Iterable[str]) -> Tuple[Quantity, ...]:
    """Parse quantity keys or names; '*' or 'all' selects every quantity.

    Raises:
        QuantityAliasError: If a value matches no quantity.
    """
    selected = []
    for value in values:
        if value.strip().lower() in ALL_QUANTITIES:
            selected.extend(Quantity)
        else:
            selected.append(Quantity.parse(value))
    return tuple(dict.fromkeys(selected))


def menu(input_fn: InputFn = input, print_fn: PrintFn = print) -> Optional[Tuple[Quantity, ...]]:
    """Ask for quantities to play until a valid choice; None when the player quits."""
    while True:
        for quantity in Quantity:
            print_fn(f"{quantity.key} = {quantity.name}")
        print_fn("* = all")
        print_fn("q = quit")
        try:
            choice = input_fn("Choose: ").strip().lower()
        except EOFError:
            return None
        if choice in QUIT_COMMANDS:
            return None
        try:
            return parse_quantities([choice])
        except QuantityAliasError:
            print_fn(f"Invalid choice: {choice!r}")


def play(game: Game, input_fn: InputFn = input, print_fn: PrintFn = print) -> bool:
    """Run one game until it ends; False when the player quits midway."""
    while game.in_progress:
        print_fn(f"[{game.challenge.quantity.name}, score {game.score}] {game.challenge}")
        try:
            choice = input_fn("1? 2? q? ").strip().lower()
        except EOFError:
            return False
        if choice in QUIT_COMMANDS:
            return False
        if (selection := SELECTIONS.get(choice)) is None:
            print_fn(f"Invalid selection: {choice!r}")
            continue
        game.pick(selection)
        if not game.in_progress:
            challenge = game.challenge
            correct = challenge.left if challenge.correct_selection is ChoiceSelection.Left else challenge.right
            print_fn(f"Wrong: {correct} ({correct.equivalent:.2f} "
                     f"{challenge.unit_pair.other(correct.unit).symbol}) is larger")
    print_fn(f"Game over. Score: {game.score}")
    return True


def main(argv: Optional[Sequence[str]] = None,
         input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    parser = get_arg_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    if args.config is not None:
        try:
            basicConfig(args.config)
        except (OSError, ValueError) as exc:
            parser.error(f"can't load config {args.config}: {exc}")

    try:
        quantities = parse_quantities(args.quantities)
    except QuantityAliasError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed)
    if quantities:
        play(Game.new_with_quantities(quantities, rng), input_fn, print_fn)
        return 0

    while (quantities := menu(input_fn, print_fn)) is not None:
        if not play(Game.new_with_quantities(quantities, rng), input_fn, print_fn):
            break
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
