"""Pick-the-larger-quantity game with per-unit-pair difficulty progression."""

import importlib.metadata

__version__ = importlib.metadata.version("py_unitsgame")
__author__ = "py_unitsgame contributors"
__copyright__ = (
    "Copyright 2026 py_unitsgame contributors",
)

__credits__ = ["py_unitsgame contributors"]

# Standard library imports
import importlib.resources
import os
import sys
from typing import Dict, Optional, Union

# Local imports
from .logger import logger as log
from .settings import Tuning

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load tuning from a .pyug.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyug.toml or pyug.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pyug_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for a pyug.toml file starting from the specified directory and walking up.

        Returns:
            The absolute path to the file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            pyug_paths = [
                os.path.join(current_dir, '.pyug.toml'),
                os.path.join(current_dir, 'pyug.toml'),
            ]
            for pyug_path in pyug_paths:
                if os.path.exists(pyug_path):
                    return os.path.abspath(pyug_path)

            parent_dir = os.path.dirname(current_dir)
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pyug_toml()) is None:
            filepath = find_pyug_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pyug := _config.get('pyug'):
                if tuning := _pyug.get('tuning'):
                    Tuning.set(**tuning)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pyug.tuning` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pyug` section")

    log.debug("Tuning load success")


def _basic_config(filename: Optional[str] = None,
                  tuning: Optional[Dict[str, Union[float, int]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load tuning from file or Mapping.

    Args:
        filename: Configuration file path
        tuning: Dictionary of tuning values
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and tuning are provided, or a tuning value is invalid
    """
    if filename and tuning:
        raise ValueError("Can't use tuning and config file at same time")
    if not filename and tuning:
        Tuning.set(**tuning)
    else:
        # trying to load definitions from pyug.toml
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package."""
    return str(importlib.resources.files('py_unitsgame').joinpath(path))


def _load_easy_tuning() -> None:
    """Load the slow-progression tuning preset."""
    _basic_config(_resolve_resource_path('assets/pyug-easy.toml'), suppress_warnings=True)


def _load_hard_tuning() -> None:
    """Load the fast-progression tuning preset."""
    _basic_config(_resolve_resource_path('assets/pyug-hard.toml'), suppress_warnings=True)


loadEasyTuning = _load_easy_tuning
loadHardTuning = _load_hard_tuning

basicConfig = _basic_config

basicConfig()


from .challenge import ChoiceSelection, Choice, Challenge, generate_challenge
from .exceptions import (UnitTypeError, UnitConversionError, UnitPairError, QuantityAliasError,
                         GeneratorRuntimeError, DegenerateWindowError)
from .game import GameState, Game
from .logger import logger, enable_file_logging, disable_file_logging
from .unit import (Quantity, QuantityAliases, Unit, UnitProps, UnitPropsDict, UnitPair, QuantityPairsDict,
                   UnitRange, UnitRangesDict, convert)

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip typing helpers
    "Dict", "Optional", "Union",
    # Skip submodules
    "challenge", "constants", "exceptions", "game", "settings", "unit",
    # Skip private/internal symbols
    "_load_config", "_basic_config", "_resolve_resource_path",
    "_load_easy_tuning", "_load_hard_tuning", "log",
}
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
