"""py_unitsgame exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── UnitTypeError
│       └── UnitConversionError
├── ValueError
│   ├── UnitPairError
│   └── QuantityAliasError
└── RuntimeError
    └── GeneratorRuntimeError
        └── DegenerateWindowError

Exception Types
---------------

Unit-Related Exceptions:

- UnitTypeError: Base class for unit-related type errors.

- UnitConversionError: Raised by `convert` when no conversion rule exists between two units.
  This is a programming error in the caller: only units of one `UnitPair` are ever converted.

- UnitPairError: Raised when two units cannot form a pair (same unit, or different quantities).

- QuantityAliasError: Raised when a quantity key or name cannot be parsed.

Generator-Related Exceptions:

- GeneratorRuntimeError: Base class for challenge generation errors; not raised directly.

- DegenerateWindowError: Raised when the midpoint sampling window of a unit is empty, i.e. the
  unit's plausible range is too narrow for the requested value gap. Contains:
  - unit: The unit whose range was sampled
  - level: The requested level
  - delta: The value gap for that level
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from py_unitsgame.unit import Unit

__all__ = (
    'UnitTypeError',
    'UnitConversionError',
    'UnitPairError',
    'QuantityAliasError',
    'GeneratorRuntimeError',
    'DegenerateWindowError',
)


class UnitTypeError(TypeError):
    """Unit type error."""


class UnitConversionError(UnitTypeError):
    """Unit conversion error."""


class UnitPairError(ValueError):
    """Unit pair error."""


class QuantityAliasError(ValueError):
    """Quantity alias error."""


class GeneratorRuntimeError(RuntimeError):
    """Challenge generator error."""


class DegenerateWindowError(GeneratorRuntimeError):
    """Exception for an empty midpoint sampling window.

    Contains:
    - The unit whose range was sampled
    - The requested level
    - The value gap for that level
    """

    def __init__(self, unit: Unit, level: int, delta: float):
        self.unit: Unit = unit
        self.level: int = level
        self.delta: float = delta
        msg = (f'Range {unit.min_value}..{unit.max_value} of {unit!r} '
               f'is too narrow for value gap {delta} at level {level}')
        super().__init__(msg)
