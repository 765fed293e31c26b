"""Global difficulty tuning of the py_unitsgame library"""
from dataclasses import dataclass, fields, MISSING
from typing import Union

from py_unitsgame.constants import cDeltaDivisor, cDeltaDecay, cDeltaFloor
from py_unitsgame.logger import logger

__all__ = ('Tuning',)


class TuningMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class Tuning(metaclass=TuningMeta):
    """Class-level tuning constants for the per-level value gap.

    The gap for a unit at a given level is
    ``max((max_value - min_value) / divisor * decay ** level, floor)``.

    Default Configuration:
        * divisor: 1.9 (level-0 gap is a bit more than half the unit's range)
        * decay: 0.8 (gap shrinks by 20% per level)
        * floor: 1.0 (gap never goes below one unit)

    Examples:
        >>> Tuning.set(decay=0.9)
        >>> Tuning.decay
        0.9
        >>> Tuning.restore_defaults()
        >>> Tuning.decay
        0.8
    """

    divisor: float = cDeltaDivisor
    decay: float = cDeltaDecay
    floor: float = cDeltaFloor

    @classmethod
    def restore_defaults(cls):
        """Reset all tuning constants to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def set(cls, **kwargs: Union[float, int]):
        """Set tuning constants from keyword arguments.

        Unknown attributes are logged as warnings and ignored. Nothing is changed
        unless every value is valid.

        Raises:
            ValueError: If a value is not a number or is out of its valid range
                        (divisor > 1, 0 < decay < 1, floor > 0).
        """
        names = {f.name for f in fields(cls)}
        checked = {}
        for attribute, value in kwargs.items():
            if attribute not in names:
                logger.warning(f"{attribute=} not found in tuning")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Tuning.{attribute} expects a number, got {value!r}")
            value = float(value)
            if attribute == 'divisor' and not value > 1:
                raise ValueError(f"Tuning.divisor must be greater than 1, got {value}")
            if attribute == 'decay' and not 0 < value < 1:
                raise ValueError(f"Tuning.decay must be between 0 and 1, got {value}")
            if attribute == 'floor' and not value > 0:
                raise ValueError(f"Tuning.floor must be positive, got {value}")
            checked[attribute] = value
        for attribute, value in checked.items():
            setattr(cls, attribute, value)
