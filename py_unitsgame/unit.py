"""Unit and conversion table for the units game.

This module defines the supported physical units, the quantities they measure and the
pairs of units the game compares against each other.

Key Features:
    * A hand-authored total order over all units: a unit is "smaller" than another when a
      one-unit step in it is a smaller real-world change (``Unit.Foot < Unit.Meter``)
    * Pairwise linear conversions, some of them composed through an intermediate unit
    * Plausible real-world value range for each unit
    * Per-level value gap (``level_delta``) used by the challenge generator

Examples:
    >>> convert(100, Unit.Celsius, Unit.Fahrenheit)
    212.0
    >>> round(convert(1, Unit.NauticalMile, Unit.Mile), 4)  # composed through Kilometer
    1.1508
    >>> Unit.Foot < Unit.Meter
    True
    >>> UnitPair.of(Unit.Fahrenheit, Unit.Celsius) == UnitPair.of(Unit.Celsius, Unit.Fahrenheit)
    True

Supported Quantities:
    * Temperature: `fahrenheit`, `celsius`
    * Length: `foot`, `meter`, `kilometer`, `mile`, `nautical mile`
    * Area: `square foot`, `square meter`, `acre`, `hectare`
    * Volume: `millilitre`, `fluid ounce`, `litre`, `gallon`
    * Mass: `gram`, `ounce`, `pound`, `kilogram`
    * Energy: `joule`, `calorie`, `kilojoule`, `kilocalorie`
    * Pressure: `kilopascal`, `psi`, `bar`
"""

# Standard library imports
from __future__ import annotations
from enum import Enum, IntEnum
import re
from typing import Callable, Dict, Mapping, NamedTuple, Tuple, Union

# Third-party imports
from typing_extensions import TypeAlias

# Local imports
from py_unitsgame.constants import (cMetersPerFoot, cKilometersPerMile, cKilometersPerNauticalMile,
                                    cSquareMetersPerSquareFoot, cHectaresPerAcre, cMillilitresPerFluidOunce,
                                    cLitresPerGallon, cGramsPerOunce, cKilogramsPerPound, cJoulesPerCalorie,
                                    cKilopascalsPerPSI, cPSIPerBar, cFahrenheitPerCelsius, cFahrenheitOffset)
from py_unitsgame.exceptions import UnitConversionError, UnitPairError, QuantityAliasError
from py_unitsgame.settings import Tuning

Number: TypeAlias = Union[float, int]


class Quantity(Enum):
    """Physical dimension grouping several interchangeable units."""

    Temperature = 1
    Length = 2
    Area = 3
    Volume = 4
    Mass = 5
    Energy = 6
    Pressure = 7

    @property
    def key(self) -> str:
        """One-letter menu key of the quantity."""
        return QuantityAliases[self][0]

    @property
    def unit_pairs(self) -> Tuple[UnitPair, ...]:
        """Convertible unit pairs the game draws challenges from."""
        return QuantityPairsDict[self]

    @property
    def units(self) -> Tuple[Unit, ...]:
        """All units measuring this quantity, in unit order."""
        return tuple(u for u in Unit if u.quantity is self)

    @staticmethod
    def parse(input_: str) -> Quantity:
        """Parse a quantity from its menu key or name.

        Raises:
            TypeError: If input is not a string.
            QuantityAliasError: If nothing matches.

        Examples:
            >>> Quantity.parse('t')
            <Quantity.Temperature: 1>
            >>> Quantity.parse(' Length ')
            <Quantity.Length: 2>
        """
        if not isinstance(input_, str):
            raise TypeError(f"String expected, got {type(input_)=}, {input_=}")
        alias = re.sub(r"\s+", "", input_).lower()
        for quantity, aliases in QuantityAliases.items():
            if alias in aliases:
                return quantity
        raise QuantityAliasError(f"Unsupported quantity {input_=}")


#: Quantity -> accepted aliases; the first alias is the menu key.
QuantityAliases: Mapping[Quantity, Tuple[str, ...]] = {
    Quantity.Temperature: ('t', 'temperature', 'temp'),
    Quantity.Length: ('l', 'length', 'distance'),
    Quantity.Area: ('a', 'area'),
    Quantity.Volume: ('v', 'volume'),
    Quantity.Mass: ('m', 'mass', 'weight'),
    Quantity.Energy: ('e', 'energy'),
    Quantity.Pressure: ('p', 'pressure'),
}


class Unit(IntEnum):
    """Enumeration of all supported units.

    Member values are ranks in a total order over all units: within a quantity, a unit with
    a smaller one-unit real-world step ranks lower. Comparisons across quantities are
    well-defined but meaningless.

    - Temperature: Fahrenheit, Celsius
    - Length: Foot, Meter, Kilometer, Mile, NauticalMile
    - Area: SquareFoot, SquareMeter, Acre, Hectare
    - Volume: Millilitre, FluidOunce, Litre, Gallon
    - Mass: Gram, Ounce, Pound, Kilogram
    - Energy: Joule, Calorie, Kilojoule, Kilocalorie
    - Pressure: Kilopascal, PoundPerSquareInch, Bar
    """

    Fahrenheit = 0
    Celsius = 1

    Foot = 2
    Meter = 3
    Kilometer = 4
    Mile = 5
    NauticalMile = 6

    SquareFoot = 7
    SquareMeter = 8
    Acre = 9
    Hectare = 10

    Millilitre = 11
    FluidOunce = 12
    Litre = 13
    Gallon = 14

    Gram = 15
    Ounce = 16
    Pound = 17
    Kilogram = 18

    Joule = 19
    Calorie = 20
    Kilojoule = 21
    Kilocalorie = 22

    Kilopascal = 23
    PoundPerSquareInch = 24
    Bar = 25

    @property
    def key(self) -> str:
        """Readable name of the unit of measure."""
        return UnitPropsDict[self].name

    @property
    def accuracy(self) -> int:
        """Decimal places of displayed values."""
        return UnitPropsDict[self].accuracy

    @property
    def symbol(self) -> str:
        """Short symbol of the unit of measure."""
        return UnitPropsDict[self].symbol

    @property
    def quantity(self) -> Quantity:
        """Quantity measured by the unit."""
        return UnitPropsDict[self].quantity

    @property
    def min_value(self) -> float:
        """Smallest plausible real-world value."""
        return UnitRangesDict[self].min_value

    @property
    def max_value(self) -> float:
        """Largest plausible real-world value."""
        return UnitRangesDict[self].max_value

    def level_delta(self, level: int) -> float:
        """Value gap, in this unit, between the two sides of a challenge at `level`.

        This is the full distance between the two values, not a half-width: the
        generator places them `delta / 2` either side of its midpoint. The gap starts at the unit's range divided by `Tuning.divisor` and shrinks
        geometrically by `Tuning.decay` per level, never going below `Tuning.floor`.

        Raises:
            ValueError: If level is negative.

        Examples:
            >>> Unit.Celsius.level_delta(0) == (50 - -40) / 1.9
            True
            >>> Unit.Celsius.level_delta(1000)
            1.0
        """
        if level < 0:
            raise ValueError(f"Level can't be negative, got {level=}")
        base = (self.max_value - self.min_value) / Tuning.divisor
        return max(base * Tuning.decay ** level, Tuning.floor)

    def __repr__(self) -> str:
        return UnitPropsDict[self].name


class UnitProps(NamedTuple):
    """Properties and display characteristics of a unit.

    Attributes:
        name: Human-readable name of the unit (e.g., 'meter', 'nautical mile').
        accuracy: Number of decimal places of generated and displayed values.
        symbol: Standard symbol or abbreviation for the unit (e.g., 'm', 'nmi').
        quantity: Quantity the unit measures.
    """

    name: str
    accuracy: int
    symbol: str
    quantity: Quantity


#: Mapping from Unit -> UnitProps used for generation and display of values.
UnitPropsDict: Mapping[Unit, UnitProps] = {
    Unit.Fahrenheit: UnitProps('fahrenheit', 0, '°F', Quantity.Temperature),
    Unit.Celsius: UnitProps('celsius', 0, '°C', Quantity.Temperature),

    Unit.Foot: UnitProps('foot', 0, 'ft', Quantity.Length),
    Unit.Meter: UnitProps('meter', 0, 'm', Quantity.Length),
    Unit.Kilometer: UnitProps('kilometer', 0, 'km', Quantity.Length),
    Unit.Mile: UnitProps('mile', 1, 'mi', Quantity.Length),
    Unit.NauticalMile: UnitProps('nautical mile', 1, 'nmi', Quantity.Length),

    Unit.SquareFoot: UnitProps('square foot', 0, 'ft²', Quantity.Area),
    Unit.SquareMeter: UnitProps('square meter', 0, 'm²', Quantity.Area),
    Unit.Acre: UnitProps('acre', 0, 'ac', Quantity.Area),
    Unit.Hectare: UnitProps('hectare', 0, 'ha', Quantity.Area),

    Unit.Millilitre: UnitProps('millilitre', 0, 'ml', Quantity.Volume),
    Unit.FluidOunce: UnitProps('fluid ounce', 0, 'fl oz', Quantity.Volume),
    Unit.Litre: UnitProps('litre', 0, 'l', Quantity.Volume),
    Unit.Gallon: UnitProps('gallon', 1, 'gal', Quantity.Volume),

    Unit.Gram: UnitProps('gram', 0, 'g', Quantity.Mass),
    Unit.Ounce: UnitProps('ounce', 1, 'oz', Quantity.Mass),
    Unit.Pound: UnitProps('pound', 0, 'lb', Quantity.Mass),
    Unit.Kilogram: UnitProps('kilogram', 0, 'kg', Quantity.Mass),

    Unit.Joule: UnitProps('joule', 0, 'J', Quantity.Energy),
    Unit.Calorie: UnitProps('calorie', 0, 'cal', Quantity.Energy),
    Unit.Kilojoule: UnitProps('kilojoule', 0, 'kJ', Quantity.Energy),
    Unit.Kilocalorie: UnitProps('kilocalorie', 0, 'kcal', Quantity.Energy),

    Unit.Kilopascal: UnitProps('kilopascal', 0, 'kPa', Quantity.Pressure),
    Unit.PoundPerSquareInch: UnitProps('psi', 0, 'psi', Quantity.Pressure),
    Unit.Bar: UnitProps('bar', 1, 'bar', Quantity.Pressure),
}


class UnitPair(NamedTuple):
    """Unordered pair of convertible units, stored as (finer, coarser).

    Always build pairs with `UnitPair.of`, which normalizes the order so that the pair
    can be used as a dictionary key regardless of argument order.
    """

    low: Unit
    high: Unit

    @classmethod
    def of(cls, a: Unit, b: Unit) -> UnitPair:
        """Create a normalized pair.

        Raises:
            UnitPairError: If both units are the same or measure different quantities.
        """
        if a == b:
            raise UnitPairError(f"A unit can't pair with itself: {a!r}")
        if a.quantity is not b.quantity:
            raise UnitPairError(f"{a!r} and {b!r} measure different quantities")
        return cls(min(a, b), max(a, b))

    @property
    def quantity(self) -> Quantity:
        return self.low.quantity

    def other(self, unit: Unit) -> Unit:
        """Return the counterpart of `unit` within the pair."""
        if unit == self.low:
            return self.high
        if unit == self.high:
            return self.low
        raise UnitPairError(f"{unit!r} is not a member of {self}")

    def __str__(self) -> str:
        return f"{self.high.symbol}/{self.low.symbol}"


QuantityPairsDict: Mapping[Quantity, Tuple[UnitPair, ...]] = {
    Quantity.Temperature: (
        UnitPair.of(Unit.Celsius, Unit.Fahrenheit),
    ),
    Quantity.Length: (
        UnitPair.of(Unit.Meter, Unit.Foot),
        UnitPair.of(Unit.Kilometer, Unit.Mile),
        UnitPair.of(Unit.Kilometer, Unit.NauticalMile),
        UnitPair.of(Unit.NauticalMile, Unit.Mile),
    ),
    Quantity.Area: (
        UnitPair.of(Unit.SquareMeter, Unit.SquareFoot),
        UnitPair.of(Unit.Hectare, Unit.Acre),
    ),
    Quantity.Volume: (
        UnitPair.of(Unit.FluidOunce, Unit.Millilitre),
        UnitPair.of(Unit.Gallon, Unit.Litre),
    ),
    Quantity.Mass: (
        UnitPair.of(Unit.Kilogram, Unit.Pound),
        UnitPair.of(Unit.Ounce, Unit.Gram),
    ),
    Quantity.Energy: (
        UnitPair.of(Unit.Calorie, Unit.Joule),
        UnitPair.of(Unit.Kilocalorie, Unit.Kilojoule),
    ),
    Quantity.Pressure: (
        UnitPair.of(Unit.PoundPerSquareInch, Unit.Kilopascal),
        UnitPair.of(Unit.Bar, Unit.PoundPerSquareInch),
    ),
}

# region Conversions
ConversionRule: TypeAlias = Callable[[Number], float]

_DIRECT_CONVERSIONS: Dict[Tuple[Unit, Unit], ConversionRule] = {}


def _register(from_unit: Unit, to_unit: Unit, forward: ConversionRule, backward: ConversionRule) -> None:
    _DIRECT_CONVERSIONS[(from_unit, to_unit)] = forward
    _DIRECT_CONVERSIONS[(to_unit, from_unit)] = backward


def _register_factor(from_unit: Unit, to_unit: Unit, factor: float) -> None:
    """Register ``value_in_to_unit = value_in_from_unit * factor`` and its inverse."""
    _register(from_unit, to_unit, lambda v: v * factor, lambda v: v / factor)


_register(Unit.Celsius, Unit.Fahrenheit,
          lambda c: c * cFahrenheitPerCelsius + cFahrenheitOffset,
          lambda f: (f - cFahrenheitOffset) / cFahrenheitPerCelsius)
_register_factor(Unit.Foot, Unit.Meter, cMetersPerFoot)
_register_factor(Unit.Mile, Unit.Kilometer, cKilometersPerMile)
_register_factor(Unit.NauticalMile, Unit.Kilometer, cKilometersPerNauticalMile)
_register_factor(Unit.SquareFoot, Unit.SquareMeter, cSquareMetersPerSquareFoot)
_register_factor(Unit.Acre, Unit.Hectare, cHectaresPerAcre)
_register_factor(Unit.FluidOunce, Unit.Millilitre, cMillilitresPerFluidOunce)
_register_factor(Unit.Gallon, Unit.Litre, cLitresPerGallon)
_register_factor(Unit.Ounce, Unit.Gram, cGramsPerOunce)
_register_factor(Unit.Pound, Unit.Kilogram, cKilogramsPerPound)
_register_factor(Unit.Calorie, Unit.Joule, cJoulesPerCalorie)
_register_factor(Unit.Kilocalorie, Unit.Kilojoule, cJoulesPerCalorie)
_register_factor(Unit.PoundPerSquareInch, Unit.Kilopascal, cKilopascalsPerPSI)
_register_factor(Unit.Bar, Unit.PoundPerSquareInch, cPSIPerBar)

#: (from, to) -> intermediate unit for conversions without a direct rule
_COMPOSED_CONVERSIONS: Mapping[Tuple[Unit, Unit], Unit] = {
    (Unit.Mile, Unit.NauticalMile): Unit.Kilometer,
    (Unit.NauticalMile, Unit.Mile): Unit.Kilometer,
}


def convert(value: Number, from_unit: Unit, to_unit: Unit) -> Number:
    """Convert a value between two units of the same quantity.

    Args:
        value: Numeric value in `from_unit`.
        from_unit: Unit of `value`.
        to_unit: Target unit.

    Returns:
        Value expressed in `to_unit`; `value` itself when both units are the same.

    Raises:
        TypeError: If either unit is not a `Unit`.
        UnitConversionError: If there is no conversion rule between the units.

    Examples:
        >>> convert(-40, Unit.Fahrenheit, Unit.Celsius)
        -40.0
        >>> convert(1, Unit.Mile, Unit.Kilometer)
        1.609344
    """
    for units in (from_unit, to_unit):
        if not isinstance(units, Unit):
            raise TypeError(f"Type expected: {Unit.__name__}; got: {type(units).__name__} ({units})")
    if from_unit == to_unit:
        return value
    if (rule := _DIRECT_CONVERSIONS.get((from_unit, to_unit))) is not None:
        return rule(value)
    if (via := _COMPOSED_CONVERSIONS.get((from_unit, to_unit))) is not None:
        return convert(convert(value, from_unit, via), via, to_unit)
    raise UnitConversionError(f"No conversion from {from_unit!r} to {to_unit!r}")
# endregion Conversions


# region Ranges
class UnitRange(NamedTuple):
    """Plausible real-world value range of a unit."""

    min_value: float
    max_value: float


#: Hand-authored ranges of reference units
_REFERENCE_RANGES: Mapping[Unit, UnitRange] = {
    Unit.Celsius: UnitRange(-40.0, 50.0),
    Unit.Meter: UnitRange(1.0, 100.0),
    Unit.Kilometer: UnitRange(1.0, 1000.0),
    Unit.SquareMeter: UnitRange(10.0, 500.0),
    Unit.Hectare: UnitRange(1.0, 1000.0),
    Unit.Millilitre: UnitRange(50.0, 2000.0),
    Unit.Litre: UnitRange(1.0, 200.0),
    Unit.Gram: UnitRange(10.0, 1000.0),
    Unit.Kilogram: UnitRange(1.0, 200.0),
    Unit.Joule: UnitRange(100.0, 10000.0),
    Unit.Kilojoule: UnitRange(100.0, 10000.0),
    Unit.Kilopascal: UnitRange(50.0, 1000.0),
}

#: Derived unit -> unit whose range it is converted from
_RANGE_SOURCES: Mapping[Unit, Unit] = {
    Unit.Fahrenheit: Unit.Celsius,
    Unit.Foot: Unit.Meter,
    Unit.Mile: Unit.Kilometer,
    Unit.NauticalMile: Unit.Kilometer,
    Unit.SquareFoot: Unit.SquareMeter,
    Unit.Acre: Unit.Hectare,
    Unit.FluidOunce: Unit.Millilitre,
    Unit.Gallon: Unit.Litre,
    Unit.Ounce: Unit.Gram,
    Unit.Pound: Unit.Kilogram,
    Unit.Calorie: Unit.Joule,
    Unit.Kilocalorie: Unit.Kilojoule,
    Unit.PoundPerSquareInch: Unit.Kilopascal,
    Unit.Bar: Unit.PoundPerSquareInch,
}


def _resolve_range(unit: Unit) -> UnitRange:
    if (reference := _REFERENCE_RANGES.get(unit)) is not None:
        return reference
    source = _RANGE_SOURCES[unit]
    source_range = _resolve_range(source)
    ends = (convert(source_range.min_value, source, unit), convert(source_range.max_value, source, unit))
    return UnitRange(min(ends), max(ends))


UnitRangesDict: Mapping[Unit, UnitRange] = {unit: _resolve_range(unit) for unit in Unit}
# endregion Ranges


__all__ = (
    'Number',
    'Quantity',
    'QuantityAliases',
    'Unit',
    'UnitProps',
    'UnitPropsDict',
    'UnitPair',
    'QuantityPairsDict',
    'UnitRange',
    'UnitRangesDict',
    'convert',
)
