"""Conversion factors and default tuning constants for the units game.

Constant Categories:
    - Conversion factors: exact (or legally defined) ratios between unit pairs
    - Difficulty tuning: defaults for the per-level value gap

References:
    - NIST Handbook 44, Appendix C: General Tables of Units of Measurement
    - International Yard and Pound Agreement (1959)
"""

# Third-party imports
from typing_extensions import Final

# =============================================================================
# Conversion factors
# =============================================================================

cMetersPerFoot: Final[float] = 0.3048
"""Length of one international foot in meters"""

cKilometersPerMile: Final[float] = 1.609344
"""Length of one statute mile in kilometers"""

cKilometersPerNauticalMile: Final[float] = 1.852
"""Length of one international nautical mile in kilometers"""

cSquareMetersPerSquareFoot: Final[float] = cMetersPerFoot ** 2  # 0.09290304
"""Area of one square foot in square meters"""

cHectaresPerAcre: Final[float] = 0.40468564224
"""Area of one international acre in hectares"""

cMillilitresPerFluidOunce: Final[float] = 29.5735295625
"""Volume of one US customary fluid ounce in millilitres"""

cLitresPerGallon: Final[float] = 3.785411784
"""Volume of one US liquid gallon in litres"""

cGramsPerOunce: Final[float] = 28.349523125
"""Mass of one avoirdupois ounce in grams"""

cKilogramsPerPound: Final[float] = 0.45359237
"""Mass of one avoirdupois pound in kilograms"""

cJoulesPerCalorie: Final[float] = 4.184  # thermochemical calorie
"""Energy of one calorie in joules (also kJ per kcal)"""

cKilopascalsPerPSI: Final[float] = 6.894757293168
"""Pressure of one pound-force per square inch in kilopascals"""

cPSIPerBar: Final[float] = 100.0 / cKilopascalsPerPSI  # 14.503773773...
"""Pressure of one bar in pounds-force per square inch"""

# Temperature: F = C * 9/5 + 32
cFahrenheitPerCelsius: Final[float] = 9.0 / 5.0
cFahrenheitOffset: Final[float] = 32.0

# =============================================================================
# Difficulty tuning defaults
# =============================================================================

cDeltaDivisor: Final[float] = 1.9
"""Unit range divided by this gives the level-0 value gap (slightly less than 2)"""

cDeltaDecay: Final[float] = 0.8
"""Geometric shrink factor of the value gap per level"""

cDeltaFloor: Final[float] = 1.0
"""Smallest value gap, in units of the coarser unit of a pair"""

__all__ = (
    'cMetersPerFoot',
    'cKilometersPerMile',
    'cKilometersPerNauticalMile',
    'cSquareMetersPerSquareFoot',
    'cHectaresPerAcre',
    'cMillilitresPerFluidOunce',
    'cLitresPerGallon',
    'cGramsPerOunce',
    'cKilogramsPerPound',
    'cJoulesPerCalorie',
    'cKilopascalsPerPSI',
    'cPSIPerBar',
    'cFahrenheitPerCelsius',
    'cFahrenheitOffset',
    'cDeltaDivisor',
    'cDeltaDecay',
    'cDeltaFloor',
)
