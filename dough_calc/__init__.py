"""
dough_calc
----------

Pizza and bread dough formulation from baker's percentages.
"""

from dough_calc.engine import (
    CalculationInput,
    CalculationResult,
    DoughTotals,
    Ingredient,
    PreFermentSplit,
    calculate_recipe,
    format_yeast,
    get_calculated_recipe,
)
from dough_calc.exceptions import DoughCalcError, NegativeRemainderError, UnknownStyleError
from dough_calc.styles import STYLES, PreFermentKind, StyleDefinition, StyleKey, get_style

__version__ = "0.1.0"
