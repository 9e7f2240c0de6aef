"""
Dough formulation engine.

Turns a target number of dough balls and a ball weight into absolute
ingredient weights for a catalog style, optionally splitting flour, water and
yeast between a pre-ferment and the final mix.

The total dough weight is ``ball_count * ball_weight_grams``. Flour is the
100% reference, so::

    total_flour = total_weight / (sum_of_bakers_percentages / 100)

and every other ingredient is its percentage of ``total_flour``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from string import Template
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from dough_calc import config
from dough_calc.exceptions import NegativeRemainderError
from dough_calc.logging import get_logger, raise_if_not, raise_log
from dough_calc.styles import STYLES, StyleDefinition, StyleKey, get_style

logger = get_logger(__name__)

YEAST_LABEL = "Instant Dry Yeast"


@dataclass(frozen=True)
class Ingredient:
    name: str
    quantity: str


@dataclass(frozen=True)
class DoughTotals:
    flour: float
    water: float
    salt: float
    yeast: float
    oil: float = 0
    sugar: float = 0

    @property
    def total_weight(self) -> float:
        return self.flour + self.water + self.salt + self.yeast + self.oil + self.sugar


@dataclass(frozen=True)
class PreFermentSplit:
    """Pre-ferment amounts and what remains of the totals for the final mix."""

    flour: float
    water: float
    yeast: float
    final_flour: float
    final_water: float
    final_yeast: float

    @property
    def weight(self) -> float:
        return self.flour + self.water + self.yeast


@dataclass(frozen=True)
class CalculationInput:
    style_key: Union[StyleKey, str]
    ball_count: int
    ball_weight_grams: float
    pre_ferment_flour_pct: Optional[float] = None
    dough_hydration_pct: Optional[float] = None


@dataclass(frozen=True)
class CalculationResult:
    style_name: str
    final_ingredients: Tuple[Ingredient, ...]
    final_steps: Tuple[str, ...]
    hydration_used: float
    totals: DoughTotals
    pre_ferment_ingredients: Optional[Tuple[Ingredient, ...]] = None
    pre_ferment_pct_used: Optional[float] = None
    pre_ferment_steps: Optional[Tuple[str, ...]] = None
    pre_ferment_split: Optional[PreFermentSplit] = None

    @property
    def has_pre_ferment(self) -> bool:
        return self.pre_ferment_split is not None

    def to_dict(self) -> Dict[str, Any]:
        """Result in the camelCase shape consumed by the web front end."""
        out: Dict[str, Any] = {
            "doughType": self.style_name,
            "ingredients": [_ingredient_dict(i) for i in self.final_ingredients],
            "hydrationUsed": self.hydration_used,
            "fermentationSteps": list(self.final_steps),
        }
        if self.has_pre_ferment:
            out["preFermentIngredients"] = [
                _ingredient_dict(i) for i in self.pre_ferment_ingredients
            ]
            out["preFermentPercentageUsed"] = self.pre_ferment_pct_used
            out["preFermentationSteps"] = list(self.pre_ferment_steps)
        return out


def _ingredient_dict(ingredient: Ingredient) -> Dict[str, str]:
    return {"name": ingredient.name, "quantity": ingredient.quantity}


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round halves upwards (2.5 -> 3), unlike the built-in banker's `round`."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_grams(value: float) -> str:
    """
    Render a weight in grams. Integral values print without a fractional part.

    >>> format_grams(455.0)
    '455g'
    >>> format_grams(12.7)
    '12.7g'
    """
    if float(value).is_integer():
        return f"{int(value)}g"
    return f"{value}g"


def format_yeast(weight: float) -> str:
    """
    Render a yeast weight with a precision that suits its size.

    Amounts below 0.01 g show as a pinch, amounts below 0.1 g keep two
    decimals and anything larger keeps one.
    """
    if weight < config.YEAST_PINCH_THRESHOLD:
        return "< 0.01g (a tiny pinch)"
    if weight < config.YEAST_FINE_THRESHOLD:
        return format_grams(round_half_up(weight, 2))
    return format_grams(round_half_up(weight, 1))


def render_steps(steps, count: int, noun: Tuple[str, str]) -> Tuple[str, ...]:
    """Fill the ``$portions`` marker with e.g. "3 portions" or "1 baking pan"."""
    singular, plural = noun
    portions = f"{count} {singular if count == 1 else plural}"
    return tuple(Template(step).substitute(portions=portions) for step in steps)


def _resolve_water_pct(style: StyleDefinition, hydration_override) -> float:
    if style.hydration_adjustable and config.in_range(
        hydration_override, config.DOUGH_HYDRATION_RANGE
    ):
        return hydration_override
    return style.bakers_percentages.water


def _percentage_of(flour: float, pct: Optional[float], decimals: int) -> float:
    if not pct:
        return 0
    return round_half_up(flour * (pct / 100), decimals)


def calculate_recipe(
    calc_input: CalculationInput,
    styles: Mapping[StyleKey, StyleDefinition] = STYLES,
) -> CalculationResult:
    """
    Compute the ingredient weights and instructions for one batch of dough.

    Parameters
    ----------
    calc_input
        The style, batch size and optional overrides. A pre-ferment flour
        percentage outside 10-80 or a hydration outside 50-100 is ignored and
        the style default is used. Hydration overrides only apply to styles
        marked `hydration_adjustable`.
    styles
        The style catalog. Defaults to the built-in read-only catalog.

    Returns
    -------
    CalculationResult
        A fresh result; nothing shared is modified.

    Raises
    ------
    UnknownStyleError
        if the style key is not in the catalog
    NegativeRemainderError
        if the pre-ferment would consume more flour or water than the whole dough holds
    ValueError
        if the ball count or ball weight is not positive
    """
    style = get_style(calc_input.style_key, styles)
    raise_if_not(
        calc_input.ball_count > 0,
        f"ball_count must be > 0, got {calc_input.ball_count}",
        logger,
    )
    raise_if_not(
        calc_input.ball_weight_grams > 0,
        f"ball_weight_grams must be > 0, got {calc_input.ball_weight_grams}",
        logger,
    )

    water_pct = _resolve_water_pct(style, calc_input.dough_hydration_pct)
    percentages = replace(style.bakers_percentages, water=water_pct)

    total_weight = calc_input.ball_count * calc_input.ball_weight_grams
    percentage_sum = percentages.total
    logger.debug(
        "Calculating %s for %d x %sg (%sg total, %s%% hydration)",
        style.name,
        calc_input.ball_count,
        calc_input.ball_weight_grams,
        total_weight,
        water_pct,
    )

    flour = round_half_up(total_weight / (percentage_sum / 100), 0)
    totals = DoughTotals(
        flour=flour,
        water=_percentage_of(flour, water_pct, 0),
        salt=_percentage_of(flour, percentages.salt, 1),
        yeast=_percentage_of(flour, percentages.yeast, 2),
        oil=_percentage_of(flour, percentages.oil, 0),
        sugar=_percentage_of(flour, percentages.sugar, 0),
    )

    extras = []
    if totals.oil > 0:
        extras.append(Ingredient(style.oil_label, format_grams(totals.oil)))
    if totals.sugar > 0:
        extras.append(Ingredient("Sugar", format_grams(totals.sugar)))

    final_steps = render_steps(style.steps, calc_input.ball_count, style.portion_noun)

    if style.pre_ferment is None:
        final_ingredients = (
            Ingredient(style.flour_label, format_grams(totals.flour)),
            Ingredient("Water", format_grams(totals.water)),
            Ingredient("Salt", format_grams(totals.salt)),
            Ingredient(YEAST_LABEL, format_yeast(totals.yeast)),
            *extras,
        )
        return CalculationResult(
            style_name=style.name,
            final_ingredients=final_ingredients,
            final_steps=final_steps,
            hydration_used=water_pct,
            totals=totals,
        )

    pf_spec = style.pre_ferment
    if config.in_range(calc_input.pre_ferment_flour_pct, config.PRE_FERMENT_FLOUR_RANGE):
        pre_ferment_pct = calc_input.pre_ferment_flour_pct
    else:
        pre_ferment_pct = pf_spec.default_flour_pct

    pf_flour = round_half_up(totals.flour * (pre_ferment_pct / 100), 0)
    pf_water = round_half_up(pf_flour * (pf_spec.hydration_pct / 100), 0)
    pf_yeast = round_half_up(totals.yeast * (pf_spec.yeast_share_pct / 100), 2)

    final_flour = totals.flour - pf_flour
    final_water = totals.water - pf_water
    final_yeast = totals.yeast - pf_yeast
    if final_flour < 0 or final_water < 0:
        raise_log(
            NegativeRemainderError(pre_ferment_pct, water_pct, final_flour, final_water),
            logger,
        )

    split = PreFermentSplit(
        flour=pf_flour,
        water=pf_water,
        yeast=pf_yeast,
        final_flour=final_flour,
        final_water=final_water,
        final_yeast=final_yeast,
    )

    kind = pf_spec.kind.value
    pre_ferment_ingredients = (
        Ingredient(f"{kind} {style.flour_label}", format_grams(split.flour)),
        Ingredient("Water", format_grams(split.water)),
        Ingredient(YEAST_LABEL, format_yeast(split.yeast)),
    )

    final_ingredients = [
        Ingredient(
            f"Mature {kind}",
            f"~{format_grams(round_half_up(split.weight, 0))} (All from above)",
        ),
        Ingredient(style.flour_label, format_grams(final_flour)),
        Ingredient("Water", format_grams(final_water)),
    ]
    if final_yeast > config.NEGLIGIBLE_YEAST:
        final_ingredients.append(Ingredient(YEAST_LABEL, format_yeast(final_yeast)))
    final_ingredients.append(Ingredient("Salt", format_grams(totals.salt)))
    final_ingredients.extend(extras)

    return CalculationResult(
        style_name=style.name,
        final_ingredients=tuple(final_ingredients),
        final_steps=final_steps,
        hydration_used=water_pct,
        totals=totals,
        pre_ferment_ingredients=pre_ferment_ingredients,
        pre_ferment_pct_used=pre_ferment_pct,
        pre_ferment_steps=pf_spec.steps,
        pre_ferment_split=split,
    )


def get_calculated_recipe(
    style_key: Union[StyleKey, str],
    ball_count: int,
    ball_weight_grams: float,
    pre_ferment_flour_pct: Optional[float] = None,
    dough_hydration_pct: Optional[float] = None,
) -> CalculationResult:
    """Keyword shortcut for `calculate_recipe` against the built-in catalog."""
    return calculate_recipe(
        CalculationInput(
            style_key=style_key,
            ball_count=ball_count,
            ball_weight_grams=ball_weight_grams,
            pre_ferment_flour_pct=pre_ferment_flour_pct,
            dough_hydration_pct=dough_hydration_pct,
        )
    )
