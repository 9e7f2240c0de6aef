"""
Dough style catalog.

Each style is described by baker's percentages (flour = 100%), an optional
pre-ferment stage and the instruction templates for the final dough. Final
dough templates may contain the ``$portions`` marker, which is rendered as
"<count> <noun>" with the style's singular or plural portion noun.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from dough_calc.exceptions import UnknownStyleError
from dough_calc.logging import get_logger, raise_log

logger = get_logger(__name__)


class StyleKey(str, Enum):
    NEAPOLITAN = "neapolitan"
    NEW_YORK = "new_york"
    BIGA = "biga"
    POOLISH = "poolish"
    BRAZILIAN = "brazilian"
    FOCACCIA = "focaccia"


class PreFermentKind(str, Enum):
    BIGA = "Biga"
    POOLISH = "Poolish"


@dataclass(frozen=True)
class BakersPercentages:
    water: float
    salt: float
    yeast: float
    oil: Optional[float] = None
    sugar: Optional[float] = None

    @property
    def total(self) -> float:
        """Sum of all percentages including flour itself."""
        return 100 + self.water + self.salt + self.yeast + (self.oil or 0) + (self.sugar or 0)


@dataclass(frozen=True)
class PreFermentSpec:
    kind: PreFermentKind
    default_flour_pct: float
    # hydration of the pre-ferment itself, not of the whole dough
    hydration_pct: float
    yeast_share_pct: float
    steps: Tuple[str, ...]


@dataclass(frozen=True)
class StyleDefinition:
    name: str
    flour_label: str
    bakers_percentages: BakersPercentages
    steps: Tuple[str, ...]
    pre_ferment: Optional[PreFermentSpec] = None
    hydration_adjustable: bool = False
    oil_label: str = "Oil"
    portion_noun: Tuple[str, str] = ("portion", "portions")


_STYLES = {
    StyleKey.NEAPOLITAN: StyleDefinition(
        name="Classic Neapolitan",
        flour_label='"00" Flour',
        bakers_percentages=BakersPercentages(water=62, salt=2.8, yeast=0.1),
        hydration_adjustable=True,
        steps=(
            "Combine flour and most of the water (reserve ~30ml). Mix until shaggy.",
            "Dissolve salt in remaining water and add to dough. Knead for 5-10 mins until smooth.",
            "Add yeast, incorporate fully. Knead for another 5 mins until elastic (windowpane test).",
            "Bulk Ferment: Cover dough and let rise at room temp (~20-24°C) for 2 hours.",
            "Divide and Ball: Divide dough into $portions. Shape each into a smooth ball.",
            "Final Proof: Place balls in lightly oiled containers or a proofing box. Proof at room "
            "temp for 4-6 hours OR cold proof (fridge ~4°C) for 24-72 hours.",
            "Before use (if cold proofed), let balls sit at room temp for 1-2 hours.",
        ),
    ),
    StyleKey.NEW_YORK: StyleDefinition(
        name="New York Style",
        flour_label="Bread Flour (High Gluten)",
        bakers_percentages=BakersPercentages(water=65, salt=2.5, yeast=0.4, oil=2, sugar=1),
        steps=(
            "Combine flour, salt, yeast and sugar in a mixer bowl.",
            "Add water and oil. Mix on low speed with dough hook until combined.",
            "Increase speed to medium-low and knead for 8-12 minutes until smooth, elastic, and "
            "passes windowpane test.",
            "Bulk Ferment: Lightly oil a bowl, place dough in, turn to coat. Cover and let rise at "
            "room temp for 1-2 hours OR proceed directly to cold fermentation.",
            "Divide and Ball: Divide dough into $portions. Shape each into a tight ball.",
            "Cold Proof (Recommended): Place balls in oiled containers/bags. Refrigerate for 24-72 "
            "hours (48h often ideal).",
            "Temper: Before baking, remove dough from fridge and let it sit at room temp for 60-90 "
            "minutes.",
        ),
    ),
    StyleKey.BIGA: StyleDefinition(
        name="Biga (Pre-ferment)",
        flour_label='"00" Flour or Bread Flour',
        bakers_percentages=BakersPercentages(water=68, salt=3, yeast=0.2),
        hydration_adjustable=True,
        pre_ferment=PreFermentSpec(
            kind=PreFermentKind.BIGA,
            default_flour_pct=40,
            hydration_pct=45,
            yeast_share_pct=25,
            steps=(
                "Mix Biga Ingredients: Combine Biga flour, Biga water, and Biga yeast. Mix briefly "
                "until just combined (shaggy, stiff dough). Do not knead.",
                "Ferment Biga: Cover loosely and let ferment at cool room temp (16-18°C) for 12-16 "
                "hours OR in the fridge (4°C) for 24-48 hours.",
            ),
        ),
        steps=(
            "Combine Final Dough Ingredients: In a mixer bowl, combine the mature Biga (tear into "
            "small pieces), remaining flour, remaining yeast, and most of the remaining water.",
            "Mix Low: Mix on low speed until ingredients start coming together.",
            "Add Salt & Remaining Water: Dissolve salt in the last bit of water and add slowly "
            "while mixing on low.",
            "Knead: Increase speed to medium-low and knead for 10-15 minutes until smooth and "
            "elastic.",
            "Bulk Ferment: Cover dough and let rise at room temp for 1-2 hours (watch the dough, "
            "not the clock).",
            "Divide and Ball: Divide dough into $portions and shape into balls.",
            "Final Proof: Place in containers. Proof at room temp for 3-5 hours OR cold proof for "
            "12-48 hours.",
            "Temper: Before use (if cold proofed), let balls sit at room temp for 1-2 hours.",
        ),
    ),
    StyleKey.POOLISH: StyleDefinition(
        name="Poolish (Pre-ferment)",
        flour_label='"00" Flour or All-Purpose Flour',
        bakers_percentages=BakersPercentages(water=70, salt=2.8, yeast=0.15),
        hydration_adjustable=True,
        pre_ferment=PreFermentSpec(
            kind=PreFermentKind.POOLISH,
            default_flour_pct=30,
            hydration_pct=100,
            yeast_share_pct=33,
            steps=(
                "Mix Poolish Ingredients: Whisk together Poolish flour, Poolish water, and Poolish "
                "yeast until smooth (liquid batter).",
                "Ferment Poolish: Cover and let ferment at room temp (~20-22°C) for 8-12 hours, or "
                "until bubbly, domed, and just starting to recede in the center.",
            ),
        ),
        steps=(
            "Combine Final Dough: In a mixer bowl, combine mature Poolish, remaining flour, "
            "remaining yeast, and salt.",
            "Add Water Gradually: Slowly add remaining water while mixing on low speed.",
            "Knead: Knead on medium-low speed for 8-12 minutes until dough is strong and elastic.",
            "Bulk Ferment: Cover dough, let rise at room temp for 1.5-2.5 hours, with folds every "
            "45-60 mins if desired.",
            "Divide and Ball: Gently divide into $portions and shape into balls.",
            "Final Proof: Proof at room temp for 3-4 hours or cold proof for 12-24 hours.",
            "Temper: If cold proofed, temper at room temp for 1-2 hours before use.",
        ),
    ),
    StyleKey.BRAZILIAN: StyleDefinition(
        name="Brazilian Style",
        flour_label="All-Purpose Flour",
        bakers_percentages=BakersPercentages(water=55, salt=1.8, yeast=1.5, oil=5, sugar=3),
        steps=(
            "Combine Dry Ingredients: Whisk flour, salt, yeast, and sugar in a bowl.",
            "Add Wet Ingredients: Add water and oil. Mix until a shaggy dough forms.",
            "Knead: Knead on a lightly floured surface or in a mixer for 8-10 minutes until smooth "
            "and soft.",
            "Bulk Ferment: Place in a lightly oiled bowl, cover, and let rise in a warm place for "
            "1-1.5 hours, or until doubled.",
            "Punch Down & Divide: Gently punch down the dough. Divide into $portions.",
            "Shape & Second Rise: Shape into balls or directly into pizza bases. Let rest/rise for "
            "another 20-30 minutes.",
            "Top and Bake: Add toppings and bake in a hot oven.",
        ),
    ),
    StyleKey.FOCACCIA: StyleDefinition(
        name="Focaccia",
        flour_label="Bread Flour or All-Purpose Flour",
        bakers_percentages=BakersPercentages(water=75, salt=2.2, yeast=0.8, oil=5),
        oil_label="Olive Oil",
        portion_noun=("baking pan", "baking pans"),
        steps=(
            "Combine Ingredients: In a large bowl, whisk together flour, salt, and yeast.",
            "Add Water & Oil: Add water and oil. Mix with a spatula or hands until a very wet, "
            "shaggy dough forms. No extensive kneading needed.",
            "First Rise (Bulk Ferment): Cover the bowl. Let rise at room temperature for 1.5-2 "
            "hours, performing 2-3 sets of stretch-and-folds in the bowl during the first hour "
            "(wet hands to prevent sticking).",
            "Pan Prep: Generously oil $portions (e.g., 9x13 inch each).",
            "Transfer & Shape: Divide the dough between the pans and gently transfer it. Oil your "
            "hands and gently stretch/press the dough towards the edges of the pan. Don't force it "
            "if it resists; let it rest for 10-15 minutes and try again.",
            "Second Rise (Proof in Pan): Cover loosely. Let the dough proof at room temperature "
            "for 1-1.5 hours, until puffy and nearly doubled.",
            "Dimple & Top: Preheat oven to 220°C (425°F). Oil your fingertips and dimple the dough "
            "all over, pressing down firmly to the bottom of the pan. Drizzle with more olive oil "
            "and sprinkle with flaky sea salt and optional herbs (like rosemary).",
            "Bake: Bake for 20-25 minutes, or until golden brown and cooked through.",
            "Cool: Let cool in the pan for a few minutes before transferring to a wire rack.",
        ),
    ),
}

STYLES: Mapping[StyleKey, StyleDefinition] = MappingProxyType(_STYLES)


def get_style(
    key: Union[StyleKey, str],
    styles: Mapping[StyleKey, StyleDefinition] = STYLES,
) -> StyleDefinition:
    """
    Look up a style definition.

    Parameters
    ----------
    key
        A `StyleKey` or its string value (e.g. "neapolitan").
    styles
        The catalog to look in. Defaults to the built-in read-only catalog.

    Raises
    ------
    UnknownStyleError
        if `key` names no style in `styles`
    """
    try:
        style_key = StyleKey(key)
    except ValueError:
        style_key = None

    if style_key is None or style_key not in styles:
        raise_log(UnknownStyleError(key), logger)
    return styles[style_key]
