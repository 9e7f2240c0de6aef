"""
Tabular views of a calculated recipe, for display and CSV/JSON download.
"""

from __future__ import annotations

import json
from typing import Optional

import numpy as np
import pandas as pd

from dough_calc.engine import CalculationResult
from dough_calc.styles import get_style

PRE_FERMENT_STAGE = "Pre-ferment"
FINAL_STAGE = "Final dough"


def recipe_frame(result: CalculationResult) -> pd.DataFrame:
    """One row per ingredient, pre-ferment rows first."""
    rows = []
    for ingredient in result.pre_ferment_ingredients or ():
        rows.append(
            {"stage": PRE_FERMENT_STAGE, "ingredient": ingredient.name, "quantity": ingredient.quantity}
        )
    for ingredient in result.final_ingredients:
        rows.append(
            {"stage": FINAL_STAGE, "ingredient": ingredient.name, "quantity": ingredient.quantity}
        )
    return pd.DataFrame(rows, columns=["stage", "ingredient", "quantity"])


def steps_frame(result: CalculationResult) -> pd.DataFrame:
    rows = [
        {"stage": PRE_FERMENT_STAGE, "step": i, "instruction": text}
        for i, text in enumerate(result.pre_ferment_steps or (), start=1)
    ]
    rows += [
        {"stage": FINAL_STAGE, "step": i, "instruction": text}
        for i, text in enumerate(result.final_steps, start=1)
    ]
    return pd.DataFrame(rows, columns=["stage", "step", "instruction"])


def bakers_percent_frame(
    style_key,
    hydration: Optional[float] = None,
    result: Optional[CalculationResult] = None,
) -> pd.DataFrame:
    """
    Baker's percentages of a style, flour = 100%.

    Ingredients the style does not use are NaN. `hydration` replaces the
    water percentage (pass `result.hydration_used`). With a `result`, a
    grams column holds the dough totals.
    """
    style = get_style(style_key)
    pct = style.bakers_percentages
    water = pct.water if hydration is None else hydration
    df = pd.DataFrame(
        {
            "ingredient": [style.flour_label, "Water", "Salt", "Yeast", style.oil_label, "Sugar"],
            "bakers_percent": [
                100.0,
                water,
                pct.salt,
                pct.yeast,
                pct.oil if pct.oil else np.nan,
                pct.sugar if pct.sugar else np.nan,
            ],
        }
    )
    if result is not None:
        t = result.totals
        grams = np.array([t.flour, t.water, t.salt, t.yeast, t.oil, t.sugar], dtype=float)
        df["grams"] = np.where(df["bakers_percent"].isna(), np.nan, grams)
    return df


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    # BOM so spreadsheet apps pick up UTF-8
    return df.to_csv(index=False).encode("utf-8-sig")


def to_json_bytes(df: pd.DataFrame) -> bytes:
    return df.to_json(orient="records", force_ascii=False).encode("utf-8")


def recipe_json_bytes(result: CalculationResult) -> bytes:
    """The whole recipe, both stages and their steps, as one JSON document."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")
