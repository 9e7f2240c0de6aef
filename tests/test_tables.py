import json

import numpy as np
import pandas as pd

from dough_calc.engine import get_calculated_recipe
from dough_calc.tables import (
    FINAL_STAGE,
    PRE_FERMENT_STAGE,
    bakers_percent_frame,
    recipe_frame,
    recipe_json_bytes,
    steps_frame,
    to_csv_bytes,
    to_json_bytes,
)


class TestRecipeFrame:
    def test_straight_dough(self):
        df = recipe_frame(get_calculated_recipe("neapolitan", 3, 250))
        assert list(df.columns) == ["stage", "ingredient", "quantity"]
        assert (df["stage"] == FINAL_STAGE).all()
        assert list(df["quantity"]) == ["455g", "282g", "12.7g", "0.5g"]

    def test_pre_ferment_rows_come_first(self):
        df = recipe_frame(get_calculated_recipe("biga", 4, 214))
        assert list(df["stage"]) == [PRE_FERMENT_STAGE] * 3 + [FINAL_STAGE] * 5
        assert df.iloc[3]["ingredient"] == "Mature Biga"

    def test_steps_are_numbered_per_stage(self):
        df = steps_frame(get_calculated_recipe("biga", 4, 214))
        pre = df[df["stage"] == PRE_FERMENT_STAGE]
        final = df[df["stage"] == FINAL_STAGE]
        assert list(pre["step"]) == [1, 2]
        assert list(final["step"]) == list(range(1, 9))


class TestBakersPercentFrame:
    def test_missing_ingredients_are_nan(self):
        df = bakers_percent_frame("neapolitan")
        assert df["bakers_percent"].isna().sum() == 2
        assert df.loc[0, "bakers_percent"] == 100.0
        assert df.loc[1, "bakers_percent"] == 62

    def test_hydration_and_grams(self):
        result = get_calculated_recipe("neapolitan", 3, 250, dough_hydration_pct=70)
        df = bakers_percent_frame("neapolitan", result.hydration_used, result)
        assert df.loc[1, "bakers_percent"] == 70
        assert df.loc[0, "grams"] == result.totals.flour
        assert np.isnan(df.loc[5, "grams"])

    def test_all_ingredients_present_for_brazilian(self):
        df = bakers_percent_frame("brazilian")
        assert not df["bakers_percent"].isna().any()


class TestExport:
    def test_csv_has_bom(self):
        df = recipe_frame(get_calculated_recipe("neapolitan", 3, 250))
        data = to_csv_bytes(df)
        assert data.startswith(b"\xef\xbb\xbf")
        assert b"12.7g" in data

    def test_json_records(self):
        df = recipe_frame(get_calculated_recipe("neapolitan", 3, 250))
        records = json.loads(to_json_bytes(df).decode("utf-8"))
        assert records[0] == {"stage": FINAL_STAGE, "ingredient": '"00" Flour', "quantity": "455g"}

    def test_json_keeps_non_ascii(self):
        df = pd.DataFrame([{"ingredient": "Wasser", "note": "25°C"}])
        assert "25°C" in to_json_bytes(df).decode("utf-8")

    def test_recipe_json_has_both_stages(self):
        result = get_calculated_recipe("biga", 4, 214)
        doc = json.loads(recipe_json_bytes(result).decode("utf-8"))
        assert doc == result.to_dict()
        assert doc["preFermentIngredients"][0] == {
            "name": 'Biga "00" Flour or Bread Flour',
            "quantity": "200g",
        }
        assert doc["ingredients"][0]["name"] == "Mature Biga"
        assert len(doc["fermentationSteps"]) == 8
