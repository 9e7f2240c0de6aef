import dataclasses

import pytest

from dough_calc.exceptions import UnknownStyleError
from dough_calc.styles import STYLES, PreFermentKind, StyleKey, get_style


class TestStyleCatalog:
    def test_every_key_has_a_style(self):
        assert set(STYLES) == set(StyleKey)

    def test_lookup_by_string_or_enum(self):
        assert get_style("poolish") is get_style(StyleKey.POOLISH)
        assert get_style("poolish").pre_ferment.kind is PreFermentKind.POOLISH

    def test_unknown_key(self):
        with pytest.raises(UnknownStyleError) as err:
            get_style("sourdough")
        # no enum ValueError chained behind it
        assert err.value.__context__ is None
        assert err.value.__cause__ is None

    def test_key_missing_from_custom_catalog(self):
        with pytest.raises(UnknownStyleError):
            get_style(StyleKey.FOCACCIA, {})

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            STYLES[StyleKey.BIGA] = STYLES[StyleKey.POOLISH]
        with pytest.raises(dataclasses.FrozenInstanceError):
            STYLES[StyleKey.BIGA].name = "Changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            STYLES[StyleKey.BIGA].bakers_percentages.water = 90

    @pytest.mark.parametrize(
        "key,water,salt,yeast",
        [
            (StyleKey.NEAPOLITAN, 62, 2.8, 0.1),
            (StyleKey.NEW_YORK, 65, 2.5, 0.4),
            (StyleKey.BIGA, 68, 3, 0.2),
            (StyleKey.POOLISH, 70, 2.8, 0.15),
            (StyleKey.BRAZILIAN, 55, 1.8, 1.5),
            (StyleKey.FOCACCIA, 75, 2.2, 0.8),
        ],
    )
    def test_bakers_percentages(self, key, water, salt, yeast):
        pct = STYLES[key].bakers_percentages
        assert (pct.water, pct.salt, pct.yeast) == (water, salt, yeast)

    def test_percentage_total(self):
        assert STYLES[StyleKey.BRAZILIAN].bakers_percentages.total == pytest.approx(166.3)

    def test_pre_ferment_defaults(self):
        biga = STYLES[StyleKey.BIGA].pre_ferment
        assert (biga.default_flour_pct, biga.hydration_pct, biga.yeast_share_pct) == (40, 45, 25)
        poolish = STYLES[StyleKey.POOLISH].pre_ferment
        assert (poolish.default_flour_pct, poolish.hydration_pct, poolish.yeast_share_pct) == (30, 100, 33)

    def test_only_some_styles_take_a_hydration_override(self):
        adjustable = {key for key, style in STYLES.items() if style.hydration_adjustable}
        assert adjustable == {StyleKey.NEAPOLITAN, StyleKey.BIGA, StyleKey.POOLISH}

    def test_every_final_dough_mentions_portions(self):
        for style in STYLES.values():
            assert any("$portions" in step for step in style.steps), style.name
