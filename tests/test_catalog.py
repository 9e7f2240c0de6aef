import pytest

from dough_calc.catalog import get_recipe, list_recipes, search_recipes


class TestToppingCatalog:
    def test_list(self):
        assert [r.name for r in list_recipes()] == [
            "Classic Margherita",
            "Pepperoni Pizza",
            "Veggie Supreme",
            "BBQ Chicken Pizza",
        ]

    def test_get_recipe(self):
        assert get_recipe("2").name == "Pepperoni Pizza"
        assert get_recipe("99") is None

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("chicken", ["BBQ Chicken Pizza"]),
            ("  MARGHERITA ", ["Classic Margherita"]),
            ("vegetables", ["Veggie Supreme"]),
            ("calzone", []),
        ],
    )
    def test_search(self, query, expected):
        assert [r.name for r in search_recipes(query)] == expected

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_search_returns_everything(self, query):
        assert len(search_recipes(query)) == 4
