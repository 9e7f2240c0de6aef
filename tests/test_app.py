from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "streamlit_app.py")
TIMEOUT = 30

POOLISH_INDEX = 3


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
    at.run()
    return at


class TestStreamlitApp:
    def test_default_recipe(self, app):
        assert not app.exception
        ingredients = app.dataframe[0].value
        assert list(ingredients["quantity"]) == ["455g", "282g", "12.7g", "0.5g"]

    def test_pre_ferment_sections(self, app):
        app.selectbox[0].select_index(POOLISH_INDEX).run()
        assert not app.exception
        assert len(app.dataframe) >= 2
        assert app.dataframe[0].value.iloc[0]["ingredient"].startswith("Poolish")

    def test_infeasible_pre_ferment_shows_warning(self, app):
        app.selectbox[0].select_index(POOLISH_INDEX).run()
        app.slider(key="pre_ferment_pct_poolish").set_value(80)
        app.slider(key="hydration_poolish").set_value(60).run()
        assert not app.exception
        assert len(app.warning) == 1
        assert "Lower the pre-ferment percentage" in app.warning[0].value

    def test_topping_search(self, app):
        app.text_input[0].input("chicken").run()
        assert [e.label for e in app.expander if "Pizza" in e.label] == ["BBQ Chicken Pizza"]
