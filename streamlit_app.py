import logging

import streamlit as st

from dough_calc import config
from dough_calc.catalog import search_recipes
from dough_calc.engine import CalculationInput, calculate_recipe
from dough_calc.exceptions import NegativeRemainderError, UnknownStyleError
from dough_calc.styles import STYLES
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

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("streamlit_app")

st.set_page_config(page_title="Pizza Dough Pal", page_icon="🍕", layout="wide")

st.title("🍕 Pizza Dough Pal")
st.caption("Pick a style and a batch size. Flour is 100%; everything else is a baker's percentage of it.")

# ===== Sidebar =====
with st.sidebar:
    st.header("Dough")
    style_key = st.selectbox(
        "Dough style",
        options=list(STYLES),
        format_func=lambda key: STYLES[key].name,
        help="Biga and Poolish split part of the dough into a pre-ferment made the day before.",
    )
    style = STYLES[style_key]
    ball_count = st.number_input(
        "Number of dough balls",
        min_value=config.BALL_COUNT_RANGE[0],
        max_value=config.BALL_COUNT_RANGE[1],
        value=config.DEFAULT_BALL_COUNT,
        step=1,
        help="How many pizzas (or pans) you want to make.",
    )
    ball_weight = st.number_input(
        "Weight per dough ball [g]",
        min_value=config.BALL_WEIGHT_RANGE[0],
        max_value=config.BALL_WEIGHT_RANGE[1],
        value=config.DEFAULT_BALL_WEIGHT,
        step=10,
        help="Typical size is 200-300g.",
    )

    pre_ferment_pct = None
    if style.pre_ferment is not None:
        st.divider()
        st.header(style.pre_ferment.kind.value)
        pre_ferment_pct = st.slider(
            f"{style.pre_ferment.kind.value} flour [% of total flour]",
            min_value=config.PRE_FERMENT_FLOUR_RANGE[0],
            max_value=config.PRE_FERMENT_FLOUR_RANGE[1],
            value=int(style.pre_ferment.default_flour_pct),
            step=1,
            key=f"pre_ferment_pct_{style_key.value}",
        )

    hydration = None
    if style.hydration_adjustable:
        hydration = st.slider(
            "Dough hydration [%]",
            min_value=config.DOUGH_HYDRATION_RANGE[0],
            max_value=config.DOUGH_HYDRATION_RANGE[1],
            value=int(style.bakers_percentages.water),
            step=1,
            key=f"hydration_{style_key.value}",
            help="Water as a percentage of the total flour.",
        )

# ===== Calculation =====
calc_input = CalculationInput(
    style_key=style_key,
    ball_count=int(ball_count),
    ball_weight_grams=ball_weight,
    pre_ferment_flour_pct=pre_ferment_pct,
    dough_hydration_pct=hydration,
)
try:
    result = calculate_recipe(calc_input)
except NegativeRemainderError as e:
    st.warning(str(e))
    st.stop()
except UnknownStyleError as e:
    logger.exception("Style catalog and form are out of sync")
    st.error(str(e))
    st.stop()

st.subheader(f"Your {result.style_name} dough")
col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Total dough (g)", f"{ball_count * ball_weight:.0f}")
with col2:
    st.metric("Hydration", f"{result.hydration_used:g}%")
with col3:
    st.metric(
        "Pre-ferment flour",
        f"{result.pre_ferment_pct_used:g}%" if result.has_pre_ferment else "-",
    )

ingredients_df = recipe_frame(result)
steps_df = steps_frame(result)

if result.has_pre_ferment:
    st.markdown(f"### {PRE_FERMENT_STAGE}")
    st.dataframe(
        ingredients_df.loc[ingredients_df["stage"] == PRE_FERMENT_STAGE, ["ingredient", "quantity"]],
        use_container_width=True,
        hide_index=True,
    )
    st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(result.pre_ferment_steps, start=1)))

st.markdown(f"### {FINAL_STAGE}")
st.dataframe(
    ingredients_df.loc[ingredients_df["stage"] == FINAL_STAGE, ["ingredient", "quantity"]],
    use_container_width=True,
    hide_index=True,
)
st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(result.final_steps, start=1)))

with st.expander("Baker's percentages"):
    st.dataframe(
        bakers_percent_frame(style_key, result.hydration_used, result),
        use_container_width=True,
        hide_index=True,
    )

# ===== Downloads =====
dl1, dl2, dl3, dl4 = st.columns(4)
with dl1:
    st.download_button(
        "Ingredients CSV",
        data=to_csv_bytes(ingredients_df),
        file_name=f"{style_key.value}_ingredients.csv",
        mime="text/csv",
    )
with dl2:
    st.download_button(
        "Steps CSV",
        data=to_csv_bytes(steps_df),
        file_name=f"{style_key.value}_steps.csv",
        mime="text/csv",
    )
with dl3:
    st.download_button(
        "Ingredients JSON",
        data=to_json_bytes(ingredients_df),
        file_name=f"{style_key.value}_ingredients.json",
        mime="application/json",
    )
with dl4:
    st.download_button(
        "Recipe JSON",
        data=recipe_json_bytes(result),
        file_name=f"{style_key.value}_recipe.json",
        mime="application/json",
    )

# ===== Topping ideas =====
st.divider()
st.subheader("Topping ideas")
query = st.text_input("Search recipes", placeholder="e.g. margherita, chicken")
matches = search_recipes(query)
if not matches:
    st.info("No recipes match your search.")
for recipe in matches:
    with st.expander(recipe.name):
        st.markdown(f"![{recipe.name}]({recipe.image_url})")
        st.caption(recipe.description)
        st.markdown("\n".join(f"- {item}" for item in recipe.ingredients))
        st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(recipe.instructions, start=1)))

st.divider()
with st.expander("💡 Tips"):
    st.markdown(
        """
- **Hydration** can be changed for Neapolitan, Biga and Poolish doughs.
- **Pre-ferment flour** is the share of the total flour that goes into the Biga or Poolish.
  A liquid Poolish at a high share needs a high overall hydration, otherwise no water is left for the final mix.
- Very small yeast amounts are shown as "a tiny pinch"; use a 0.01g scale if you have one.
"""
    )

st.caption("Watch the dough, not the clock.")
