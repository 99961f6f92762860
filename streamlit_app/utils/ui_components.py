"""
Reusable UI Components Module.

Recipe-specific rendering shared by the list, detail and steps screens.
Table builders are plain functions returning DataFrames so they can be tested
without a running Streamlit app.
"""

import html
from typing import Optional

import pandas as pd
import streamlit as st

from cookbook.assets import resolve_image_path
from cookbook.models import Recipe

INGREDIENT_COLUMNS = ["Amount", "Unit", "Ingredient", "Preparation"]

# Shown when a recipe's image asset is missing
PLACEHOLDER_EMOJI = "🍽️"


def ingredients_frame(recipe: Recipe) -> pd.DataFrame:
    """
    Build the ingredients table for the detail screen.

    Absent values are shown as blank cells; the Recipe itself keeps None.

    Args:
        recipe: Recipe to tabulate

    Returns:
        DataFrame with INGREDIENT_COLUMNS, one row per ingredient in recipe order
    """
    rows = [
        {
            "Amount": ing.amount or "",
            "Unit": ing.unit or "",
            "Ingredient": ing.name or "",
            "Preparation": ing.preparation or "",
        }
        for ing in recipe.ingredients
    ]
    return pd.DataFrame(rows, columns=INGREDIENT_COLUMNS)


def tags_html(recipe: Recipe, limit: Optional[int] = None) -> str:
    tags = recipe.tags[:limit] if limit is not None else recipe.tags
    return " ".join(f"<span class='recipe-tag'>{html.escape(tag)}</span>" for tag in tags)


def render_recipe_image(recipe: Recipe, width: Optional[int] = None) -> None:
    """
    Render a recipe's image, or a placeholder if the asset is missing.

    Args:
        recipe: Recipe whose image to show
        width: Optional pixel width (thumbnail on the list screen)
    """
    path = resolve_image_path(recipe)
    if path is not None:
        st.image(str(path), width=width)
    else:
        st.markdown(f"<div class='recipe-image-placeholder'>{PLACEHOLDER_EMOJI}</div>", unsafe_allow_html=True)
