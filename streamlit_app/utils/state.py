"""
Catalog State Management Module.

This module wraps Streamlit's session_state to give the screens a small API
over the published recipe catalog and the UI-local navigation state:

- `recipe_catalog`: the CatalogStore for this session
- `selected_recipe_id`: id of the recipe opened on the detail screen
- `step_index`: current position on the steps screen

# NOTE: session_state lives for the current Streamlit session only. A page
    refresh starts a new session and the catalog is loaded again.
"""

from typing import Optional

import streamlit as st

from cookbook.models import Recipe
from cookbook.navigation import StepCursor
from cookbook.store import CatalogStore, LoadState

CATALOG_KEY = "recipe_catalog"
SELECTED_RECIPE_KEY = "selected_recipe_id"
STEP_INDEX_KEY = "step_index"


def get_catalog_store() -> CatalogStore:
    """
    Get the session's CatalogStore, creating an empty one if needed.

    Returns:
        CatalogStore in NOT_STARTED state on first call
    """
    if CATALOG_KEY not in st.session_state:
        st.session_state[CATALOG_KEY] = CatalogStore()
    return st.session_state[CATALOG_KEY]


def ensure_catalog_loaded() -> CatalogStore:
    """
    Load the catalog on the first visit of the session.

    Later calls return the store as it is; use reload_catalog() for an
    explicit new attempt.
    """
    store = get_catalog_store()
    if store.state == LoadState.NOT_STARTED:
        store.refresh()
    return store


def reload_catalog() -> LoadState:
    """Run a new load attempt and publish the result if it succeeds."""
    return get_catalog_store().refresh()


def select_recipe(recipe_id: str) -> None:
    """
    Open a recipe on the detail screen.

    Selecting a recipe resets the steps screen to the first step.
    """
    st.session_state[SELECTED_RECIPE_KEY] = recipe_id
    st.session_state[STEP_INDEX_KEY] = 0


def get_selected_recipe() -> Optional[Recipe]:
    """
    Get the selected recipe from the published catalog.

    Returns:
        Recipe, or None if nothing is selected or the id is no longer published
    """
    recipe_id = st.session_state.get(SELECTED_RECIPE_KEY)
    if recipe_id is None:
        return None
    return get_catalog_store().get(recipe_id)


def start_steps() -> None:
    """Reset the steps screen to the first step before opening it."""
    st.session_state[STEP_INDEX_KEY] = 0


def get_step_cursor(recipe: Recipe) -> StepCursor:
    return StepCursor.for_recipe(recipe, st.session_state.get(STEP_INDEX_KEY, 0))


def advance_step(recipe: Recipe) -> StepCursor:
    """
    Move the steps screen forward by one step and store the new index.

    Returns:
        The cursor after advancing (unchanged on the last step)
    """
    cursor = get_step_cursor(recipe)
    st.session_state[STEP_INDEX_KEY] = cursor.advance()
    return cursor
