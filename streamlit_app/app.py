"""
Yummy Notes - Streamlit Frontend Main Entry Point.

This is the recipe list screen. It loads the bundled recipe catalog on the
first visit of a session and lists every published recipe with its image and
name. Opening a recipe moves to the detail page.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
Files in `pages/` starting with numbered prefixes (e.g., `01_📖_Recipe.py`) will appear
as pages in the sidebar navigation.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import cookbook
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from cookbook.config import configure_logging, get_config_summary

import streamlit as st

from cookbook.models import Recipe
from cookbook.store import LoadState
from utils.state import ensure_catalog_loaded, reload_catalog, select_recipe
from utils.ui_components import render_recipe_image, tags_html
from ui.styles import load_global_styles
from ui.layout import page_header
from ui.feedback import show_error, show_empty_state, working_spinner

DETAIL_PAGE = "pages/01_📖_Recipe.py"

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Yummy Notes",
    page_icon="🤎",
    layout="centered",
)

load_global_styles()

with st.sidebar:
    st.markdown("### 🤎 **Yummy Notes**")
    with st.expander("About", expanded=False):
        for key, value in get_config_summary().items():
            st.caption(f"**{key}**: {value}")


def _render_reload_button():
    st.button("↻ Reload", key="reload_catalog", on_click=reload_catalog, use_container_width=True)


def render_recipe_row(recipe: Recipe, position: int) -> None:
    """
    Render one list row: round thumbnail, name, tags and an Open button.

    Args:
        recipe: Published recipe to show
        position: Row index, used for widget keys since ids may repeat
    """
    image_col, name_col, action_col = st.columns([1, 4, 1], vertical_alignment="center")
    with image_col:
        render_recipe_image(recipe, width=50)
    with name_col:
        st.markdown(f"**{recipe.display_name}**")
        if recipe.tags:
            st.markdown(tags_html(recipe, limit=4), unsafe_allow_html=True)
    with action_col:
        if st.button("Open", key=f"open_{position}_{recipe.id}"):
            select_recipe(recipe.id)
            st.switch_page(DETAIL_PAGE)


page_header("🤎Recipes🤎", subtitle="Your bundled recipe notes.", right=_render_reload_button)

with working_spinner():
    store = ensure_catalog_loaded()

if store.state == LoadState.FAILED:
    show_error(
        "Could not load recipes.",
        hint=str(store.last_error),
        retry_label="Try again",
        on_retry=reload_catalog,
    )

if store.is_empty:
    if store.state != LoadState.FAILED:
        show_empty_state(
            title="No recipes yet",
            subtitle="Recipes without a name are hidden until they get one.",
        )
else:
    for idx, recipe in enumerate(store.recipes):
        render_recipe_row(recipe, idx)
        st.divider()
