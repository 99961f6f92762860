"""
Tests for the Streamlit session-state wrappers.

st.session_state is replaced by a plain dict so the helpers can be exercised
without a running Streamlit app.
"""

from unittest.mock import Mock

import pytest

from cookbook.errors import ResourceNotFound
from cookbook.models import Recipe
from cookbook.store import CatalogStore, LoadState
from streamlit_app.utils import state


def _make_recipe(recipe_id, name="Tea", steps=("Boil water", "Steep tea")):
    return Recipe.model_validate({
        "id": recipe_id,
        "name": name,
        "description": "d",
        "tag": [],
        "ingredient": [],
        "step": [{"description": s} for s in steps],
        "image": "tea.png",
    })


@pytest.fixture
def session(monkeypatch):
    fake_state = {}
    monkeypatch.setattr(state.st, "session_state", fake_state)
    return fake_state


@pytest.fixture
def published_store(session):
    store = CatalogStore(loader=Mock(return_value=(_make_recipe("1"), _make_recipe("2", "Borscht"))))
    session[state.CATALOG_KEY] = store
    return store


class TestCatalogState:
    """Test cases for catalog helpers."""

    def test_get_catalog_store_creates_once(self, session):
        """Test that the same store is returned within a session."""
        first = state.get_catalog_store()
        assert first.state == LoadState.NOT_STARTED
        assert state.get_catalog_store() is first

    def test_ensure_catalog_loaded_loads_on_first_visit_only(self, published_store):
        """Test that the catalog is loaded once per session."""
        state.ensure_catalog_loaded()
        state.ensure_catalog_loaded()
        assert published_store._loader.call_count == 1
        assert published_store.state == LoadState.PUBLISHED

    def test_ensure_catalog_loaded_does_not_retry_failed(self, session):
        """Test that a failed first load is not retried automatically."""
        loader = Mock(side_effect=ResourceNotFound("Recipes", "/missing/Recipes.json"))
        session[state.CATALOG_KEY] = CatalogStore(loader=loader)
        store = state.ensure_catalog_loaded()
        state.ensure_catalog_loaded()
        assert store.state == LoadState.FAILED
        assert loader.call_count == 1

    def test_reload_catalog_runs_new_attempt(self, published_store):
        """Test that reload always runs a new load."""
        state.ensure_catalog_loaded()
        assert state.reload_catalog() == LoadState.PUBLISHED
        assert published_store._loader.call_count == 2

    def test_bundled_catalog_hides_unnamed_recipes(self, session, monkeypatch):
        """Test the default store against the packaged resource."""
        monkeypatch.delenv("YUMMY_NOTES_RESOURCE_DIR", raising=False)
        monkeypatch.delenv("YUMMY_NOTES_RESOURCE_NAME", raising=False)
        monkeypatch.delenv("YUMMY_NOTES_RESOURCE_EXTENSION", raising=False)
        store = state.ensure_catalog_loaded()
        assert store.state == LoadState.PUBLISHED
        assert store.recipes
        assert all(r.name is not None for r in store.recipes)


class TestSelectionState:
    """Test cases for recipe selection and step navigation."""

    def test_nothing_selected(self, published_store):
        """Test that no selection yields None."""
        assert state.get_selected_recipe() is None

    def test_select_recipe(self, published_store):
        """Test that the selected recipe is looked up in the catalog."""
        state.ensure_catalog_loaded()
        state.select_recipe("2")
        assert state.get_selected_recipe().name == "Borscht"

    def test_selected_id_not_published(self, published_store):
        """Test that a stale selection yields None."""
        state.ensure_catalog_loaded()
        state.select_recipe("99")
        assert state.get_selected_recipe() is None

    def test_select_recipe_resets_step_index(self, published_store, session):
        """Test that choosing a recipe starts its steps from the beginning."""
        session[state.STEP_INDEX_KEY] = 4
        state.select_recipe("1")
        assert session[state.STEP_INDEX_KEY] == 0

    def test_advance_step_is_forward_only_and_bounded(self, session):
        """Test that advancing stores the index and stops at the last step."""
        recipe = _make_recipe("1")
        state.start_steps()
        assert state.get_step_cursor(recipe).current == "Boil water"
        state.advance_step(recipe)
        assert session[state.STEP_INDEX_KEY] == 1
        state.advance_step(recipe)
        assert session[state.STEP_INDEX_KEY] == 1
        assert state.get_step_cursor(recipe).current == "Steep tea"

    def test_start_steps_resets_index(self, session):
        """Test that reopening the steps view starts at step one."""
        session[state.STEP_INDEX_KEY] = 1
        state.start_steps()
        assert state.get_step_cursor(_make_recipe("1")).index == 0
