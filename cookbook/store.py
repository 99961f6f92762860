"""
Published catalog state.

CatalogStore holds the one catalog the screens render. A load attempt moves
through NOT_STARTED -> LOADING -> PUBLISHED or FAILED. Publishing replaces the
whole catalog; a failed attempt leaves the previously published catalog as it
was and records the error so the list screen can offer a retry.

# NOTE: There is no retry, backoff or timeout. A new refresh() call is the only
    way back into LOADING. Overlapping refreshes are not arbitrated: whichever
    publishes last wins.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from cookbook.errors import CatalogError
from cookbook.loader import load_catalog
from cookbook.models import Recipe

logger = logging.getLogger(__name__)

CatalogLoader = Callable[..., Tuple[Recipe, ...]]


class LoadState(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    PUBLISHED = "published"
    FAILED = "failed"


class CatalogStore:
    """
    Container for the UI-visible recipe catalog.

    Args:
        loader: Callable returning the displayable catalog; defaults to
                cookbook.loader.load_catalog. Tests pass fakes here.
    """

    def __init__(self, loader: CatalogLoader = load_catalog):
        self._loader = loader
        self._recipes: Tuple[Recipe, ...] = ()
        self.state = LoadState.NOT_STARTED
        self.last_error: Optional[CatalogError] = None

    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        return self._recipes

    @property
    def is_empty(self) -> bool:
        return not self._recipes

    def publish(self, catalog: Iterable[Recipe]) -> None:
        """
        Replace the visible catalog with a new one.

        Args:
            catalog: Displayable recipes; stored as a tuple, no merge with the
                     previous catalog
        """
        self._recipes = tuple(catalog)
        self.last_error = None
        self.state = LoadState.PUBLISHED

    def refresh(
        self,
        resource_name: Optional[str] = None,
        extension: Optional[str] = None,
        resource_dir: Optional[Path] = None,
    ) -> LoadState:
        """
        Run one load attempt and publish the result.

        Load failures are handled here: they are logged, recorded in
        last_error, and the previous catalog stays visible. Any other
        exception marks the attempt FAILED and propagates.

        Returns:
            The state the attempt ended in (PUBLISHED or FAILED)
        """
        self.state = LoadState.LOADING
        try:
            catalog = self._loader(resource_name, extension, resource_dir)
        except CatalogError as e:
            logger.warning("Recipe catalog load failed: %s", e, exc_info=True)
            self.last_error = e
            self.state = LoadState.FAILED
            return self.state
        except Exception:
            self.state = LoadState.FAILED
            raise

        self.publish(catalog)
        logger.info("Published %d recipe(s)", len(self._recipes))
        return self.state

    def get(self, recipe_id: str) -> Optional[Recipe]:
        """
        Find a published recipe by id.

        Ids are not guaranteed unique; the first match in catalog order wins.

        Returns:
            Matching Recipe, or None if not published
        """
        return next((r for r in self._recipes if r.id == recipe_id), None)
