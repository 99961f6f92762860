"""Recipe image asset lookup."""

from pathlib import Path
from typing import Optional

from cookbook.config import CatalogConfig
from cookbook.models import Recipe

# Tried in order when the asset name has no suffix
IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp")


def resolve_image_path(recipe: Recipe, assets_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Get the image path for a recipe if the asset exists.

    Args:
        recipe: Recipe whose `image` names a local asset
        assets_dir: Directory to look in (default from config)

    Returns:
        Path to the image file if it exists, None otherwise
    """
    if not recipe.image:
        return None
    assets_dir = Path(assets_dir or CatalogConfig.get_assets_dir())
    path = assets_dir / recipe.image
    if path.suffix:
        return path if path.is_file() else None
    for suffix in IMAGE_SUFFIXES:
        candidate = path.with_suffix(suffix)
        if candidate.is_file():
            return candidate
    return None
