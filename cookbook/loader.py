"""
Recipe catalog loading.

Load, filter and encode are plain functions with no side effects beyond
reading the resource file, so the screens and the tests can call them
directly. Publishing the result is the job of cookbook.store.

Pipeline:
1. load_collection(): locate <name>.<extension> in the resource directory,
   read the bytes and decode them into a RecipeCollection
2. filter_displayable(): keep recipes with a name, in document order
3. load_catalog(): both of the above in one call
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from cookbook.config import CatalogConfig
from cookbook.errors import DecodeError, ResourceNotFound
from cookbook.models import Recipe, RecipeCollection

logger = logging.getLogger(__name__)


def resource_path(
    resource_name: str,
    extension: Optional[str] = None,
    resource_dir: Optional[Path] = None,
) -> Path:
    """
    Resolve the path of a bundled resource by logical name.

    Args:
        resource_name: Logical name, e.g. "Recipes"
        extension: File extension without dot (default from config, "json")
        resource_dir: Directory to look in (default from config)

    Returns:
        Path to the resource file (not checked for existence)
    """
    extension = extension or CatalogConfig.get_resource_extension()
    resource_dir = resource_dir or CatalogConfig.get_resource_dir()
    return Path(resource_dir) / f"{resource_name}.{extension}"


def decode_collection(data: bytes, resource_name: str = "<memory>") -> RecipeCollection:
    """
    Decode raw document bytes into a RecipeCollection.

    Args:
        data: Raw JSON document
        resource_name: Name used in error messages

    Returns:
        RecipeCollection with recipes in document order

    Raises:
        DecodeError: If the bytes are not well-formed JSON or do not match the schema
    """
    try:
        return RecipeCollection.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError(resource_name, e) from e


def load_collection(
    resource_name: Optional[str] = None,
    extension: Optional[str] = None,
    resource_dir: Optional[Path] = None,
) -> RecipeCollection:
    """
    Load and decode the recipes document.

    Args:
        resource_name: Logical resource name (default from config, "Recipes")
        extension: File extension (default from config, "json")
        resource_dir: Directory holding the resource (default from config)

    Returns:
        RecipeCollection decoded from the resource

    Raises:
        ResourceNotFound: If the resource file does not exist or cannot be read
        DecodeError: If the contents do not match the recipes schema
    """
    resource_name = resource_name or CatalogConfig.get_resource_name()
    path = resource_path(resource_name, extension, resource_dir)

    if not path.is_file():
        raise ResourceNotFound(resource_name, path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResourceNotFound(resource_name, path) from e

    collection = decode_collection(data, resource_name)
    logger.debug("Decoded %d recipes from %s", len(collection.recipes), path)
    return collection


def filter_displayable(collection: RecipeCollection) -> Tuple[Recipe, ...]:
    """
    Keep only recipes that can be listed.

    A recipe is displayable when its name is present (an empty string still
    counts as present). Order is preserved and duplicate ids are kept.

    Args:
        collection: Decoded collection (not modified)

    Returns:
        Tuple of displayable recipes in document order
    """
    displayable = tuple(r for r in collection.recipes if r.name is not None)
    dropped = len(collection.recipes) - len(displayable)
    if dropped:
        logger.debug("Filtered out %d recipe(s) without a name", dropped)
    return displayable


def load_catalog(
    resource_name: Optional[str] = None,
    extension: Optional[str] = None,
    resource_dir: Optional[Path] = None,
) -> Tuple[Recipe, ...]:
    """Load the recipes document and return the displayable catalog."""
    return filter_displayable(load_collection(resource_name, extension, resource_dir))


def encode_collection(collection: RecipeCollection) -> str:
    """
    Encode a collection back to the document schema.

    Absent optional fields are omitted rather than written as null, so
    decoding the output yields an equal collection.

    Returns:
        JSON document string using the singular document keys
    """
    return collection.model_dump_json(by_alias=True, exclude_none=True)
