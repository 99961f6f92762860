"""
Catalog load errors.

Both failure kinds are terminal for a single load attempt. They are caught at
the load boundary (CatalogStore.refresh) and never leak into the screens as
exceptions.
"""

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for recipe catalog load failures."""

    def __init__(self, message: str, resource_name: str):
        super().__init__(message)
        self.resource_name = resource_name


class ResourceNotFound(CatalogError):
    """The named bundled resource does not exist."""

    def __init__(self, resource_name: str, path: Path):
        super().__init__(f"Recipe resource '{resource_name}' not found at {path}", resource_name)
        self.path = path


class DecodeError(CatalogError):
    """The resource exists but its contents do not match the recipes schema."""

    def __init__(self, resource_name: str, cause: Optional[Exception] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not decode recipe resource '{resource_name}'{detail}", resource_name)
        self.cause = cause
