"""
Configuration management for Yummy Notes.

This module loads an optional .env file at project root and exposes the
settings used to locate the bundled recipes document and image assets.
It should be imported early by the Streamlit entry point so .env values are
in place before anything reads the environment.

The packaged resource is the production source. The environment variables
below exist for local development (e.g. pointing at a scratch document).

Environment Variables:
- YUMMY_NOTES_RESOURCE_DIR: Optional, directory holding the recipes document
  (defaults to the packaged cookbook/resources directory)
- YUMMY_NOTES_RESOURCE_NAME: Optional, logical resource name (default: "Recipes")
- YUMMY_NOTES_RESOURCE_EXTENSION: Optional, resource extension (default: "json")
- YUMMY_NOTES_ASSETS_DIR: Optional, directory holding recipe images
  (defaults to cookbook/resources/images)
- YUMMY_NOTES_LOG_LEVEL: Optional, logging level name (default: "INFO")
"""

import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_RESOURCE_DIR = PACKAGE_DIR / "resources"
DEFAULT_RESOURCE_NAME = "Recipes"
DEFAULT_RESOURCE_EXTENSION = "json"
DEFAULT_ASSETS_DIR = DEFAULT_RESOURCE_DIR / "images"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take
    precedence over values from the file (override=False).
    """
    project_root = PACKAGE_DIR.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class CatalogConfig:
    """Where the recipe catalog and its images live."""

    @staticmethod
    def get_resource_dir() -> Path:
        value = os.getenv("YUMMY_NOTES_RESOURCE_DIR")
        return Path(value) if value else DEFAULT_RESOURCE_DIR

    @staticmethod
    def get_resource_name() -> str:
        """
        Get the logical name of the recipes document.

        Returns:
            Resource name without extension (default: "Recipes")
        """
        return os.getenv("YUMMY_NOTES_RESOURCE_NAME", DEFAULT_RESOURCE_NAME)

    @staticmethod
    def get_resource_extension() -> str:
        return os.getenv("YUMMY_NOTES_RESOURCE_EXTENSION", DEFAULT_RESOURCE_EXTENSION)

    @staticmethod
    def get_assets_dir() -> Path:
        value = os.getenv("YUMMY_NOTES_ASSETS_DIR")
        return Path(value) if value else DEFAULT_ASSETS_DIR

    @staticmethod
    def get_log_level() -> str:
        """
        Get the logging level name.

        Returns:
            Upper-cased level name; unknown names fall back to "INFO"
        """
        level = os.getenv("YUMMY_NOTES_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            return DEFAULT_LOG_LEVEL
        return level


def configure_logging() -> None:
    """
    Configure root logging once with the configured level.

    logging.basicConfig is a no-op when handlers already exist, so Streamlit
    reruns do not stack handlers.
    """
    logging.basicConfig(level=CatalogConfig.get_log_level(), format=LOG_FORMAT)


def get_config_summary() -> Dict[str, str]:
    """
    Get the effective configuration for display.

    Returns:
        Dictionary with resource_path, assets_dir and log_level
    """
    resource_file = f"{CatalogConfig.get_resource_name()}.{CatalogConfig.get_resource_extension()}"
    return {
        "resource_path": str(CatalogConfig.get_resource_dir() / resource_file),
        "assets_dir": str(CatalogConfig.get_assets_dir()),
        "log_level": CatalogConfig.get_log_level(),
    }
