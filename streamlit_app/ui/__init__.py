"""
UI Styling and Components Module.

This module provides global CSS styling and layout primitives
for the Yummy Notes Streamlit app.
"""

from .styles import load_global_styles
from .layout import page_header, section

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
]
