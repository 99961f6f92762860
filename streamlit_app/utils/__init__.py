"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state helpers for the published catalog and navigation
- ui_components: Recipe rendering helpers and table builders
"""
