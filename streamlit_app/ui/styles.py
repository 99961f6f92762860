"""
Global CSS Styling for Yummy Notes.

This module provides load_global_styles() to inject consistent styling
across all screens: typography, rounded buttons, recipe cards and tag pills.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Yummy Notes app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Rounds buttons
    - Styles recipe tag pills, round recipe images and the image placeholder
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        p, .stMarkdown p {
            line-height: 1.6 !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 10px !important;
            font-weight: 600 !important;
            padding: 0.5rem 1.25rem !important;
        }

        .main .block-container {
            max-width: 900px !important;
            padding-top: 1.5rem !important;
        }

        .yn-page-header {
            margin-bottom: 1.25rem !important;
        }

        .yn-page-header .subtitle,
        .yn-section-caption {
            color: #666 !important;
            font-size: 0.95rem !important;
        }

        /* Recipe images are round with a white ring */
        [data-testid="stImage"] img {
            border-radius: 50% !important;
            border: 2px solid #ffffff !important;
            box-shadow: 0 0 5px rgba(0, 0, 0, 0.25) !important;
        }

        .recipe-tag {
            display: inline-block;
            background-color: #efebe9;
            border-radius: 999px;
            padding: 2px 8px;
            margin: 0 4px 4px 0;
            font-size: 0.75rem;
            color: #4e342e;
            white-space: nowrap;
        }

        .recipe-image-placeholder {
            font-size: 2rem;
            text-align: center;
        }

        .yn-step-text {
            font-size: 1.25rem !important;
            padding: 1.5rem 0 !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
