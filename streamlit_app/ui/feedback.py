"""
Feedback states for the recipe screens: a load error with a retry button,
the "nothing here" notice, and the spinner shown while the catalog loads.
"""

from contextlib import contextmanager
from typing import Callable, Optional
import streamlit as st


def show_error(
    message: str,
    hint: Optional[str] = None,
    retry_label: Optional[str] = None,
    on_retry: Optional[Callable[[], object]] = None,
) -> None:
    """
    Display a standardized error message with optional hint and retry button.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
        retry_label: Label for the retry button (shown only with on_retry)
        on_retry: Optional callback run when the retry button is clicked
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")
    if on_retry is not None:
        st.button(retry_label or "Try again", on_click=on_retry, type="primary")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Back to recipes",
    action_page_path: Optional[str] = None
) -> None:
    """
    Show that there is nothing to display, e.g. an empty catalog or no
    selected recipe, with an optional button that leads back to a screen
    that has content.

    Args:
        title: Bold headline of the notice
        subtitle: Optional line telling the user what to do next
        action_label: Button text
        action_page_path: Page to switch to on click; no button without it
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_page_path:
        if st.button(action_label, use_container_width=True, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Loading recipes…"):
    """Show a spinner while the recipe catalog is read and decoded."""
    with st.spinner(label):
        yield
