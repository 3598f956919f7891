"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.

The viewer state itself is an immutable frame_viewer.ViewerState; the
session only ever swaps it for a new one.
"""

import streamlit as st
from typing import Optional

from frame_viewer.state import ViewerState


# ============================================================================
# Viewer State
# ============================================================================

def get_viewer_state() -> ViewerState:
    """Get the current viewer state (empty on first run)."""
    if 'viewer_state' not in st.session_state:
        st.session_state.viewer_state = ViewerState.empty()
    return st.session_state.viewer_state


def set_viewer_state(state: ViewerState) -> None:
    """Replace the viewer state."""
    st.session_state.viewer_state = state


# ============================================================================
# Upload Tracking
# ============================================================================

def get_upload_token() -> Optional[str]:
    """Identifier of the last processed upload (None if nothing processed)."""
    return st.session_state.get('upload_token', None)


def set_upload_token(token: Optional[str]) -> None:
    st.session_state.upload_token = token
