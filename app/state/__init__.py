# app/state - Session state management
from .session import (
    get_viewer_state,
    set_viewer_state,
    get_upload_token,
    set_upload_token,
)

__all__ = [
    'get_viewer_state',
    'set_viewer_state',
    'get_upload_token',
    'set_upload_token',
]
