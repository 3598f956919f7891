"""
Test the viewer state lifecycle: empty -> loaded / failed, replaced wholesale.
"""

import dataclasses

import pandas as pd
import pytest

from frame_viewer.model import FrameDataset
from frame_viewer.state import ViewerState


def test_initial_state_is_empty():
    state = ViewerState.empty()
    
    assert state.dataset == FrameDataset.empty()
    assert state.message is None
    assert state.error is None
    assert not state.has_data


def test_successful_upload(portal_workbook):
    state = ViewerState.from_upload("portal.xlsx", portal_workbook)
    
    assert state.error is None
    assert state.message == "Loaded 3 members and 4 nodes"
    assert state.filename == "portal.xlsx"
    assert state.has_data


def test_failed_upload_clears_dataset(portal_workbook):
    loaded = ViewerState.from_upload("portal.xlsx", portal_workbook)
    assert loaded.has_data
    
    state = ViewerState.from_upload("broken.xlsx", b"\x00\x01garbage")
    
    assert state.error.startswith("Error processing file:")
    assert state.message is None
    assert state.dataset.is_empty
    assert not state.has_data


def test_missing_sheet_message(make_workbook):
    data = make_workbook({'Only': pd.DataFrame({'Start Node': [1], 'End Node': [2]})})
    
    state = ViewerState.from_upload("one_sheet.xlsx", data)
    
    assert "Error processing file" in state.error
    assert not state.has_data


def test_state_is_immutable():
    state = ViewerState.empty()
    
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.error = "changed"
