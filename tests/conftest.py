"""
Shared fixtures: in-memory frame workbooks.
"""

import io

import pandas as pd
import pytest


def build_workbook(sheets) -> bytes:
    """
    Write {sheet_name: DataFrame} into .xlsx bytes (sheet order preserved).
    """
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        for name, df in sheets.items():
            df.to_excel(writer, sheet_name=name, index=False)
    return buffer.getvalue()


@pytest.fixture
def make_workbook():
    return build_workbook


@pytest.fixture
def portal_workbook():
    """Three columns and a beam: 1-2-3 chain plus a cantilever to node 4."""
    members = pd.DataFrame({
        'Start Node': [1, 2, 2],
        'End Node': [2, 3, 4],
    })
    nodes = pd.DataFrame({
        'Node': [1, 2, 3, 4],
        'X': [0.0, 0.0, 4.0, 0.0],
        'Y': [0.0, 3.0, 3.0, 3.0],
        'Z': [0.0, 0.0, 0.0, 2.0],
    })
    return build_workbook({'Members': members, 'Nodes': nodes})
