"""
Workbook loading: spreadsheet rows -> FrameDataset.

The workbook layout is positional:
    sheet 1  members   columns "Start Node", "End Node"
    sheet 2  nodes     columns "Node", "X", "Y", "Z"

Decoding is delegated to pandas (openpyxl for .xlsx, xlrd for .xls).
This module only normalizes the decoded rows.
"""

import io
import logging
import math
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .config import VIEWER_CONFIG
from .errors import FileReadError, MissingSheetDataError
from .model import FrameDataset, Member, Node

logger = logging.getLogger(__name__)

WorkbookSource = Union[bytes, bytearray, BinaryIO, str, Path]


def normalize_identifier(value) -> Optional[str]:
    """
    Convert a decoded cell to a node identifier string.
    
    Spreadsheets store "1" as the number 1 (or 1.0 once a column holds a
    blank), so integral floats drop their fractional part. Blank cells give
    None.
    
    >>> normalize_identifier(1.0), normalize_identifier(" N3 "), normalize_identifier(float('nan'))
    ('1', 'N3', None)
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if isinstance(value, (bool, np.bool_)):
        return str(value).upper()
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return None
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))
    if pd.isna(value):
        return None
    return str(value).strip() or None


def _clean_frame(df: pd.DataFrame) -> pd.DataFrame:
    df = df.dropna(how='all')
    df.columns = [str(c).strip() for c in df.columns]
    return df.reset_index(drop=True)


def _coordinate_column(df: pd.DataFrame, column: str) -> np.ndarray:
    if column not in df.columns:
        logger.warning(f"Nodes sheet has no '{column}' column, using 0")
        return np.zeros(len(df))
    values = pd.to_numeric(df[column], errors='coerce').astype(float)
    # "inf" and "Infinity" parse as numbers; they read as 0 like any other non-coordinate
    values = values.where(np.isfinite(values), 0.0)
    return values.to_numpy()


def _identifier_column(df: pd.DataFrame, column: str) -> list:
    if column not in df.columns:
        logger.warning(f"Sheet has no '{column}' column")
        return [None] * len(df)
    return [normalize_identifier(v) for v in df[column].tolist()]


def frames_to_dataset(
    members_df: pd.DataFrame,
    nodes_df: pd.DataFrame,
    config=VIEWER_CONFIG,
) -> FrameDataset:
    """
    Build a FrameDataset from decoded member and node rows.
    
    Parameters:
    -----------
    members_df : pd.DataFrame
        Rows of the members sheet
        
    nodes_df : pd.DataFrame
        Rows of the nodes sheet
    
    Returns:
    --------
    FrameDataset
    
    Raises:
    -------
    MissingSheetDataError
        If either frame has no data rows
    """
    members_df = _clean_frame(members_df)
    nodes_df = _clean_frame(nodes_df)
    
    if members_df.empty or nodes_df.empty:
        raise MissingSheetDataError("Invalid data in Excel file: members or nodes sheet is empty")
    
    starts = _identifier_column(members_df, config.start_node_column)
    ends = _identifier_column(members_df, config.end_node_column)
    members = tuple(Member(start=s, end=e) for s, e in zip(starts, ends))
    
    ids = _identifier_column(nodes_df, config.node_column)
    xs = _coordinate_column(nodes_df, config.x_column)
    ys = _coordinate_column(nodes_df, config.y_column)
    zs = _coordinate_column(nodes_df, config.z_column)
    
    nodes = []
    for node_id, x, y, z in zip(ids, xs, ys, zs):
        if node_id is None:
            logger.debug(f"Node row without identifier at ({x}, {y}, {z}) ignored")
            continue
        nodes.append(Node(node_id, float(x), float(y), float(z)))
    
    logger.debug(f"Decoded {len(members)} member rows and {len(nodes)} node rows")
    return FrameDataset(members=members, nodes=tuple(nodes))


def read_sheets(source: WorkbookSource) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Decode the first two sheets of a workbook.
    
    Raises:
    -------
    FileReadError
        If the source cannot be opened as a spreadsheet
    MissingSheetDataError
        If the workbook has fewer than two sheets
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    
    try:
        with pd.ExcelFile(source) as xls:
            sheet_names = xls.sheet_names
            if len(sheet_names) < 2:
                raise MissingSheetDataError(
                    f"Workbook needs a members sheet and a nodes sheet, found {len(sheet_names)} sheet(s)"
                )
            members_df = xls.parse(sheet_names[0])
            nodes_df = xls.parse(sheet_names[1])
    except MissingSheetDataError:
        raise
    except Exception as exc:
        raise FileReadError(f"Could not read workbook: {exc}") from exc
    
    logger.debug(f"Read sheets '{sheet_names[0]}' and '{sheet_names[1]}'")
    return members_df, nodes_df


def load_workbook(source: WorkbookSource, config=VIEWER_CONFIG) -> FrameDataset:
    """
    Read a frame workbook into a FrameDataset.
    
    Parameters:
    -----------
    source : bytes, file-like object, str or Path
        The uploaded workbook
    
    Returns:
    --------
    FrameDataset
    
    Raises:
    -------
    FrameLoadError
        FileReadError or MissingSheetDataError; the caller decides how to
        surface it
    """
    members_df, nodes_df = read_sheets(source)
    dataset = frames_to_dataset(members_df, nodes_df, config=config)
    logger.info(f"Loaded {len(dataset.members)} members and {len(dataset.nodes)} nodes")
    return dataset
