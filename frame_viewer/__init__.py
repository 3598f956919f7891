# frame_viewer - Spreadsheet-driven 3D frame viewer
"""
FRAME_VIEWER: Tabular Frame Data to Interactive 3D Scenes
=========================================================

This package provides:
- Workbook loading (members sheet + nodes sheet -> FrameDataset)
- Member geometry (oriented cylinders between node pairs)
- Endpoint classification (nodes touched by exactly one member)
- Scene bounds, centering and camera placement
- Plotly rendering of the composed scene

ARCHITECTURE:
-------------
    model.py        Node, Member, FrameDataset
    state.py        ViewerState (immutable, replaced per upload)
    loader.py       Spreadsheet decoding (pandas) and row normalization
    geometry.py     Quaternion, CylinderSpec, cylinder_between
    connectivity.py Connection counting and endpoint detection
    bounds.py       SceneBounds
    scene.py        Scene composition (primitives, group offset, camera)
    export.py       JSON / CSV / HTML export of a composed scene
    viz/            Plotly renderer
"""

from .errors import FrameLoadError, FileReadError, MissingSheetDataError
from .model import Node, Member, FrameDataset
from .state import ViewerState
from .geometry import Quaternion, CylinderSpec, cylinder_between
from .connectivity import connection_counts, endpoint_ids
from .bounds import SceneBounds, compute_scene_bounds
from .scene import Scene, compose_scene
from .loader import load_workbook, frames_to_dataset

__version__ = "0.1.0"

__all__ = [
    'FrameLoadError',
    'FileReadError',
    'MissingSheetDataError',
    'Node',
    'Member',
    'FrameDataset',
    'ViewerState',
    'Quaternion',
    'CylinderSpec',
    'cylinder_between',
    'connection_counts',
    'endpoint_ids',
    'SceneBounds',
    'compute_scene_bounds',
    'Scene',
    'compose_scene',
    'load_workbook',
    'frames_to_dataset',
]
