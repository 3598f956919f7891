"""
3D model viewer component using Plotly.
"""

import plotly.graph_objects as go
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from frame_viewer.config import VIEWER_CONFIG
from frame_viewer.scene import Scene
from frame_viewer.viz.viz3d import create_scene_figure


def render_3d_model(
    scene: Scene,
    height: int = 500,
    show_nodes: bool = True,
    show_endpoints: bool = True,
    show_axes: bool = True,
) -> go.Figure:
    """
    Create a 3D visualization of the loaded frame.
    
    Parameters:
    -----------
    scene : Scene
        Composed scene of the current upload
    height : int
        Figure height in pixels
    show_nodes : bool
        Draw a marker at every node
    show_endpoints : bool
        Draw cubes at nodes touched by a single member
    show_axes : bool
        Draw the x/y/z axes helper at the origin
    
    Returns:
    --------
    go.Figure
        Plotly figure
    """
    return create_scene_figure(
        scene,
        config=replace(VIEWER_CONFIG, show_axes=show_axes),
        height=height,
        show_nodes=show_nodes,
        show_endpoints=show_endpoints,
    )
