"""
3D VISUALIZATION: Interactive Frame Viewer
==========================================

PURPOSE:
--------
Render a composed Scene with Plotly:
- Members as solid cylinders (Mesh3d), oriented by their quaternion
- Endpoint nodes as cubes (Mesh3d)
- All nodes as point markers (Scatter3d)
- An axes helper at the origin

The scene group offset (-center of bounds) is applied to every vertex, so
the frame is centered on the origin just like the scene description says.

MESH BATCHING:
--------------
A frame can have thousands of members. One Mesh3d trace per member makes
Plotly slow, so all cylinders are merged into a single trace (and all
cubes into another). Face indices of each mesh are shifted by the number
of vertices already emitted.
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

from ..config import VIEWER_CONFIG
from ..geometry import CylinderSpec
from ..scene import Scene

logger = logging.getLogger(__name__)

Mesh = Tuple[np.ndarray, np.ndarray]  # (vertices N×3, triangle faces M×3)

# Unit cube corners and triangles (two per face)
_CUBE_VERTICES = np.array([
    [0, 0, 0], [0, 1, 0], [1, 1, 0], [1, 0, 0],
    [0, 0, 1], [0, 1, 1], [1, 1, 1], [1, 0, 1],
], dtype=float) - 0.5
_CUBE_FACES = np.array([
    [7, 3, 0], [0, 4, 7], [0, 1, 2], [0, 2, 3],
    [4, 5, 6], [4, 6, 7], [6, 5, 1], [6, 2, 1],
    [4, 0, 5], [0, 1, 5], [3, 6, 7], [2, 3, 6],
], dtype=int)


def cylinder_mesh(
    spec: CylinderSpec,
    radius: float = VIEWER_CONFIG.cylinder_radius,
    segments: int = VIEWER_CONFIG.cylinder_segments,
    offset: Sequence[float] = (0.0, 0.0, 0.0),
) -> Mesh:
    """
    Triangulate a capped cylinder placed by a CylinderSpec.
    
    The cylinder is built along the UP axis (y) from -length/2 to
    +length/2, rotated by spec.orientation and moved to spec.center + offset.
    
    Returns:
    --------
    (vertices, faces)
        vertices: (2*segments + 2) × 3 array
        faces:    4*segments × 3 array of vertex indices
    """
    half = spec.length / 2
    theta = np.linspace(0.0, 2 * np.pi, segments, endpoint=False)
    ring_x = radius * np.cos(theta)
    ring_z = radius * np.sin(theta)
    
    bottom = np.column_stack([ring_x, np.full(segments, -half), ring_z])
    top = np.column_stack([ring_x, np.full(segments, half), ring_z])
    caps = np.array([[0.0, -half, 0.0], [0.0, half, 0.0]])
    local = np.vstack([bottom, top, caps])
    
    faces = []
    cap_bottom, cap_top = 2 * segments, 2 * segments + 1
    for k in range(segments):
        a, b = k, (k + 1) % segments
        c, d = segments + a, segments + b
        faces.append([a, b, d])
        faces.append([a, d, c])
        faces.append([cap_bottom, b, a])
        faces.append([cap_top, c, d])
    
    R = spec.orientation.as_matrix()
    vertices = local @ R.T + np.asarray(spec.center) + np.asarray(offset, dtype=float)
    return vertices, np.array(faces, dtype=int)


def cube_mesh(
    center: Sequence[float],
    size: float = VIEWER_CONFIG.endpoint_cube_size,
    offset: Sequence[float] = (0.0, 0.0, 0.0),
) -> Mesh:
    """Axis-aligned cube of edge `size` centered at center + offset."""
    vertices = _CUBE_VERTICES * size + np.asarray(center, dtype=float) + np.asarray(offset, dtype=float)
    return vertices, _CUBE_FACES.copy()


def _merge_meshes(meshes: List[Mesh]) -> Mesh:
    all_vertices, all_faces = [], []
    n = 0
    for vertices, faces in meshes:
        all_vertices.append(vertices)
        all_faces.append(faces + n)
        n += len(vertices)
    if not all_vertices:
        return np.zeros((0, 3)), np.zeros((0, 3), dtype=int)
    return np.vstack(all_vertices), np.vstack(all_faces)


def _mesh_trace(mesh: Mesh, color: str, name: str, texts: Optional[List[str]] = None) -> go.Mesh3d:
    vertices, faces = mesh
    return go.Mesh3d(
        x=vertices[:, 0], y=vertices[:, 1], z=vertices[:, 2],
        i=faces[:, 0], j=faces[:, 1], k=faces[:, 2],
        color=color,
        name=name,
        flatshading=False,
        lighting=dict(ambient=0.5, diffuse=0.8, roughness=0.5, specular=0.2),
        lightposition=dict(x=10, y=10, z=10),
        text=texts,
        hoverinfo='text' if texts else 'skip',
        showlegend=True,
    )


def create_scene_figure(
    scene: Scene,
    config=VIEWER_CONFIG,
    title: Optional[str] = None,
    height: Optional[int] = None,
    show_nodes: bool = True,
    show_endpoints: bool = True,
) -> go.Figure:
    """
    Create a Plotly figure for a composed scene.
    
    Parameters:
    -----------
    scene : Scene
        Output of compose_scene()
        
    config : ViewerConfig
        Colors, cylinder radius/segments, cube size, helpers
        
    title : Optional[str]
        Plot title
        
    height : Optional[int]
        Figure height in pixels
        
    show_nodes : bool
        Whether to draw node markers
        
    show_endpoints : bool
        Whether to draw endpoint cubes
    
    Returns:
    --------
    go.Figure
        Plotly figure object (can be shown or saved)
    """
    fig = go.Figure()
    offset = np.asarray(scene.group_offset, dtype=float)
    
    # =========================================================================
    # MEMBERS
    # =========================================================================
    
    if scene.cylinders:
        meshes, texts = [], []
        for cyl in scene.cylinders:
            vertices, faces = cylinder_mesh(
                cyl.spec,
                radius=config.cylinder_radius,
                segments=config.cylinder_segments,
                offset=offset,
            )
            meshes.append((vertices, faces))
            label = f"Member {cyl.start_id} → {cyl.end_id}<br>L = {cyl.spec.length:.3f}"
            texts.extend([label] * len(vertices))
        fig.add_trace(_mesh_trace(_merge_meshes(meshes), config.member_color, 'Members', texts))
    
    # =========================================================================
    # ENDPOINTS
    # =========================================================================
    
    if show_endpoints and scene.endpoints:
        meshes, texts = [], []
        for marker in scene.endpoints:
            vertices, faces = cube_mesh(marker.position, size=config.endpoint_cube_size, offset=offset)
            meshes.append((vertices, faces))
            texts.extend([f"Endpoint {marker.node_id}"] * len(vertices))
        fig.add_trace(_mesh_trace(_merge_meshes(meshes), config.endpoint_color, 'Endpoints', texts))
    
    # =========================================================================
    # NODES
    # =========================================================================
    
    if show_nodes and scene.points:
        positions = np.array([p.position for p in scene.points], dtype=float)
        shifted = positions + offset
        node_texts = [
            f"Node {p.node_id}: ({p.position[0]:.2f}, {p.position[1]:.2f}, {p.position[2]:.2f})"
            for p in scene.points
        ]
        fig.add_trace(go.Scatter3d(
            x=shifted[:, 0], y=shifted[:, 1], z=shifted[:, 2],
            mode='markers',
            marker=dict(size=config.node_marker_size, color=config.node_color),
            name='Nodes',
            text=node_texts,
            hoverinfo='text',
        ))
    
    # =========================================================================
    # AXES HELPER
    # =========================================================================
    
    if config.show_axes:
        L = config.axes_length
        for axis, color in zip(np.eye(3), ('red', 'green', 'blue')):
            end = axis * L
            fig.add_trace(go.Scatter3d(
                x=[0.0, end[0]], y=[0.0, end[1]], z=[0.0, end[2]],
                mode='lines',
                line=dict(color=color, width=4),
                showlegend=False,
                hoverinfo='skip',
            ))
    
    # =========================================================================
    # LAYOUT
    # =========================================================================
    
    half = max(scene.bounds.size / 2, config.min_half_range)
    eye = (np.asarray(scene.camera.position) - np.asarray(scene.camera.target)) / (2 * half)
    axis_style = dict(range=[-half, half], backgroundcolor=config.background_color)
    
    fig.update_layout(
        scene=dict(
            xaxis=dict(title='X', **axis_style),
            yaxis=dict(title='Y', **axis_style),
            zaxis=dict(title='Z', **axis_style),
            aspectmode='cube',
            camera=dict(
                eye=dict(x=float(eye[0]), y=float(eye[1]), z=float(eye[2])),
                center=dict(x=0, y=0, z=0),
                up=dict(x=0, y=1, z=0),
                projection=dict(type='perspective'),
            ),
        ),
        paper_bgcolor=config.background_color,
        showlegend=True,
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
    )
    if title:
        fig.update_layout(title=dict(text=title, font=dict(size=16)))
    if height:
        fig.update_layout(height=height)
    
    return fig


def plot_scene(
    scene: Scene,
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save a frame visualization.
    
    Parameters:
    -----------
    scene : Scene
        See create_scene_figure()
        
    outpath : Optional[str]
        If provided, save as HTML file
        
    show : bool
        Whether to display the figure (default: True)
        
    **kwargs:
        Additional arguments passed to create_scene_figure()
    
    Example:
    --------
    >>> fig = plot_scene(scene, outpath="artifacts/frame.html", show=False)
    """
    fig = create_scene_figure(scene, **kwargs)
    
    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)
        logger.info(f"3D visualization saved to: {outpath}")
    
    if show:
        fig.show()
    
    return fig
