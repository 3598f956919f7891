# frame_viewer/viz - Visualization Tools
"""
VIZ: Plotly Rendering of Composed Scenes
========================================

This package turns a frame_viewer.scene.Scene into an interactive
Plotly figure (orbit, pan and zoom are provided by Plotly itself).
"""

from .viz3d import plot_scene, create_scene_figure, cylinder_mesh, cube_mesh

__all__ = ['plot_scene', 'create_scene_figure', 'cylinder_mesh', 'cube_mesh']
