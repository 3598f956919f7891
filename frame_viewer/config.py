"""
Viewer configuration and rendering defaults.
"""

from dataclasses import dataclass


@dataclass
class ViewerConfig:
    """Scene and rendering constants shared by the composer and renderers."""
    
    # Workbook layout (first sheet = members, second sheet = nodes)
    start_node_column: str = "Start Node"
    end_node_column: str = "End Node"
    node_column: str = "Node"
    x_column: str = "X"
    y_column: str = "Y"
    z_column: str = "Z"
    
    # Geometry
    degenerate_eps: float = 1e-9
    small_member_length: float = 0.1
    
    # Scene bounds
    margin_factor: float = 1.5
    empty_scene_size: float = 10.0
    min_half_range: float = 1.0
    
    # Camera
    fov: float = 50.0
    
    # Members (cylinders)
    cylinder_radius: float = 0.1
    cylinder_segments: int = 16
    member_color: str = "#4287f5"
    
    # Endpoint markers (cubes)
    endpoint_cube_size: float = 0.8
    endpoint_color: str = "#2DC4B6"
    
    # Node points
    node_color: str = "red"
    node_marker_size: int = 4
    
    # Helpers
    show_axes: bool = True
    axes_length: float = 5.0
    background_color: str = "#f0f0f0"


# Global config instance
VIEWER_CONFIG = ViewerConfig()
