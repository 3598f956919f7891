"""
Test the Plotly renderer: mesh construction and figure layout.
"""

import numpy as np
import plotly.graph_objects as go
import pytest

from frame_viewer.config import VIEWER_CONFIG
from frame_viewer.geometry import cylinder_between
from frame_viewer.model import FrameDataset, Member, Node
from frame_viewer.scene import compose_scene
from frame_viewer.viz.viz3d import create_scene_figure, cube_mesh, cylinder_mesh, plot_scene


def make_tripod_scene():
    dataset = FrameDataset(
        members=(Member("top", "a"), Member("top", "b"), Member("top", "c"), Member("a", "missing")),
        nodes=(
            Node("top", 0, 4, 0),
            Node("a", 2, 0, 0),
            Node("b", -1, 0, 1.7),
            Node("c", -1, 0, -1.7),
        ),
    )
    return compose_scene(dataset)


class TestMeshes:
    
    def test_cylinder_mesh_size(self):
        spec = cylinder_between((0, 0, 0), (0, 2, 0))
        vertices, faces = cylinder_mesh(spec, radius=0.1, segments=16)
        
        assert vertices.shape == (34, 3)
        assert faces.shape == (64, 3)
        assert faces.min() == 0
        assert faces.max() == 33
    
    def test_vertical_cylinder_extent(self):
        spec = cylinder_between((0, 0, 0), (0, 2, 0))
        vertices, _ = cylinder_mesh(spec, radius=0.1, segments=16)
        
        assert vertices[:, 1].min() == pytest.approx(0.0)
        assert vertices[:, 1].max() == pytest.approx(2.0)
        radial = np.hypot(vertices[:, 0], vertices[:, 2])
        assert radial.max() == pytest.approx(0.1)
    
    def test_rotated_cylinder_lies_along_member(self):
        spec = cylinder_between((1, 1, 1), (6, 1, 1))
        vertices, _ = cylinder_mesh(spec, radius=0.2, segments=8)
        
        assert vertices[:, 0].min() == pytest.approx(1.0)
        assert vertices[:, 0].max() == pytest.approx(6.0)
        radial = np.hypot(vertices[:, 1] - 1, vertices[:, 2] - 1)
        assert radial.max() == pytest.approx(0.2)
    
    def test_offset_is_applied(self):
        spec = cylinder_between((0, 0, 0), (0, 2, 0))
        plain, _ = cylinder_mesh(spec)
        shifted, _ = cylinder_mesh(spec, offset=(10, -1, 0))
        
        np.testing.assert_allclose(shifted - plain, np.tile([10, -1, 0], (len(plain), 1)))
    
    def test_cube_mesh(self):
        vertices, faces = cube_mesh((1, 2, 3), size=0.8)
        
        assert vertices.shape == (8, 3)
        assert faces.shape == (12, 3)
        np.testing.assert_allclose(vertices.min(axis=0), [0.6, 1.6, 2.6])
        np.testing.assert_allclose(vertices.max(axis=0), [1.4, 2.4, 3.4])
        # Every corner is used by some triangle
        assert set(faces.ravel()) == set(range(8))


class TestFigure:
    
    def test_traces(self):
        scene = make_tripod_scene()
        fig = create_scene_figure(scene)
        
        names = [t.name for t in fig.data if t.name]
        assert names == ['Members', 'Endpoints', 'Nodes']
        
        members = fig.data[0]
        assert isinstance(members, go.Mesh3d)
        per_cylinder = 2 * VIEWER_CONFIG.cylinder_segments + 2
        assert len(members.x) == 3 * per_cylinder
        assert members.color == VIEWER_CONFIG.member_color
    
    def test_scene_is_centered(self):
        scene = make_tripod_scene()
        fig = create_scene_figure(scene)
        
        nodes = next(t for t in fig.data if t.name == 'Nodes')
        xs = np.array(nodes.x)
        ys = np.array(nodes.y)
        assert (xs.min() + xs.max()) / 2 == pytest.approx(0.0)
        assert (ys.min() + ys.max()) / 2 == pytest.approx(0.0)
    
    def test_layout_and_camera(self):
        scene = make_tripod_scene()
        fig = create_scene_figure(scene, height=600)
        
        half = scene.bounds.size / 2
        assert tuple(fig.layout.scene.xaxis.range) == pytest.approx((-half, half))
        assert fig.layout.scene.camera.up.y == 1
        assert fig.layout.scene.aspectmode == 'cube'
        assert fig.layout.height == 600
    
    def test_hide_optional_layers(self):
        scene = make_tripod_scene()
        fig = create_scene_figure(scene, show_nodes=False, show_endpoints=False)
        
        names = [t.name for t in fig.data if t.name]
        assert names == ['Members']
    
    def test_empty_scene(self):
        scene = compose_scene(FrameDataset.empty())
        fig = create_scene_figure(scene)
        
        # Only the axes helper remains
        assert len(fig.data) == 3
        assert tuple(fig.layout.scene.xaxis.range) == pytest.approx((-5.0, 5.0))
    
    def test_plot_scene_writes_html(self, tmp_path):
        outpath = tmp_path / "out" / "frame.html"
        plot_scene(make_tripod_scene(), outpath=str(outpath), show=False)
        
        assert outpath.exists()
        assert "plotly" in outpath.read_text(encoding='utf-8').lower()
