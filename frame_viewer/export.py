"""
Scene serialization for front-ends that draw the scene themselves.

The JSON layout mirrors a three.js scene graph: one group translated by
`group.position`, containing meshes placed by `position` / `quaternion`
(x, y, z, w).
"""

import csv
import io
import json
from typing import Any, Dict

from .config import VIEWER_CONFIG
from .scene import Scene
from .viz.viz3d import create_scene_figure


def _vec(v) -> list:
    return [round(float(c), 9) for c in v]


def scene_to_dict(scene: Scene, config=VIEWER_CONFIG) -> Dict[str, Any]:
    """Convert a Scene into plain JSON-serializable data."""
    cylinders = [
        {
            'key': c.key,
            'start': c.start_id,
            'end': c.end_id,
            'position': _vec(c.spec.center),
            'quaternion': _vec(c.spec.orientation.as_tuple()),
            'length': float(c.spec.length),
            'radius': config.cylinder_radius,
        }
        for c in scene.cylinders
    ]
    endpoints = [
        {
            'key': e.key,
            'node': e.node_id,
            'position': _vec(e.position),
            'size': config.endpoint_cube_size,
        }
        for e in scene.endpoints
    ]
    points = [
        {'key': p.key, 'node': p.node_id, 'position': _vec(p.position)}
        for p in scene.points
    ]
    skipped = [
        {'start': s.member.start, 'end': s.member.end, 'reason': s.reason}
        for s in scene.skipped
    ]
    
    return {
        'version': '1.0',
        'bounds': {
            'center': _vec(scene.bounds.center),
            'size': float(scene.bounds.size),
        },
        'group': {'position': _vec(scene.group_offset)},
        'camera': {
            'position': _vec(scene.camera.position),
            'target': _vec(scene.camera.target),
            'fov': scene.camera.fov,
        },
        'cylinders': cylinders,
        'endpoints': endpoints,
        'points': points,
        'skipped': skipped,
    }


def scene_to_json(scene: Scene, indent: int = 2) -> str:
    return json.dumps(scene_to_dict(scene), indent=indent)


def member_list_csv(scene: Scene) -> str:
    """CSV of drawn members, shortest first."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['key', 'start_node', 'end_node', 'length'])
    
    for cyl in sorted(scene.cylinders, key=lambda c: c.spec.length):
        writer.writerow([cyl.key, cyl.start_id, cyl.end_id, round(cyl.spec.length, 4)])
    
    return output.getvalue()


def skipped_members_csv(scene: Scene) -> str:
    """CSV of members left out of the scene and why."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['start_node', 'end_node', 'reason'])
    for skipped in scene.skipped:
        writer.writerow([skipped.member.start or '', skipped.member.end or '', skipped.reason])
    return output.getvalue()


def scene_to_html(scene: Scene, title: str = "Frame Structure") -> str:
    """Standalone interactive HTML page of the scene."""
    fig = create_scene_figure(scene, title=title)
    return fig.to_html(include_plotlyjs='cdn', full_html=True)
