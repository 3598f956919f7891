"""
SCENE COMPOSITION: From Dataset to Renderable Description
=========================================================

PURPOSE:
--------
compose_scene() is the single place where a FrameDataset becomes something
a renderer can draw. It produces a Scene holding:

    cylinders   one per drawable member (CylinderSpec + stable key)
    endpoints   one cube per endpoint node (touched by exactly one member)
    points      one marker per node
    bounds      SceneBounds over all nodes
    group_offset  -bounds.center, applied to every primitive
    camera      position (center + size on each axis), target origin, fov
    skipped     members that could not be drawn, with the reason

Rasterization, lighting and orbit/pan/zoom belong to the renderer
(viz.viz3d for Plotly, or any client of the JSON export).

STABLE KEYS:
------------
Primitives are keyed by node identifiers, never by list position:

    member:<start>-<end>      (#2, #3, ... for repeated pairs)
    endpoint:<node id>
    node:<node id>

so filtering a list never shifts the identity of the remaining entries.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

from .bounds import SceneBounds, Vec3, compute_scene_bounds
from .config import VIEWER_CONFIG
from .connectivity import connection_counts, endpoint_ids
from .geometry import CylinderSpec, cylinder_between
from .model import FrameDataset, Member

logger = logging.getLogger(__name__)

SKIP_UNRESOLVED = 'unresolved'
SKIP_DEGENERATE = 'degenerate'


@dataclass(frozen=True)
class CylinderPrimitive:
    """A member drawn as a cylinder."""
    key: str
    start_id: str
    end_id: str
    spec: CylinderSpec


@dataclass(frozen=True)
class EndpointMarker:
    """Cube drawn at a node touched by exactly one member."""
    key: str
    node_id: str
    position: Vec3


@dataclass(frozen=True)
class NodePoint:
    key: str
    node_id: str
    position: Vec3


@dataclass(frozen=True)
class Camera:
    position: Vec3
    target: Vec3 = (0.0, 0.0, 0.0)
    fov: float = VIEWER_CONFIG.fov


@dataclass(frozen=True)
class SkippedMember:
    member: Member
    reason: str


@dataclass(frozen=True)
class Scene:
    """Renderable description of one dataset."""
    bounds: SceneBounds
    group_offset: Vec3
    camera: Camera
    cylinders: Tuple[CylinderPrimitive, ...] = field(default_factory=tuple)
    endpoints: Tuple[EndpointMarker, ...] = field(default_factory=tuple)
    points: Tuple[NodePoint, ...] = field(default_factory=tuple)
    skipped: Tuple[SkippedMember, ...] = field(default_factory=tuple)
    
    @property
    def primitives(self) -> list:
        return [*self.cylinders, *self.endpoints, *self.points]
    
    @property
    def is_empty(self) -> bool:
        return not self.cylinders and not self.points


def camera_for_bounds(bounds: SceneBounds, fov: float = VIEWER_CONFIG.fov) -> Camera:
    """Place the camera at center + size on every axis, looking at the origin."""
    cx, cy, cz = bounds.center
    s = bounds.size
    return Camera(position=(cx + s, cy + s, cz + s), target=(0.0, 0.0, 0.0), fov=fov)


def compose_scene(dataset: FrameDataset, config=VIEWER_CONFIG) -> Scene:
    """
    Build the scene description for a dataset.
    
    Members whose nodes do not resolve, and members whose two nodes
    coincide, are left out of the primitives and listed in Scene.skipped.
    Neither aborts the composition.
    
    Parameters:
    -----------
    dataset : FrameDataset
        Members and nodes of the current upload
        
    config : ViewerConfig
        Margin factor, epsilon and camera fov
    
    Returns:
    --------
    Scene
    """
    counts = connection_counts(dataset.members)
    endpoints = endpoint_ids(counts)
    
    cylinders: List[CylinderPrimitive] = []
    markers: List[EndpointMarker] = []
    skipped: List[SkippedMember] = []
    seen_pairs: Counter = Counter()
    marked: set = set()
    
    for member in dataset.members:
        resolved = dataset.resolve(member)
        if resolved is None:
            logger.warning(f"Member {member.label} references a missing node, skipped")
            skipped.append(SkippedMember(member, SKIP_UNRESOLVED))
            continue
        
        start_node, end_node = resolved
        spec = cylinder_between(
            start_node.position,
            end_node.position,
            eps=config.degenerate_eps,
            small_length=config.small_member_length,
        )
        if spec is None:
            skipped.append(SkippedMember(member, SKIP_DEGENERATE))
            continue
        
        base_key = f"member:{member.start}-{member.end}"
        seen_pairs[base_key] += 1
        key = base_key if seen_pairs[base_key] == 1 else f"{base_key}#{seen_pairs[base_key]}"
        cylinders.append(CylinderPrimitive(key, member.start, member.end, spec))
        
        for node in (start_node, end_node):
            if node.id in endpoints and node.id not in marked:
                marked.add(node.id)
                markers.append(EndpointMarker(
                    key=f"endpoint:{node.id}",
                    node_id=node.id,
                    position=(node.x, node.y, node.z),
                ))
    
    nodes = dataset.unique_nodes
    points = [
        NodePoint(key=f"node:{n.id}", node_id=n.id, position=(n.x, n.y, n.z))
        for n in nodes
    ]
    
    bounds = compute_scene_bounds(
        [(n.x, n.y, n.z) for n in nodes],
        margin_factor=config.margin_factor,
    )
    if bounds.is_empty:
        bounds = SceneBounds(center=(0.0, 0.0, 0.0), size=config.empty_scene_size)
    
    offset = tuple(-c for c in bounds.center)
    
    logger.info(
        f"Composed scene: {len(cylinders)} members, {len(markers)} endpoints, "
        f"{len(points)} nodes, {len(skipped)} skipped"
    )
    
    return Scene(
        bounds=bounds,
        group_offset=offset,
        camera=camera_for_bounds(bounds, fov=config.fov),
        cylinders=tuple(cylinders),
        endpoints=tuple(markers),
        points=tuple(points),
        skipped=tuple(skipped),
    )
