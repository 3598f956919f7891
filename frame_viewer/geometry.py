"""
MEMBER GEOMETRY: Oriented Cylinders Between Two Points
======================================================

PURPOSE:
--------
A member is drawn as a cylinder. Cylinder primitives (Plotly meshes built
by viz3d, or any three.js-style runtime consuming the scene JSON) are
created along the canonical UP axis (0, 1, 0), centered at the origin.
To place one between nodes i and j we need:

    length      = |p_j - p_i|
    center      = (p_i + p_j) / 2
    orientation = rotation taking UP onto (p_j - p_i) / length

THE SHORTEST-ARC QUATERNION:
----------------------------
For unit vectors u (from) and v (to):

    r = 1 + u·v
    q = (u × v, r), then normalized

When u and v point in opposite directions r -> 0 and u × v -> 0: every
axis orthogonal to u is valid. We pick one explicitly and rotate 180°.

DEGENERATE MEMBERS:
-------------------
If both nodes sit at the same location the direction is undefined. The
member cannot be drawn, so cylinder_between() returns None and logs a
warning. It never raises: one bad row must not abort the whole scene.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import VIEWER_CONFIG

logger = logging.getLogger(__name__)

UP = np.array([0.0, 1.0, 0.0])


@dataclass(frozen=True)
class Quaternion:
    """
    Unit quaternion (x, y, z, w) describing a rotation.
    
    Component order matches three.js (x, y, z, w) so that as_tuple() can be
    fed straight into a WebGL front-end.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0
    
    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(0.0, 0.0, 0.0, 1.0)
    
    @classmethod
    def from_unit_vectors(cls, v_from: np.ndarray, v_to: np.ndarray) -> 'Quaternion':
        """
        Shortest-arc rotation taking unit vector v_from onto unit vector v_to.
        
        Both inputs MUST already be normalized.
        """
        r = float(np.dot(v_from, v_to)) + 1.0
        
        if r < 1e-12:
            # Opposite vectors: rotate 180° about any axis orthogonal to v_from
            r = 0.0
            if abs(v_from[0]) > abs(v_from[2]):
                q = np.array([-v_from[1], v_from[0], 0.0, r])
            else:
                q = np.array([0.0, -v_from[2], v_from[1], r])
        else:
            axis = np.cross(v_from, v_to)
            q = np.array([axis[0], axis[1], axis[2], r])
        
        q = q / np.linalg.norm(q)
        return cls(float(q[0]), float(q[1]), float(q[2]), float(q[3]))
    
    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)
    
    def as_matrix(self) -> np.ndarray:
        """3×3 rotation matrix of this quaternion."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return np.array([
            [1 - 2*(y*y + z*z), 2*(x*y - z*w),     2*(x*z + y*w)],
            [2*(x*y + z*w),     1 - 2*(x*x + z*z), 2*(y*z - x*w)],
            [2*(x*z - y*w),     2*(y*z + x*w),     1 - 2*(x*x + y*y)],
        ])
    
    def rotate(self, vector: Sequence[float]) -> np.ndarray:
        """Apply this rotation to a 3-vector."""
        return self.as_matrix() @ np.asarray(vector, dtype=float)


@dataclass(frozen=True)
class CylinderSpec:
    """
    Placement of a cylinder primitive between two points.
    
    Parameters:
    -----------
    center : Tuple[float, float, float]
        Midpoint of the two end points
        
    orientation : Quaternion
        Rotation taking UP (0, 1, 0) onto the member direction
        
    length : float
        Distance between the two end points (always > 0)
    """
    center: Tuple[float, float, float]
    orientation: Quaternion
    length: float
    
    @property
    def direction(self) -> np.ndarray:
        """Unit vector along the member (start -> end)."""
        return self.orientation.rotate(UP)


def cylinder_between(
    start: Sequence[float],
    end: Sequence[float],
    eps: float = VIEWER_CONFIG.degenerate_eps,
    small_length: float = VIEWER_CONFIG.small_member_length,
) -> Optional[CylinderSpec]:
    """
    Compute the cylinder placement for a member from start to end.
    
    Parameters:
    -----------
    start, end : Sequence[float]
        (x, y, z) coordinates of the two member ends
        
    eps : float
        Lengths below this are treated as coincident points
        
    small_length : float
        Lengths below this are kept but logged as suspiciously short
    
    Returns:
    --------
    Optional[CylinderSpec]
        The placement, or None if the points coincide or a coordinate is
        not finite (degenerate member)
    
    Example:
    --------
    >>> spec = cylinder_between((0, 0, 0), (0, 5, 0))
    >>> spec.length, spec.center
    (5.0, (0.0, 2.5, 0.0))
    >>> spec.orientation == Quaternion.identity()
    True
    """
    p_start = np.asarray(start, dtype=float)
    p_end = np.asarray(end, dtype=float)
    
    direction = p_end - p_start
    length = float(np.linalg.norm(direction))
    
    if not math.isfinite(length):
        logger.warning(
            f"Degenerate member skipped: non-finite coordinates {tuple(p_start)} -> {tuple(p_end)}"
        )
        return None
    
    if length < eps:
        logger.warning(
            f"Degenerate member skipped: start {tuple(p_start)} and end {tuple(p_end)} coincide"
        )
        return None
    
    if length < small_length:
        logger.warning(f"Very small member length detected: {length:.3g}")
    
    center = (p_start + p_end) * 0.5
    orientation = Quaternion.from_unit_vectors(UP, direction / length)
    
    return CylinderSpec(
        center=(float(center[0]), float(center[1]), float(center[2])),
        orientation=orientation,
        length=length,
    )
