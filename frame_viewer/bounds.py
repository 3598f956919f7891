"""
SCENE BOUNDS: Centering and Camera Distance
===========================================

The viewer translates the whole frame so that the middle of its bounding
box sits at the origin, then places the camera one "size" away along each
axis. size is the largest axis extent with a margin:

    size = max(dx, dy, dz) * 1.5

An empty dataset has no extent at all. It gets a fixed bounds of
center (0, 0, 0) and size 10 so the camera never receives infinities.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .config import VIEWER_CONFIG

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class SceneBounds:
    """
    Axis-aligned bounds of all node positions.
    
    minima/maxima are None for an empty scene.
    """
    center: Vec3
    size: float
    minima: Optional[Vec3] = None
    maxima: Optional[Vec3] = None
    
    @classmethod
    def default(cls) -> 'SceneBounds':
        return cls(center=(0.0, 0.0, 0.0), size=VIEWER_CONFIG.empty_scene_size)
    
    @property
    def is_empty(self) -> bool:
        return self.minima is None


def compute_scene_bounds(
    positions: Iterable[Sequence[float]],
    margin_factor: float = VIEWER_CONFIG.margin_factor,
) -> SceneBounds:
    """
    Fold over node positions to find the bounding box, center and size.
    
    Parameters:
    -----------
    positions : Iterable[Sequence[float]]
        (x, y, z) of every node
        
    margin_factor : float
        Multiplier applied to the largest axis extent
    
    Returns:
    --------
    SceneBounds
        Bounds of the positions, or SceneBounds.default() if there are none
    
    Example:
    --------
    >>> b = compute_scene_bounds([(0, 0, 0), (10, 0, 0), (0, 10, 0)])
    >>> b.center, b.size
    ((5.0, 5.0, 0.0), 15.0)
    """
    lo = [math.inf, math.inf, math.inf]
    hi = [-math.inf, -math.inf, -math.inf]
    n = 0
    
    for pos in positions:
        n += 1
        for axis in range(3):
            value = float(pos[axis])
            lo[axis] = min(lo[axis], value)
            hi[axis] = max(hi[axis], value)
    
    if n == 0:
        return SceneBounds.default()
    
    center = tuple((lo[axis] + hi[axis]) / 2 for axis in range(3))
    size = max(hi[axis] - lo[axis] for axis in range(3)) * margin_factor
    
    return SceneBounds(
        center=center,
        size=size,
        minima=tuple(lo),
        maxima=tuple(hi),
    )
