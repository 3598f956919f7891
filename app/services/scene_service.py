"""
Scene service: turns uploads into viewer state and viewer state into scenes.
"""

import hashlib
import sys
from pathlib import Path
from typing import Any, Dict

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from frame_viewer.scene import Scene, compose_scene
from frame_viewer.state import ViewerState


def compute_frame_metrics(state: ViewerState, scene: Scene) -> Dict[str, Any]:
    """
    Summarize the loaded frame.
    
    Returns:
        dict with member/node counts, drawn/skipped counts and length range
    """
    lengths = [c.spec.length for c in scene.cylinders]
    n_unresolved = sum(1 for s in scene.skipped if s.reason == 'unresolved')
    
    return {
        'n_members': len(state.dataset.members),
        'n_nodes': len(state.dataset.nodes),
        'n_drawn': len(scene.cylinders),
        'n_endpoints': len(scene.endpoints),
        'n_skipped': len(scene.skipped),
        'n_unresolved': n_unresolved,
        'n_degenerate': len(scene.skipped) - n_unresolved,
        'total_length': sum(lengths),
        'max_member_length': max(lengths) if lengths else 0.0,
        'min_member_length': min(lengths) if lengths else 0.0,
        'scene_size': scene.bounds.size,
    }


class SceneService:
    """Service for loading uploads and composing scenes."""
    
    @staticmethod
    def upload_token(name: str, data: bytes) -> str:
        """Hash of an upload, used to detect a new file across reruns."""
        return hashlib.md5(name.encode() + data).hexdigest()
    
    @staticmethod
    def load_upload(name: str, data: bytes) -> ViewerState:
        """Read an uploaded workbook into a fresh viewer state."""
        return ViewerState.from_upload(name, data)
    
    @staticmethod
    def build_scene(state: ViewerState) -> Scene:
        return compose_scene(state.dataset)
