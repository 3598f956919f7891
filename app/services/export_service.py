"""
Export service: handles file exports (JSON, CSV, HTML).
"""

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from frame_viewer.export import member_list_csv, scene_to_html, scene_to_json, skipped_members_csv
from frame_viewer.scene import Scene


class ExportService:
    """Service for exporting scene data to various formats."""
    
    @staticmethod
    def generate_scene_json(scene: Scene) -> str:
        """
        Generate the scene description as JSON.
        
        Returns JSON content as a string.
        """
        return scene_to_json(scene)
    
    @staticmethod
    def generate_member_list_csv(scene: Scene) -> str:
        """Generate a CSV of drawn members with their lengths."""
        return member_list_csv(scene)
    
    @staticmethod
    def generate_skipped_csv(scene: Scene) -> str:
        return skipped_members_csv(scene)
    
    @staticmethod
    def generate_scene_html(scene: Scene, title: str = "Frame Structure") -> str:
        return scene_to_html(scene, title=title)
