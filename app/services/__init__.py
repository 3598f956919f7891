# app/services - Business logic layer
from .scene_service import SceneService
from .export_service import ExportService

__all__ = ['SceneService', 'ExportService']
