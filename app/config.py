"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class AppConfig:
    """Global application configuration."""
    
    # App metadata
    app_name: str = "FrameView"
    app_subtitle: str = "3D Structure Viewer"
    version: str = "0.1.0"
    
    # Upload
    upload_types: List[str] = None
    
    # Layout
    viewer_height: int = 700
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    def __post_init__(self):
        if self.upload_types is None:
            self.upload_types = ['xlsx', 'xls']


# Global config instance
CONFIG = AppConfig()
