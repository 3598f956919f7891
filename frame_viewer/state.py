"""
Viewer state: the dataset currently on screen plus the user-facing message.

The state has a simple lifecycle:
    created empty -> replaced entirely on a successful upload
                  -> reset to empty (with an error) on a failed upload
It is frozen; callers swap the whole object instead of editing fields.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .errors import FrameLoadError
from .loader import WorkbookSource, load_workbook
from .model import FrameDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerState:
    dataset: FrameDataset = field(default_factory=FrameDataset.empty)
    message: Optional[str] = None
    error: Optional[str] = None
    filename: Optional[str] = None
    
    @classmethod
    def empty(cls) -> 'ViewerState':
        return cls()
    
    @classmethod
    def loaded(cls, dataset: FrameDataset, filename: Optional[str] = None) -> 'ViewerState':
        message = f"Loaded {len(dataset.members)} members and {len(dataset.nodes)} nodes"
        return cls(dataset=dataset, message=message, error=None, filename=filename)
    
    @classmethod
    def failed(cls, reason: str, filename: Optional[str] = None) -> 'ViewerState':
        return cls(
            dataset=FrameDataset.empty(),
            message=None,
            error=f"Error processing file: {reason}",
            filename=filename,
        )
    
    @classmethod
    def from_upload(cls, filename: Optional[str], data: WorkbookSource) -> 'ViewerState':
        """
        Load an upload into a fresh state. Never raises for bad workbooks.
        """
        try:
            dataset = load_workbook(data)
        except FrameLoadError as exc:
            logger.error(f"Error processing file {filename}: {exc}")
            return cls.failed(str(exc), filename=filename)
        return cls.loaded(dataset, filename=filename)
    
    @property
    def has_data(self) -> bool:
        return bool(self.dataset.members) and bool(self.dataset.nodes)
