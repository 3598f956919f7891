"""
Exceptions raised while loading a frame workbook.

Only load failures are exceptions. Per-member problems (unresolved node
references, coincident end points) are recorded on the composed scene and
never raised.
"""


class FrameLoadError(RuntimeError):
    """Raised when an uploaded workbook cannot be turned into a dataset."""
    pass


class FileReadError(FrameLoadError):
    """Raised when the upload is unreadable or not a spreadsheet."""
    pass


class MissingSheetDataError(FrameLoadError):
    """Raised when the members or nodes sheet is missing or empty."""
    pass
