"""
Custom exception hierarchy for the file library generator.

Only failures that abort a generation run are raised; a file that disappears
mid-scan is dropped by the scanner instead.
"""


class FileLibraryError(Exception):
    """Base exception for all file library errors."""
    pass


class ScanError(FileLibraryError):
    """Raised when the scan root cannot be listed."""
    pass


class RenderError(FileLibraryError):
    """Raised when the page template fails to render."""
    pass


class OutputWriteError(FileLibraryError):
    """Raised when the generated document cannot be written."""
    pass
