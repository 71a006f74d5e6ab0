from dataclasses import dataclass
from typing import Any, Dict

@dataclass(frozen=True)
class FileRecord:
    """
    Represents a file found during a scan.
    """
    name: str
    extension: str          # lower-case, no dot, '' if none
    size_bytes: int
    modified_ms: int        # epoch milliseconds
    preview_kind: str       # pdf/image/video/audio/html/text/link

    def to_payload(self) -> Dict[str, Any]:
        """Wire form embedded in the generated page."""
        return {
            'name': self.name,
            'ext': self.extension,
            'size': self.size_bytes,
            'mtimeMs': self.modified_ms,
            'preview': self.preview_kind,
        }

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "FileRecord":
        return cls(
            name=data['name'],
            extension=data['ext'],
            size_bytes=data['size'],
            modified_ms=data['mtimeMs'],
            preview_kind=data['preview'],
        )
