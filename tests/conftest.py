import json
import os
import re

import pytest
from file_library.classify import extension_of, extension_to_preview_kind
from file_library.models import FileRecord
from file_library.scanning.filesystem import DirectoryScanner

@pytest.fixture
def make_record():
    """Factory for FileRecords with sensible defaults."""
    def _make(name, size_bytes=10, modified_ms=1_700_000_000_000, extension=None, preview_kind=None):
        ext = extension_of(name) if extension is None else extension
        kind = extension_to_preview_kind(ext) if preview_kind is None else preview_kind
        return FileRecord(
            name=name, extension=ext, size_bytes=size_bytes,
            modified_ms=modified_ms, preview_kind=kind
        )
    return _make

@pytest.fixture
def scanner():
    """Scanner without the tqdm bar."""
    return DirectoryScanner(show_progress=False)

@pytest.fixture
def write_file():
    """Creates a file with the given size and modification time (epoch milliseconds)."""
    def _write(path, size=0, mtime_ms=None):
        path.write_bytes(b"x" * size)
        if mtime_ms is not None:
            os.utime(path, ns=(mtime_ms * 1_000_000, mtime_ms * 1_000_000))
        return path
    return _write

@pytest.fixture
def embedded_payload():
    """Extracts the records JSON block from a rendered page."""
    def _extract(html):
        m = re.search(r'<script id="file-data" type="application/json">(.*?)</script>', html, re.S)
        assert m, "file-data block missing"
        return json.loads(m.group(1))
    return _extract
