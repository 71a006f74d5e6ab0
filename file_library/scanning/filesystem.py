import os
import logging
import stat
from pathlib import Path
from typing import AbstractSet, List, Mapping, Optional

from tqdm import tqdm

from .. import config
from ..classify import extension_of, extension_to_preview_kind
from ..exceptions import ScanError
from ..models import FileRecord

class DirectoryScanner:
    def __init__(self,
                 ignored_names: AbstractSet[str] = config.IGNORED_NAMES,
                 preview_table: Mapping[str, str] = config.EXT_TO_PREVIEW,
                 show_progress: bool = True):
        self.ignored_names = ignored_names
        self.preview_table = preview_table
        self.show_progress = show_progress

    def scan(self, root: Path) -> List[FileRecord]:
        """
        Returns a FileRecord for every eligible file directly inside root.

        Raises:
            ScanError: root cannot be listed. Nothing is scanned in that case.
        """
        candidates = self._list_candidates(root)
        logging.info(f"Found {len(candidates)} candidate files in {root}")

        records = []
        for path in tqdm(candidates, desc="Scanning", unit="file", disable=not self.show_progress):
            record = self._process_single_file(path)
            if record:
                records.append(record)

        dropped = len(candidates) - len(records)
        if dropped:
            logging.debug(f"Dropped {dropped} files that changed or could not be read during the scan")
        return records

    def _list_candidates(self, root: Path) -> List[Path]:
        """Immediate regular files of root that pass the name filters."""
        try:
            with os.scandir(root) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(f"Cannot list directory {root}: {e}") from e

        files = []
        for e in entries:
            # Symlinks are skipped whatever they point to
            try:
                if not e.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue
            if self._is_excluded(e.name):
                continue
            files.append(Path(e.path))
        return files

    def _is_excluded(self, name: str) -> bool:
        return name in self.ignored_names or name.startswith(config.HIDDEN_PREFIX)

    def _process_single_file(self, path: Path) -> Optional[FileRecord]:
        """
        Stats a single file. Returns None if it disappeared, became unreadable,
        stopped being a regular file, or has a name that is not valid UTF-8.
        """
        try:
            path.name.encode('utf-8')
        except UnicodeEncodeError:
            logging.debug(f"Skipping {path.name!r}: name is not valid UTF-8")
            return None

        try:
            stat_result = os.lstat(path)
        except OSError as e:
            logging.debug(f"Skipping {path.name}: {e}")
            return None

        # Replaced by a directory or symlink since it was listed
        if not stat.S_ISREG(stat_result.st_mode):
            logging.debug(f"Skipping {path.name}: no longer a regular file")
            return None

        ext = extension_of(path.name)
        return FileRecord(
            name=path.name,
            extension=ext,
            size_bytes=stat_result.st_size,
            modified_ms=stat_result.st_mtime_ns // 1_000_000,
            preview_kind=extension_to_preview_kind(ext, self.preview_table),
        )
