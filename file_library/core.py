import logging
from pathlib import Path
from typing import Optional

from .ordering import sort_records
from .rendering.page import PageRenderer, write_document
from .scanning.filesystem import DirectoryScanner
from . import config

class FileLibraryApp:
    def __init__(self, scanner: Optional[DirectoryScanner] = None, renderer: Optional[PageRenderer] = None):
        self.scanner = scanner or DirectoryScanner()
        self.renderer = renderer or PageRenderer()

    def generate(self, root: Path) -> int:
        """
        Executes one generation run.
        1. Scan (non-recursive)
        2. Order (newest first)
        3. Render the page
        4. Write index.html into root

        Returns the number of files included. Any FileLibraryError aborts the
        run before the output file is touched.
        """
        logging.info(f"Scanning {root}...")
        records = self.scanner.scan(root)

        ordered = sort_records(records, config.DEFAULT_SORT)

        logging.info(f"Rendering {len(ordered)} records...")
        html = self.renderer.render(ordered)

        out_path = write_document(html, root)
        logging.debug(f"Output written to {out_path}")
        return len(ordered)
