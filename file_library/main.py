import argparse
import logging
import sys
from pathlib import Path

from . import config
from .core import FileLibraryApp
from .exceptions import FileLibraryError

def setup_logging():
    """Sets up console logging. No log file, the scan root only receives index.html."""
    logging.basicConfig(
        level=logging.INFO,
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description=f"File Library: writes {config.OUTPUT_FILENAME} listing the files "
                    f"of the current directory with an in-page browser and preview."
    )
    return p.parse_args(argv)

def main(argv=None):
    parse_args(argv)
    setup_logging()

    root = Path.cwd()
    app = FileLibraryApp()

    try:
        count = app.generate(root)
    except FileLibraryError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during generation.")
        sys.exit(1)

    logging.info(f"{config.OUTPUT_FILENAME} generated with {count} file(s).")

if __name__ == "__main__":
    main()
