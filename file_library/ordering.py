from typing import Callable, Dict, Iterable, List, Tuple

from . import config
from .models import FileRecord

# sort key -> (field extractor, descending)
_ORDERINGS: Dict[str, Tuple[Callable[[FileRecord], object], bool]] = {
    'mtime-desc': (lambda r: r.modified_ms, True),
    'mtime-asc': (lambda r: r.modified_ms, False),
    'name-asc': (lambda r: (r.name.casefold(), r.name), False),
    'name-desc': (lambda r: (r.name.casefold(), r.name), True),
    'size-desc': (lambda r: r.size_bytes, True),
    'size-asc': (lambda r: r.size_bytes, False),
}


def sort_records(records: Iterable[FileRecord], key: str = config.DEFAULT_SORT) -> List[FileRecord]:
    """Returns a new list ordered by one of config.SORT_KEYS."""
    try:
        extract, descending = _ORDERINGS[key]
    except KeyError:
        raise ValueError(f"Unknown sort key: {key!r}") from None
    return sorted(records, key=extract, reverse=descending)
