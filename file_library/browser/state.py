"""
Pure view model of the in-page file browser.

The generated page runs the same filter and sort rules in JavaScript; this copy
drives the pre-rendered listing that the page script replaces on load.
"""
from dataclasses import dataclass
from typing import Iterable, List

from .. import config
from ..models import FileRecord
from ..ordering import sort_records

ALL_KINDS = ''

@dataclass(frozen=True)
class ViewState:
    query: str = ''
    kind: str = ALL_KINDS
    sort: str = config.DEFAULT_SORT


def matches_query(record: FileRecord, query: str) -> bool:
    term = query.strip().lower()
    if not term:
        return True
    return term in record.name.lower() or term in record.extension.lower()


def matches_kind(record: FileRecord, kind: str) -> bool:
    return kind == ALL_KINDS or record.preview_kind == kind


def filter_records(records: Iterable[FileRecord], state: ViewState) -> List[FileRecord]:
    return [
        r for r in records
        if matches_query(r, state.query) and matches_kind(r, state.kind)
    ]


def visible_records(records: Iterable[FileRecord], state: ViewState) -> List[FileRecord]:
    """Filtered and sorted projection of records for the given state."""
    return sort_records(filter_records(records, state), state.sort)
