"""
Maps engine records onto the view model consumed by the results table.
"""

from typing import Iterable, List

from ..constants import UNKNOWN_KIND
from .models import FileViewModel, MatchLine, RawFileRecord


def classify_kind(raw: RawFileRecord) -> str:
    # the engine does not classify files yet
    return UNKNOWN_KIND


def _match_lines(raw: RawFileRecord):
    if raw.matches is None:
        return None
    line = raw.line_number or 0
    return tuple(MatchLine(line=line, content=text) for text in raw.matches)


def normalize(raw: RawFileRecord) -> FileViewModel:
    """Total, side-effect free mapping of one raw record."""
    return FileViewModel(
        path=raw.path,
        name=raw.name,
        kind=classify_kind(raw),
        size_bytes=raw.size,
        modified_epoch_seconds=raw.modified_epoch_seconds,
        matches=_match_lines(raw),
    )


def normalize_all(records: Iterable[RawFileRecord]) -> List[FileViewModel]:
    return [normalize(r) for r in records]


__all__ = ["classify_kind", "normalize", "normalize_all"]
