"""
Record types exchanged with the engine and shown in the results table.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


def _as_int(value, default=0):
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class RawFileRecord:
    """One search hit exactly as the engine reports it."""

    path: str
    name: str
    size: int = 0
    modified_epoch_seconds: int = 0
    line_number: Optional[int] = None
    matched_content: Optional[str] = None
    matches: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_wire(cls, data: dict) -> "RawFileRecord":
        """Build a record from the engine's JSON object.

        The engine names the path ``file_path``, the timestamp ``modified_time``
        and the matched line ``content``. Absent fields fall back to empty
        values rather than failing the whole response.
        """
        matches = data.get("matches")
        return cls(
            path=str(data.get("file_path") or data.get("path") or ""),
            name=str(data.get("name") or ""),
            size=max(0, _as_int(data.get("size"))),
            modified_epoch_seconds=_as_int(data.get("modified_time")),
            line_number=_as_int(data.get("line_number"), None),
            matched_content=data.get("content"),
            matches=tuple(str(m) for m in matches) if matches is not None else None,
        )


@dataclass(frozen=True)
class MatchLine:
    line: int
    content: str


@dataclass(frozen=True)
class FileViewModel:
    """UI-ready representation of one result row."""

    path: str
    name: str
    kind: str
    size_bytes: int
    modified_epoch_seconds: int
    matches: Optional[Tuple[MatchLine, ...]] = None


__all__ = ["RawFileRecord", "MatchLine", "FileViewModel"]
