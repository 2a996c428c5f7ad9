"""
Query descriptors: one validated value per search mode.

``BasicQuery`` and ``AdvancedQuery`` check their own invariants when built, so
the dispatcher never sees an unusable query.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..constants import ALL_FILE_TYPES, MSG_ENTER_CRITERION, MSG_ENTER_KEYWORD, MSG_INVALID_SIZE
from .errors import ValidationError


@dataclass(frozen=True)
class BasicQuery:
    text: str

    def __post_init__(self):
        if not (self.text or "").strip():
            raise ValidationError("basic query text is empty", MSG_ENTER_KEYWORD)


@dataclass(frozen=True)
class AdvancedQuery:
    text: str = ""
    file_type: Optional[str] = None
    min_size: Optional[int] = None
    max_size: Optional[int] = None

    def __post_init__(self):
        if (
            not (self.text or "").strip()
            and not self.file_type
            and self.min_size is None
            and self.max_size is None
        ):
            raise ValidationError("advanced query has no criterion", MSG_ENTER_CRITERION)

    def filters(self) -> dict:
        """Engine filter object; unset bounds stay ``None`` so nothing is clamped."""
        return {
            "file_type": self.file_type or None,
            "min_size": self.min_size,
            "max_size": self.max_size,
        }

    @classmethod
    def from_form(cls, values: dict) -> "AdvancedQuery":
        """Build from raw form values.

        Empty strings, ``None`` and the "all types" choice all mean unset.
        Size bounds are taken as byte counts.
        """
        text = values.get("query") or values.get("name") or ""
        return cls(
            text=str(text),
            file_type=_optional_text(values.get("file_type")),
            min_size=_optional_size(values.get("min_size")),
            max_size=_optional_size(values.get("max_size")),
        )


QueryDescriptor = Union[BasicQuery, AdvancedQuery]


def _optional_text(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    if not value or value == ALL_FILE_TYPES:
        return None
    return value


def _optional_size(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        size = int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"invalid size bound: {value!r}", MSG_INVALID_SIZE) from None
    if size < 0:
        raise ValidationError(f"negative size bound: {size}", MSG_INVALID_SIZE)
    return size


__all__ = ["BasicQuery", "AdvancedQuery", "QueryDescriptor"]
