"""
Turns advanced-search widget text into the values AdvancedQuery.from_form expects.
"""
from typing import Optional, Union

from ...utils import MB


def mb_text_to_bytes(text: str) -> Optional[Union[int, str]]:
    """"1.5" -> 1572864; blank -> None.

    Text that is not a number is passed through unchanged so query
    validation reports it.
    """
    text = (text or "").strip().replace(",", ".")
    if not text:
        return None
    try:
        return int(float(text) * MB)
    except (ValueError, OverflowError):
        return text


def advanced_form_values(file_type: str, min_mb: str, max_mb: str, query: str) -> dict:
    return {
        "file_type": file_type,
        "min_size": mb_text_to_bytes(min_mb),
        "max_size": mb_text_to_bytes(max_mb),
        "query": query or "",
    }
