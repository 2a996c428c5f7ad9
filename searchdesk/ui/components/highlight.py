import html
from typing import Optional

PRE_STYLE = "white-space: pre-wrap; font-family: Consolas, 'Courier New', monospace; font-size: 10pt;"
MARK_STYLE = "mark { background-color: #fff176; }"


def build_preview_html(content: str, highlighted: Optional[str] = None, text_color: str = "#000000") -> str:
    """Return HTML for the preview pane.

    ``highlighted`` is the engine's marked-up fragment and is inserted as is;
    without it the raw ``content`` is escaped.
    """
    body = highlighted if highlighted else html.escape(content or "")
    return (
        f"<html><head><style>{MARK_STYLE}</style></head>"
        f'<body><pre style="{PRE_STYLE} color:{text_color};">{body}</pre></body></html>'
    )
