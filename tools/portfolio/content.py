from __future__ import annotations

from html import escape
from typing import List, Optional, Sequence, Tuple

from .config import (
    PDF_MARKERS,
    PDF_PROJECT_SLUG,
    PDF_SRC,
    PDF_TITLE,
    PDF_VIEW_PARAMS,
)


def pdf_viewer_html(src: str = PDF_SRC, title: str = PDF_TITLE) -> str:
    url = f"{src}#{PDF_VIEW_PARAMS}"
    return (
        '<div class="pdf-viewer">'
        f'<iframe src="{escape(url)}" title="{escape(title)}"'
        ' class="pdf-viewer-frame"></iframe>'
        "</div>"
    )


def split_at_marker(
    html: str, markers: Sequence[str] = PDF_MARKERS
) -> Optional[Tuple[str, str]]:
    """
    Split ``html`` right after the first marker that occurs exactly once.

    The marker stays at the end of the first half. Returns None when no
    marker qualifies.
    """
    for marker in markers:
        parts = html.split(marker)
        if len(parts) == 2:
            return parts[0] + marker, parts[1]
    return None


def render_project_content(
    slug: str,
    content: str,
    widget: Optional[str] = None,
) -> List[str]:
    """
    Ordered HTML fragments for a project's detail view.

    Only the load testing project gets the PDF report, placed under its
    "Load Testing Report" heading, or after everything when the heading
    can't be found in the rendered HTML.
    """
    if slug != PDF_PROJECT_SLUG:
        return [content]

    if widget is None:
        widget = pdf_viewer_html()

    parts = split_at_marker(content)
    if parts is not None:
        print(f"✓ {slug}: report placed under heading")
        return [parts[0], widget, parts[1]]

    print(f"- {slug}: report heading not found, appending report")
    return [content, widget]
