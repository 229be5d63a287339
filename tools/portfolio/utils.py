from __future__ import annotations

import json
import pathlib
import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml


def slugify_heading(text: str, separator: str = "-") -> str:
    s = text.strip().lower()
    s = re.sub(r"\s+", separator, s)
    s = re.sub(r"[^a-z0-9\-]", "", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    return s or "section"


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def coerce_date_str(v) -> str:
    """YAML turns bare 2024-03-01 into a date; keep everything as ISO text."""
    if v is None:
        return ""
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    return str(v).strip().strip('"').strip("'")


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    s = text.lstrip()
    if not s.startswith("---\n") and not s.startswith("---\r\n"):
        return None, text

    lines = s.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            fm = yaml.safe_load(fm_text) or {}
            if not isinstance(fm, dict):
                fm = {}
            return fm, body
    return None, text


def write_json(path: pathlib.Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
