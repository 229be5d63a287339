#!/usr/bin/env python3
from __future__ import annotations

import pathlib
import re

# ---------- Paths

# This assumes config.py sits in tools/portfolio/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
CONTENT_DIR = ROOT / "content" / "posts"
BUILD_OUT = ROOT / "public" / "data"

# ---------- Projects

PROJECT_SUFFIX = ".md"

CATEGORIES = ("data-analytics", "frontend", "backend")
CATEGORY_DISPLAY_NAMES = {
    "data-analytics": "Data Analytics",
    "frontend": "Frontend",
    "backend": "Backend",
}
ALL_CATEGORIES = "all"

MAX_CARD_TECHNOLOGIES = 4

# ---------- Markdown

MARKDOWN_EXTENSIONS = (
    "tables",
    "fenced_code",
    "codehilite",
    "toc",
    "sane_lists",
)
CODEHILITE_CLASS = "codehilite"
HIGHLIGHT_STYLE = "default"

# ---------- Load testing report embed

PDF_PROJECT_SLUG = "sales-analytics-dashboard"
PDF_SRC = "/optimized300rps.pdf"
PDF_TITLE = "Performance Load Testing Report - 300 RPS Achievement"
PDF_VIEW_PARAMS = "view=FitH&toolbar=0&navpanes=0&scrollbar=0&statusbar=0&messages=0"

# Tried in order; the first one that occurs exactly once wins.
PDF_MARKERS = (
    '<h2 id="load-testing-report">Load Testing Report</h2>',
    "<h2>Load Testing Report</h2>",
    '<h2 id="load-testing-report"><a href="#load-testing-report">'
    "Load Testing Report</a></h2>",
    '<h2><a href="#load-testing-report">Load Testing Report</a></h2>',
)

# Some shared regexes

STRIKE_RE = r"(~{2})(?!~)(.+?)(?<!~)\1"
TASK_ITEM_RE = re.compile(r"^\[(?P<mark>[ xX])\]\s+")
# \x02...\x03 are Python-Markdown stash placeholders; a URL never spans one.
BARE_URL_RE = (
    r"(?<![<(\"'=/\w])"
    r"((?:https?://|www\.)[^\s<>()\"'\x02\x03]*[^\s<>()\"'\x02\x03.,;:!?])"
)
