"""
Project records read from the markdown content directory.

One file per project: ``<slug>.md`` with a YAML frontmatter block followed by
the markdown write-up. Nothing is cached; every call goes back to disk.
"""

from __future__ import annotations

import pathlib
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .config import CATEGORIES, CATEGORY_DISPLAY_NAMES, CONTENT_DIR, PROJECT_SUFFIX
from .markdown_processing import render_markdown
from .utils import _norm_text, coerce_date_str, parse_frontmatter


class ProjectNotFound(LookupError):
    """No project file exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"no project named {self.slug!r}"


@dataclass
class ProjectPreview:
    """Frontmatter only, for listings."""
    slug: str
    title: str = ""
    description: str = ""
    date: str = ""  # YYYY-MM-DD, compared as text
    category: str = ""  # one of CATEGORIES when well-formed
    technologies: List[str] = field(default_factory=list)
    github: str = ""
    demo: str = ""
    featured: bool = False
    published: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Project(ProjectPreview):
    """Frontmatter plus the rendered HTML body."""
    content: str = ""


def _as_str(v) -> str:
    return "" if v is None else str(v)


def _as_list(v) -> List[str]:
    if not v:
        return []
    if isinstance(v, (list, tuple)):
        return [str(t) for t in v]
    return [str(v)]


def _meta_fields(fm: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    fm = fm or {}
    return {
        "title": _as_str(fm.get("title")),
        "description": _as_str(fm.get("description")),
        "date": coerce_date_str(fm.get("date")),
        "category": _as_str(fm.get("category")),
        "technologies": _as_list(fm.get("technologies")),
        "github": _as_str(fm.get("github")),
        "demo": _as_str(fm.get("demo")),
        "featured": bool(fm.get("featured") or False),
        "published": bool(fm.get("published") or False),
    }


def _read(path: pathlib.Path):
    return parse_frontmatter(_norm_text(path.read_text(encoding="utf-8")))


def _project_files(content_dir: pathlib.Path) -> List[pathlib.Path]:
    # iterdir() raises for a missing or unreadable directory; let it.
    return [
        p for p in content_dir.iterdir()
        if p.name.endswith(PROJECT_SUFFIX)
        and not p.name.startswith(".")
        and p.is_file()
    ]


def get_sorted_projects_data(
    content_dir: pathlib.Path = CONTENT_DIR,
) -> List[ProjectPreview]:
    previews: List[ProjectPreview] = []
    for path in _project_files(content_dir):
        fm, _ = _read(path)
        preview = ProjectPreview(slug=path.stem, **_meta_fields(fm))
        if preview.published:
            previews.append(preview)

    # stable: equal dates keep directory order
    previews.sort(key=lambda p: p.date, reverse=True)
    return previews


def get_all_project_ids(content_dir: pathlib.Path = CONTENT_DIR) -> List[str]:
    return [path.stem for path in _project_files(content_dir)]


def get_project_data(
    slug: str, content_dir: pathlib.Path = CONTENT_DIR
) -> Project:
    """
    Full record for ``slug``, body rendered to HTML.

    Unpublished projects are returned too; deciding whether they may be
    shown is up to the caller (see ``pages.resolve_project``).
    """
    if not slug or "/" in slug or "\\" in slug or slug.startswith("."):
        raise ProjectNotFound(slug)

    path = content_dir / f"{slug}{PROJECT_SUFFIX}"
    try:
        fm, body = _read(path)
    except FileNotFoundError:
        raise ProjectNotFound(slug) from None

    return Project(
        slug=slug,
        content=render_markdown(body),
        **_meta_fields(fm),
    )


def get_projects_by_category(
    category: str, content_dir: pathlib.Path = CONTENT_DIR
) -> List[ProjectPreview]:
    return [
        p for p in get_sorted_projects_data(content_dir)
        if p.category == category
    ]


def get_featured_projects(
    content_dir: pathlib.Path = CONTENT_DIR,
) -> List[ProjectPreview]:
    return [p for p in get_sorted_projects_data(content_dir) if p.featured]


def get_all_categories() -> List[str]:
    return list(CATEGORIES)


def get_category_display_name(category: str) -> str:
    return CATEGORY_DISPLAY_NAMES.get(category, category)
