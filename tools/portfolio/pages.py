from __future__ import annotations

import pathlib
from datetime import date
from typing import List, Sequence

from .config import ALL_CATEGORIES, CONTENT_DIR, MAX_CARD_TECHNOLOGIES
from .content import render_project_content
from .projects import Project, ProjectNotFound, ProjectPreview, get_project_data


def resolve_project(slug: str, content_dir: pathlib.Path = CONTENT_DIR) -> Project:
    """
    Project for the public detail page.

    Missing and unpublished projects both raise ProjectNotFound, so a draft
    never leaks through a guessed URL.
    """
    project = get_project_data(slug, content_dir)
    if not project.published:
        raise ProjectNotFound(slug)
    return project


def render_detail_fragment(project: Project) -> str:
    return "".join(render_project_content(project.slug, project.content))


def filter_projects(
    projects: Sequence[ProjectPreview], category: str = ALL_CATEGORIES
) -> List[ProjectPreview]:
    if category == ALL_CATEGORIES:
        return list(projects)
    return [p for p in projects if p.category == category]


def format_display_date(value: str, long: bool = True) -> str:
    try:
        d = date.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    month = d.strftime("%B" if long else "%b")
    return f"{month} {d.day}, {d.year}"


def technology_badges(
    technologies: Sequence[str], limit: int = MAX_CARD_TECHNOLOGIES
) -> List[str]:
    badges = list(technologies[:limit])
    if len(technologies) > limit:
        badges.append(f"+{len(technologies) - limit} more")
    return badges
