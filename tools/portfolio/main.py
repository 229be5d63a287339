#!/usr/bin/env python3
"""
Build the project showcase data for the portfolio site.

- Listing -> <out>/projects.json
  previews of published projects, newest first (no rendered body)
- Filters -> <out>/categories.json
  [{id, label}] for every category, whether or not a project uses it
- Detail pages -> <out>/projects/<slug>.html
  rendered body of each published project, load testing report spliced in
- Code colours -> <out>/highlight.css

Unpublished and deleted projects get no detail page; a stale one from an
earlier build is removed.
"""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import List, Optional

from .config import BUILD_OUT, CONTENT_DIR
from .markdown_processing import highlight_css
from .pages import render_detail_fragment, resolve_project
from .projects import (
    ProjectNotFound,
    get_all_categories,
    get_all_project_ids,
    get_category_display_name,
    get_sorted_projects_data,
)
from .utils import write_json


def export_listing(content_dir: pathlib.Path, out_dir: pathlib.Path) -> int:
    previews = get_sorted_projects_data(content_dir)
    write_json(out_dir / "projects.json", [p.to_dict() for p in previews])
    write_json(
        out_dir / "categories.json",
        [
            {"id": c, "label": get_category_display_name(c)}
            for c in get_all_categories()
        ],
    )
    print(f"✓ listing with {len(previews)} projects")
    return len(previews)


def export_details(content_dir: pathlib.Path, out_dir: pathlib.Path) -> List[str]:
    pages_dir = out_dir / "projects"
    pages_dir.mkdir(parents=True, exist_ok=True)

    written: List[str] = []
    for slug in get_all_project_ids(content_dir):
        out_path = pages_dir / f"{slug}.html"
        try:
            project = resolve_project(slug, content_dir)
        except ProjectNotFound:
            print(f"- {slug} not published, skip")
            continue
        out_path.write_text(render_detail_fragment(project), encoding="utf-8")
        written.append(slug)
        print(f"✓ project page {slug}")

    # drafts and deleted projects keep no page from an earlier build
    for old in pages_dir.glob("*.html"):
        if old.stem not in written:
            print(f"- removing stale project page {old.name}")
            old.unlink()
    return written


def build(content_dir: pathlib.Path, out_dir: pathlib.Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    export_listing(content_dir, out_dir)
    export_details(content_dir, out_dir)
    (out_dir / "highlight.css").write_text(highlight_css(), encoding="utf-8")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Render portfolio project markdown into site data."
    )
    parser.add_argument(
        "--content", type=pathlib.Path, default=CONTENT_DIR,
        help="directory of <slug>.md project files",
    )
    parser.add_argument(
        "--out", type=pathlib.Path, default=BUILD_OUT,
        help="where to write the listing and detail fragments",
    )
    args = parser.parse_args(argv)

    if not args.content.is_dir():
        print(
            f"ERROR: content directory {args.content} missing",
            file=sys.stderr,
        )
        sys.exit(1)

    build(args.content, args.out)


if __name__ == "__main__":
    main()
