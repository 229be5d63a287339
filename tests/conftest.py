"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Make the tools/ packages importable without installing
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "tools"))


def write_project(directory: Path, slug: str, frontmatter: str, body: str = "") -> Path:
    path = directory / f"{slug}.md"
    path.write_text(f"---\n{frontmatter.strip()}\n---\n\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with a mix of published and draft projects"""
    posts = tmp_path / "posts"
    posts.mkdir()

    write_project(posts, "churn-dashboard", """
title: Churn Dashboard
description: Customer churn analysis
date: 2024-03-10
category: data-analytics
technologies: [Python, pandas, Plotly]
github: https://github.com/example/churn
featured: true
published: true
""", "## Summary\n\nChurn fell by a third.\n")

    write_project(posts, "portfolio-site", """
title: Portfolio Site
description: This site
date: 2025-01-05
category: frontend
technologies: [TypeScript, React, Tailwind, Next.js, MDX]
demo: https://example.com
published: true
""", "Built with *care*.\n")

    write_project(posts, "order-service", """
title: Order Service
description: Order processing backend
date: 2023-08-21
category: backend
published: true
""", "```go\nfunc main() {}\n```\n")

    write_project(posts, "secret-draft", """
title: Secret Draft
description: Not ready
date: 2025-06-01
category: backend
technologies: [Rust]
published: false
""", "Hidden body.\n")

    (posts / "notes.txt").write_text("not a project", encoding="utf-8")
    return posts


@pytest.fixture
def empty_content_dir(tmp_path):
    posts = tmp_path / "empty"
    posts.mkdir()
    return posts
