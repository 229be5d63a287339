"""Tests for main.py — building listing and detail output."""

import json

import pytest

from portfolio.main import main


class TestMain:

    def test_build(self, content_dir, tmp_path):
        out = tmp_path / 'out'
        main(['--content', str(content_dir), '--out', str(out)])

        listing = json.loads((out / 'projects.json').read_text())
        assert [p['slug'] for p in listing] == [
            'portfolio-site', 'churn-dashboard', 'order-service',
        ]
        assert all('content' not in p for p in listing)

        categories = json.loads((out / 'categories.json').read_text())
        assert categories == [
            {'id': 'data-analytics', 'label': 'Data Analytics'},
            {'id': 'frontend', 'label': 'Frontend'},
            {'id': 'backend', 'label': 'Backend'},
        ]

        pages = sorted(p.name for p in (out / 'projects').iterdir())
        assert pages == [
            'churn-dashboard.html', 'order-service.html', 'portfolio-site.html',
        ]
        assert 'codehilite' in (out / 'projects' / 'order-service.html').read_text()
        assert '.codehilite' in (out / 'highlight.css').read_text()

    def test_stale_draft_page_removed(self, content_dir, tmp_path):
        out = tmp_path / 'out'
        (out / 'projects').mkdir(parents=True)
        stale = out / 'projects' / 'secret-draft.html'
        stale.write_text('old')
        main(['--content', str(content_dir), '--out', str(out)])
        assert not stale.exists()

    def test_deleted_project_page_removed(self, content_dir, tmp_path):
        out = tmp_path / 'out'
        main(['--content', str(content_dir), '--out', str(out)])
        assert (out / 'projects' / 'order-service.html').exists()

        (content_dir / 'order-service.md').unlink()
        main(['--content', str(content_dir), '--out', str(out)])
        assert not (out / 'projects' / 'order-service.html').exists()
        assert (out / 'projects' / 'portfolio-site.html').exists()

    def test_empty_content(self, empty_content_dir, tmp_path):
        out = tmp_path / 'out'
        main(['--content', str(empty_content_dir), '--out', str(out)])
        assert json.loads((out / 'projects.json').read_text()) == []
        assert len(json.loads((out / 'categories.json').read_text())) == 3

    def test_missing_content_dir(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--content', str(tmp_path / 'missing'), '--out', str(tmp_path / 'out')])
        assert exc.value.code == 1
        assert 'missing' in capsys.readouterr().err
