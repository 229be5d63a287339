"""
GitHub-flavoured additions for Python-Markdown.

Python-Markdown already covers tables and fenced code; this adds the rest of
what project write-ups rely on:

- ``~~text~~`` -> ``<del>text</del>``
- ``- [ ] todo`` / ``- [x] done`` -> disabled checkbox list items
- bare ``https://...`` and ``www.`` URLs -> links
"""

from __future__ import annotations

import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString

from .config import BARE_URL_RE, STRIKE_RE, TASK_ITEM_RE


class BareUrlInlineProcessor(InlineProcessor):
    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(self, m, data):
        url = m.group(1)
        href = url if "://" in url else f"http://{url}"
        el = etree.Element("a")
        el.set("href", href)
        el.text = AtomicString(url)
        return el, m.start(0), m.end(0)


class TaskListTreeprocessor(Treeprocessor):
    def run(self, root):
        for lst in root.iter():
            if lst.tag not in ("ul", "ol"):
                continue
            found = False
            for li in lst:
                if li.tag == "li" and self._mark_item(li):
                    found = True
            if found:
                lst.set("class", "contains-task-list")

    @staticmethod
    def _mark_item(li) -> bool:
        # loose lists wrap the item text in a <p>
        target = li
        if not (li.text or "").strip() and len(li) and li[0].tag == "p":
            target = li[0]

        m = TASK_ITEM_RE.match(target.text or "")
        if not m:
            return False

        box = etree.Element("input")
        box.set("type", "checkbox")
        box.set("disabled", "disabled")
        if m.group("mark") in "xX":
            box.set("checked", "checked")
        box.tail = " " + target.text[m.end():]
        target.text = None
        target.insert(0, box)
        li.set("class", "task-list-item")
        return True


class GfmExtension(Extension):
    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKE_RE, "del"), "gfm_strike", 65
        )
        md.inlinePatterns.register(
            BareUrlInlineProcessor(BARE_URL_RE, md), "gfm_bare_url", 75
        )
        # before 'inline' (20) so the raw "[x]" is still plain text
        md.treeprocessors.register(
            TaskListTreeprocessor(md), "gfm_tasklist", 25
        )


def makeExtension(**kwargs):
    return GfmExtension(**kwargs)
