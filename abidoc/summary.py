"""SUMMARY.md outline of the generated documents.

Only the most recently announced directory is remembered. A directory
line is emitted when a document's parent is not a prefix of it, so
intermediate directories are never announced on their own: after
`lib/math/fixed` the file `lib/pow` is listed without a `lib` line.
Output shape depends on this; keep it single-slot.
"""

from __future__ import annotations

from .models import SummaryEntry

INDENT = "    "


def _entry(path: str) -> SummaryEntry:
    return SummaryEntry(
        depth=path.count("/"),
        label=path.rpartition("/")[2],
        link=f"{path}.md",
    )


def build_summary(names: list[str]) -> list[SummaryEntry]:
    """Build outline entries from document names in sorted order."""
    entries: list[SummaryEntry] = []
    current_base = ""
    for name in names:
        parent = name.rpartition("/")[0]
        if parent and not current_base.startswith(parent):
            current_base = parent
            entries.append(_entry(parent))
        entries.append(_entry(name))
    return entries


def render_summary(entries: list[SummaryEntry]) -> str:
    return "".join(
        f"{INDENT * e.depth}- [{e.label}]({e.link})\n" for e in entries
    )
