"""Markdown rendering of the SOUP register."""

from __future__ import annotations

from collections.abc import Iterable

from .models import SoupEntry, SoupSection

TABLE_HEADER = (
    "| Package Name | Programming Languages | Website | Version | Risk Level "
    "| Verification of Reasoning |\n"
    "|---|---|---|---|---|---|\n"
)


def render_table(entries: Iterable[SoupEntry]) -> str:
    """Return the header followed by one row per entry.

    Rows are ordered by plain string comparison of the rendered row, not by
    package name, so ordering is case-sensitive and ties break on later columns.
    """
    rows = sorted(entry.row() for entry in entries)
    return TABLE_HEADER + "\n".join(rows)


def render_section(manifest_name: str, entries: Iterable[SoupEntry]) -> str:
    return f"## {manifest_name}\n\n{render_table(entries)}\n\n"


def render_register(sections: Iterable[SoupSection]) -> str:
    """Concatenate one section per manifest, in processing order."""
    return "".join(render_section(s.manifest_name, s.entries) for s in sections)
