"""Tests for markdown rendering of the register."""

from __future__ import annotations

from soup_register.models import Outcome, SoupEntry, SoupSection
from soup_register.report import TABLE_HEADER, render_register, render_section, render_table

HEADER = (
    "| Package Name | Programming Languages | Website | Version | Risk Level "
    "| Verification of Reasoning |\n|---|---|---|---|---|---|\n"
)


def _entry(name: str, version: str = "1.0.0", site: str = "https://x.dev") -> SoupEntry:
    return SoupEntry(
        name=name,
        version=version,
        languages=Outcome.resolved("JavaScript"),
        site=Outcome.resolved(site),
    )


class TestRenderTable:
    def test_header_literal(self):
        assert TABLE_HEADER == HEADER

    def test_empty_table_is_header_only(self):
        assert render_table([]) == HEADER

    def test_row_format(self):
        table = render_table([_entry("left-pad")])
        assert table == (
            HEADER + "| left-pad | JavaScript | https://x.dev | 1.0.0 | Low "
            "| SOUP analysed and accepted by developer |"
        )

    def test_rows_sorted_by_rendered_text(self):
        table = render_table([_entry("b"), _entry("a")])
        rows = table[len(HEADER):].split("\n")
        assert [r.split(" | ")[0] for r in rows] == ["| a", "| b"]

    def test_sort_is_case_sensitive(self):
        table = render_table([_entry("apple"), _entry("Zebra")])
        rows = table[len(HEADER):].split("\n")
        assert rows[0].startswith("| Zebra |")
        assert rows[1].startswith("| apple |")

    def test_ties_break_on_later_columns(self):
        table = render_table([_entry("a", site="https://z"), _entry("a", site="https://b")])
        rows = table[len(HEADER):].split("\n")
        assert "https://b" in rows[0]
        assert "https://z" in rows[1]


class TestRenderRegister:
    def test_section_layout(self):
        section = render_section("demo", [_entry("left-pad")])
        assert section.startswith("## demo\n\n" + HEADER)
        assert section.endswith("|\n\n")

    def test_sections_in_processing_order(self):
        sections = [
            SoupSection.from_entries("zeta", [_entry("a")]),
            SoupSection.from_entries("alpha", []),
        ]
        output = render_register(sections)
        assert output.index("## zeta") < output.index("## alpha")
        assert output.endswith("## alpha\n\n" + HEADER + "\n\n")

    def test_no_sections(self):
        assert render_register([]) == ""
