"""In-memory register assembled during a single run."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .soup_entry import SoupEntry


@dataclass(frozen=True)
class SoupSection:
    """All entries for one manifest, in dependency declaration order."""

    manifest_name: str
    entries: tuple[SoupEntry, ...]

    @classmethod
    def from_entries(cls, manifest_name: str, entries: Iterable[SoupEntry]) -> SoupSection:
        return cls(manifest_name=manifest_name, entries=tuple(entries))


@dataclass(frozen=True)
class SoupReport:
    """Ordered sections, one per kept manifest, in processing order."""

    sections: tuple[SoupSection, ...] = ()

    def with_section(self, section: SoupSection) -> SoupReport:
        return SoupReport(sections=self.sections + (section,))

    @property
    def totals(self) -> dict[str, int]:
        entries = [entry for section in self.sections for entry in section.entries]
        return {
            "manifests": len(self.sections),
            "entries": len(entries),
            "unresolved": sum(
                1
                for entry in entries
                if not (entry.site.is_resolved and entry.languages.is_resolved)
            ),
        }
