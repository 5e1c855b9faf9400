"""SOUP entry model: one register row."""

from __future__ import annotations

from dataclasses import dataclass

from .outcome import Outcome

DEFAULT_RISK_LEVEL = "Low"
DEFAULT_VERIFICATION = "SOUP analysed and accepted by developer"


@dataclass(frozen=True)
class SoupEntry:
    """Register information for one dependency of one manifest.

    ``version`` is the range exactly as declared in the manifest, never the
    version that was looked up.
    """

    name: str
    version: str
    languages: Outcome
    site: Outcome
    risk_level: str = DEFAULT_RISK_LEVEL
    verification: str = DEFAULT_VERIFICATION

    def row(self) -> str:
        """Render the entry as a markdown table row."""
        return (
            f"| {self.name} | {self.languages.value} | {self.site.value} "
            f"| {self.version} | {self.risk_level} | {self.verification} |"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "version": self.version,
            "languages": self.languages.to_dict(),
            "site": self.site.to_dict(),
            "riskLevel": self.risk_level,
            "verification": self.verification,
        }
