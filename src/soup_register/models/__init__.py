"""Data models for the SOUP register."""

from __future__ import annotations

from .manifest import Manifest
from .outcome import Outcome
from .soup_entry import DEFAULT_RISK_LEVEL, DEFAULT_VERIFICATION, SoupEntry
from .soup_report import SoupReport, SoupSection

__all__ = [
    "DEFAULT_RISK_LEVEL",
    "DEFAULT_VERIFICATION",
    "Manifest",
    "Outcome",
    "SoupEntry",
    "SoupReport",
    "SoupSection",
]
