"""Manifest model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True)
class Manifest:
    """A parsed package.json: project name plus its direct dependencies."""

    name: str
    dependencies: Mapping[str, str]
    path: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError("Manifest name must be a string")
        # Freeze a private copy so callers cannot mutate it afterwards.
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "dependencies": dict(self.dependencies),
        }
