"""Tagged lookup result used for the languages and website columns."""

from __future__ import annotations

from dataclasses import dataclass

RESOLVED = "resolved"
UNRESOLVED = "unresolved"
_VALID_STATUSES = {RESOLVED, UNRESOLVED}

UNKNOWN = "unknown"
PRIVATE_REPO = "private repo"


@dataclass(frozen=True)
class Outcome:
    """Result of a single lookup.

    ``value`` is always the string rendered in the register. For unresolved
    outcomes it holds a sentinel (``"unknown"`` or ``"private repo"``) and
    ``reason`` says why the lookup gave up, so a failed lookup can be told apart
    from one that legitimately produced an empty or unknown-looking value.
    """

    status: str
    value: str
    reason: str = ""

    def __post_init__(self) -> None:
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.status == UNRESOLVED and not self.reason:
            raise ValueError("Unresolved outcomes must carry a reason")

    @property
    def is_resolved(self) -> bool:
        return self.status == RESOLVED

    def to_dict(self) -> dict[str, str]:
        data = {"status": self.status, "value": self.value}
        if self.reason:
            data["reason"] = self.reason
        return data

    @classmethod
    def resolved(cls, value: str) -> Outcome:
        return cls(status=RESOLVED, value=value)

    @classmethod
    def unresolved(cls, reason: str, sentinel: str = UNKNOWN) -> Outcome:
        return cls(status=UNRESOLVED, value=sentinel, reason=reason)
