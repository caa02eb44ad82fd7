"""Tagged result of a single upstream fetch.

A provider either hands back its parsed report or says why it could not.
Callers branch on ``found``; the reason is for logs only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one provider request: a report, or absent with a reason."""

    source: str
    report: T | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.report is not None

    @classmethod
    def fetched(cls, source: str, report: T) -> FetchResult[T]:
        return cls(source=source, report=report)

    @classmethod
    def absent(cls, source: str, reason: str) -> FetchResult[T]:
        return cls(source=source, reason=reason)
