"""
Request-scoped entities of the plan generation flow.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class GenerationRequest:
    tasks: str


@dataclass(frozen=True)
class ParsedResult:
    plan: str
    email: str


@dataclass(frozen=True)
class SheetRow:
    timestamp: str
    tasks: str
    plan: str
    email: str

    @classmethod
    def from_result(
        cls, tasks: str, result: ParsedResult, now: Optional[datetime] = None
    ) -> "SheetRow":
        return cls(
            timestamp=utc_timestamp(now),
            tasks=tasks,
            plan=result.plan,
            email=result.email,
        )

    def to_values(self) -> List[str]:
        """Cell values in column order A..D."""
        return [self.timestamp, self.tasks, self.plan, self.email]
