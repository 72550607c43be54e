from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID, uuid4

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


@dataclass(frozen=True)
class Task:
    """
    The single managed record.
    - id: server-generated UUID, never reused.
    - created_at: set once on creation.
    - updated_at: refreshed on every successful update (created_at <= updated_at).
    """
    id: UUID
    title: str
    description: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(cls, title: str, description: str, now: datetime) -> Task:
        return cls(
            id=uuid4(),
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def with_changes(
        self,
        title: str,
        description: str,
        completed: bool | None,
        now: datetime,
    ) -> Task:
        """
        Returns a new Task with title/description overwritten.
        `completed` is only applied when provided.
        """
        return replace(
            self,
            title=title,
            description=description,
            completed=self.completed if completed is None else completed,
            updated_at=max(now, self.updated_at),
        )
