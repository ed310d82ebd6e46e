"""Base domain entity — identity, soft-delete flag and timestamps."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(kw_only=True)
class Entity:
    """Root of every persisted domain entity.

    Entities are never physically removed: ``mark_deleted`` flips
    ``is_deleted`` and the record disappears from every normal read path.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    is_deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def mark_deleted(self) -> None:
        """Soft-delete the entity."""
        self.is_deleted = True
        self.touch()
