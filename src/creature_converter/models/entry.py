"""Pydantic V2 schema for persisted library entries.

The storage layer owns where entries live; this module owns their shape.
An entry keeps the raw source text next to the parsed and converted
payloads so any of them can be re-derived or re-edited later.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from creature_converter.core.exceptions import PayloadError
from creature_converter.models.creature import OutputCreatureData, ParsedCreatureData
from creature_converter.models.enums import EntryType


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Entry(BaseModel):
    """A saved creature or note in a user's library.

    Attributes:
        id: Unique entry identifier.
        entry_type: Creature or adventure note.
        title: Entry title.
        tags: Free-form tags.
        project_id: Owning project, if any.
        source_text: Raw pasted stat block.
        parsed: Parsed creature payload.
        output: Converted stat card payload.
        created_at: Creation time.
        updated_at: Last modification time.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, description="Unique entry ID")
    entry_type: EntryType = Field(default=EntryType.CREATURE, description="Entry type")
    title: str = Field(min_length=1, max_length=200, description="Entry title")
    tags: list[str] = Field(default_factory=list, description="Tags")
    project_id: UUID | None = Field(default=None, description="Owning project")
    source_text: str | None = Field(default=None, description="Raw source text")
    parsed: ParsedCreatureData | None = Field(default=None, description="Parsed payload")
    output: OutputCreatureData | None = Field(default=None, description="Converted payload")
    created_at: datetime = Field(default_factory=_utcnow, description="Creation time")
    updated_at: datetime = Field(default_factory=_utcnow, description="Last update time")

    def touch(self) -> None:
        """Stamp the entry as modified now."""
        self.updated_at = _utcnow()

    def to_json(self) -> str:
        """Serialize the entry to a JSON document.

        Returns:
            JSON text suitable for the storage collaborator.
        """
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str | bytes) -> Entry:
        """Load an entry from a JSON document.

        Args:
            payload: JSON text produced by :meth:`to_json`.

        Returns:
            The loaded entry.

        Raises:
            PayloadError: If the payload does not match the entry schema.
        """
        try:
            return cls.model_validate_json(payload)
        except PydanticValidationError as exc:
            raise PayloadError(
                "Entry payload does not match the current schema",
                payload_type=cls.__name__,
                details={"errors": exc.error_count()},
            ) from exc


__all__ = ["Entry"]
