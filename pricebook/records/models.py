"""Record domain models.

Records travel through the validator and updater as plain mappings keyed
by wire names (``createdAt``, ``updatedAt``). ``Record`` is the typed view
of an accepted record, with caller-defined fields kept apart in ``extra``.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

RecordData = dict[str, Any]


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Record(BaseModel):
    """Typed record with an explicit side mapping for extra fields."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(..., min_length=1, description="Record identifier")
    name: str = Field(..., min_length=1, description="Display name")
    price: float = Field(..., description="Price, rounded to cents once validated")
    tags: list[str] = Field(default_factory=list, description="Alphanumeric tags")
    created_at: datetime = Field(..., alias="createdAt", description="Creation time")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update")
    extra: dict[str, Any] = Field(
        default_factory=dict, description="Caller-defined fields outside the schema"
    )

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Wire names of the fixed fields."""
        return frozenset(
            info.alias or name for name, info in cls.model_fields.items() if name != "extra"
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Record":
        """Build a Record, moving every unknown key into ``extra``."""
        known = cls.known_keys()
        fixed = {key: value for key, value in data.items() if key in known}
        extra = {key: copy.deepcopy(value) for key, value in data.items() if key not in known}
        return cls.model_validate({**fixed, "extra": extra})

    def to_mapping(self) -> RecordData:
        """Flatten back into an independent dict keyed by wire names."""
        data = self.model_dump(by_alias=True, exclude={"extra"})
        data.update(copy.deepcopy(self.extra))
        return data


@dataclass
class ValidationResult:
    """Outcome of validating a record.

    A valid result carries the record that was checked; an invalid one carries
    every error message collected and no record.
    """

    is_valid: bool
    record: RecordData | None = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, record: RecordData) -> "ValidationResult":
        return cls(is_valid=True, record=record)

    @classmethod
    def failed(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=False, errors=list(errors))

    def as_record(self) -> Record:
        """Typed view of the accepted record.

        Raises:
            ValueError: If the result is not valid
        """
        if not self.is_valid or self.record is None:
            raise ValueError(f"Cannot build a Record from an invalid result: {self.errors}")
        return Record.from_mapping(self.record)


@dataclass
class UpdateResult(ValidationResult):
    """Outcome of applying a change set, with the fields actually written."""

    changed_fields: list[str] = field(default_factory=list)
