"""pricebook: validation and non-mutating updates for priced records."""

from pricebook.records import (
    Record,
    RecordUpdater,
    RecordValidator,
    UpdateResult,
    ValidationResult,
    update_record,
    validate_record,
)

__version__ = "0.1.0"

__all__ = [
    "Record",
    "RecordUpdater",
    "RecordValidator",
    "UpdateResult",
    "ValidationResult",
    "update_record",
    "validate_record",
]
