"""Records: validation and change-set updates for priced records.

Usage:
    from pricebook.records import update_record, validate_record

    result = update_record(record, {"price": 12.345})
    if result.is_valid:
        record = result.record
"""

from pricebook.records.models import (
    Record,
    RecordData,
    UpdateResult,
    ValidationResult,
    utc_now,
)
from pricebook.records.updater import RecordUpdater, update_record
from pricebook.records.validation import RecordValidator, validate_record

__all__ = [
    "Record",
    "RecordData",
    "RecordUpdater",
    "RecordValidator",
    "UpdateResult",
    "ValidationResult",
    "update_record",
    "utc_now",
    "validate_record",
]
