"""Record updater.

Merges a change set into a deep copy of a record, skipping writes that
would not change anything, then re-validates the copy.
"""

import copy
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from pricebook.config import Settings, get_settings
from pricebook.config.models.records import RecordRulesConfig
from pricebook.observability.logging import get_logger
from pricebook.records import rules
from pricebook.records.models import Record, RecordData, UpdateResult, utc_now
from pricebook.records.validation import RecordValidator

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class RecordUpdater:
    """Applies change sets to records without touching the original.

    The base record is deep-copied, stamped with the clock's current time,
    merged with the change set and validated. When validation fails the copy
    is dropped and only the errors are returned.
    """

    def __init__(
        self,
        validator: RecordValidator | None = None,
        clock: Clock | None = None,
        config: RecordRulesConfig | None = None,
    ):
        self._config = config or RecordRulesConfig()
        self._validator = validator or RecordValidator(self._config)
        self._clock = clock or utc_now
        self._protected = frozenset(self._config.protected_fields)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, clock: Clock | None = None
    ) -> "RecordUpdater":
        """Updater and validator sharing the records section of the loaded settings."""
        config = (settings or get_settings()).records
        return cls(validator=RecordValidator(config), clock=clock, config=config)

    def update(
        self,
        base: Mapping[str, Any] | Record,
        changes: Mapping[str, Any],
    ) -> UpdateResult:
        """Apply changes to a copy of base and validate the result.

        Args:
            base: The current record; never modified
            changes: Field name to new value

        Returns:
            UpdateResult with the new record and the fields written, or the
            validation errors

        Raises:
            TypeError: If changes is not a mapping
        """
        if not isinstance(changes, Mapping):
            raise TypeError(f"changes must be a mapping, got {type(changes).__name__}")

        updated = self._copy_record(base)
        updated[rules.UPDATED_AT_FIELD] = self._clock()

        changed_fields: list[str] = []
        for key, new_value in changes.items():
            if key in self._protected:
                logger.debug("protected_field_ignored", field=key)
                continue

            # An absent field is never equal to a new value, None included
            if key in updated and self._is_unchanged(key, new_value, updated[key]):
                continue

            updated[key] = copy.deepcopy(new_value)
            changed_fields.append(key)

        result = self._validator.validate(updated)
        if not result.is_valid:
            logger.info(
                "record_update_rejected",
                record_id=updated.get(rules.ID_FIELD),
                attempted_fields=list(changes),
                errors=result.errors,
            )
            return UpdateResult.failed(result.errors)

        logger.debug(
            "record_updated",
            record_id=updated.get(rules.ID_FIELD),
            changed_fields=changed_fields,
        )
        return UpdateResult(is_valid=True, record=result.record, changed_fields=changed_fields)

    def _copy_record(self, base: Mapping[str, Any] | Record) -> RecordData:
        if isinstance(base, Record):
            return base.to_mapping()
        return copy.deepcopy(dict(base))

    def _is_unchanged(self, key: str, new_value: Any, old_value: Any) -> bool:
        """Per-field equality deciding whether a write can be skipped."""
        if key == rules.PRICE_FIELD and rules.is_number(new_value) and rules.is_number(old_value):
            decimals = self._config.price_decimals
            new_rounded = rules.round_price(new_value, decimals)
            old_rounded = rules.round_price(old_value, decimals)
            # NaN never compares equal, so it is always written
            return new_rounded == old_rounded

        if (
            key == rules.TAGS_FIELD
            and rules.is_tag_sequence(new_value)
            and rules.is_tag_sequence(old_value)
        ):
            return rules.canonical_tags(new_value) == rules.canonical_tags(old_value)

        return rules.strictly_equal(new_value, old_value)


def update_record(
    base: Mapping[str, Any] | Record,
    changes: Mapping[str, Any],
    *,
    clock: Clock | None = None,
) -> UpdateResult:
    """Apply changes to a copy of base with the configured rules."""
    return RecordUpdater.from_settings(clock=clock).update(base, changes)
