"""Record validation service.

Checks a candidate record field by field and collects every failure
instead of stopping at the first one.
"""

import re
from collections.abc import Mapping, MutableMapping
from typing import Any

from pricebook.config import Settings, get_settings
from pricebook.config.models.records import RecordRulesConfig
from pricebook.observability.logging import get_logger
from pricebook.records import rules
from pricebook.records.models import ValidationResult

logger = get_logger(__name__)


class RecordValidator:
    """Validates records against the field rules.

    Checks run in a fixed order (id, name, price, tags) and each one
    contributes at most one error. A numeric price is rounded in place on
    the candidate whether or not the record passes overall, so callers that
    need the untouched input must pass a copy.
    """

    def __init__(self, config: RecordRulesConfig | None = None):
        self._config = config or RecordRulesConfig()
        self._tag_pattern = re.compile(self._config.tag_pattern)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RecordValidator":
        """Validator using the records section of the loaded settings."""
        return cls((settings or get_settings()).records)

    def validate(self, candidate: Any) -> ValidationResult:
        """Validate a candidate record.

        Args:
            candidate: Any value; only mappings can pass

        Returns:
            ValidationResult holding the candidate itself on success, or the
            list of error messages on failure
        """
        if not isinstance(candidate, Mapping):
            logger.warning(
                "record_validation_failed",
                reason="not_a_mapping",
                received_type=type(candidate).__name__,
            )
            return ValidationResult.failed([rules.NOT_A_RECORD])

        if not isinstance(candidate, MutableMapping):
            candidate = dict(candidate)

        errors: list[str] = []
        errors.extend(self._validate_id(candidate))
        errors.extend(self._validate_name(candidate))
        errors.extend(self._validate_price(candidate))
        errors.extend(self._validate_tags(candidate))

        record_id = candidate.get(rules.ID_FIELD)
        if errors:
            logger.warning(
                "record_validation_failed",
                record_id=record_id if isinstance(record_id, str) else None,
                error_count=len(errors),
                errors=errors,
            )
            return ValidationResult.failed(errors)

        logger.debug("record_validated", record_id=record_id)
        return ValidationResult.ok(candidate)

    def _validate_id(self, candidate: Mapping[str, Any]) -> list[str]:
        value = candidate.get(rules.ID_FIELD)
        if not isinstance(value, str) or rules.is_blank(value):
            return [rules.INVALID_ID]
        return []

    def _validate_name(self, candidate: Mapping[str, Any]) -> list[str]:
        value = candidate.get(rules.NAME_FIELD)
        if not isinstance(value, str) or rules.is_blank(value):
            return [rules.INVALID_NAME]
        return []

    def _validate_price(self, candidate: MutableMapping[str, Any]) -> list[str]:
        """Check price and normalize it to the configured precision."""
        value = candidate.get(rules.PRICE_FIELD)
        # NaN is the only float that differs from itself
        if not rules.is_number(value) or value != value:
            return [rules.INVALID_PRICE]

        candidate[rules.PRICE_FIELD] = rules.round_price(value, self._config.price_decimals)
        return []

    def _validate_tags(self, candidate: Mapping[str, Any]) -> list[str]:
        value = candidate.get(rules.TAGS_FIELD)
        if not rules.is_tag_sequence(value):
            return [rules.INVALID_TAGS]

        if not all(isinstance(tag, str) and self._tag_pattern.fullmatch(tag) for tag in value):
            return [rules.INVALID_TAG_VALUES]
        return []


def validate_record(candidate: Any) -> ValidationResult:
    """Validate a candidate record with the configured rules."""
    return RecordValidator.from_settings().validate(candidate)
