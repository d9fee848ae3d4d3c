"""Record rule configuration models.

Defines the tunable parts of record validation and update, loaded from TOML.
"""

import re

from pydantic import BaseModel, Field, field_validator


class RecordRulesConfig(BaseModel):
    """Field rules applied by the validator and updater."""

    price_decimals: int = Field(
        default=2, ge=0, le=10, description="Decimal places prices are rounded to"
    )
    tag_pattern: str = Field(
        default=r"^[A-Za-z0-9]+$",
        description="Pattern every tag must fully match",
    )
    protected_fields: list[str] = Field(
        default_factory=lambda: ["id", "createdAt"],
        description="Fields a change set may never overwrite",
    )

    @field_validator("tag_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid tag pattern: {e}") from e
        return value
