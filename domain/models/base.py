"""
Shared base model for persisted and wire-level records.

Records are stored and served with camelCase keys ("restTakenSeconds"),
while Python code uses snake_case attributes.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Current version tag written into every persisted record.
SCHEMA_VERSION = 1


class CamelModel(BaseModel):
    """Base model with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible camelCase dict used for storage."""
        return self.model_dump(by_alias=True, mode="json")
