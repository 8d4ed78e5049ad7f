from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from utils.validation_utils import BlockIdentifier, validate_block_identifier, validate_block_range


class EventFilterOptions(BaseModel):
    """Block range and argument filters used when replaying contract events."""

    model_config = ConfigDict(populate_by_name=True)

    # Unrestricted by default: from genesis to the chain head
    from_block: BlockIdentifier = 0
    to_block: BlockIdentifier = "latest"
    argument_filters: Optional[Dict[str, Any]] = None

    @field_validator("from_block", "to_block")
    @classmethod
    def _check_block(cls, value: BlockIdentifier) -> BlockIdentifier:
        validate_block_identifier(value)
        return value

    @model_validator(mode="after")
    def _check_range(self) -> "EventFilterOptions":
        validate_block_range(self.from_block, self.to_block)
        return self
