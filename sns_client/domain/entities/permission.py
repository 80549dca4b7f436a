"""Topic permission entity."""
from typing import Any

from pydantic import BaseModel, field_validator


class Permission(BaseModel):
    """Actions granted to one AWS account on a topic."""
    account_id: str
    actions: list[str]
    
    @field_validator("account_id", mode="before")
    @classmethod
    def _account_id_as_string(cls, value: Any) -> Any:
        # Account IDs are often written as integer keys
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
    
    @field_validator("actions", mode="before")
    @classmethod
    def _wrap_single_action(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value
