"""Context parameter - the key/value unit exchanged with the host application."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ContextParam(BaseModel):
    """One context attribute as sent over the host/addon boundary."""

    key: str = Field(..., description="Context key, e.g. 'acc.id'")
    value: Optional[str] = Field(default=None, description="Attribute value")

    @field_validator("key", mode="before")
    @classmethod
    def key_enum_to_value(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            return v.value
        return v
