"""Result envelope returned by every validated action."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    WALLET_NOT_FOUND = "WALLET_NOT_FOUND"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ActionResult(BaseModel):
    """{success, data?, error?}. success=True never carries an error; success=False never carries data."""

    model_config = ConfigDict(arbitrary_types_allowed=True, use_enum_values=True)

    success: bool
    data: Optional[Any] = None
    error: Optional[ErrorCode] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "ActionResult":
        if self.success and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.success:
            if self.error is None:
                raise ValueError("failed result must carry an error code")
            if self.data is not None:
                raise ValueError("failed result cannot carry data")
        return self

    @classmethod
    def ok(cls, data: Any = None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ErrorCode) -> "ActionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        """Wire shape: absent fields are omitted, e.g. {"success": True}."""
        return self.model_dump(exclude_none=True)
