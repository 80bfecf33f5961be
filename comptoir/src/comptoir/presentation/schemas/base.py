"""
Shared schema base.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for all API schemas.

    JSON keys are camelCase; snake_case is accepted on input too.
    NaN and infinite floats are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str
    code: Optional[str] = None
    details: Optional[Any] = None


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str
