"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in email-syntax
with shared configuration.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    Models are immutable. Strings are stored exactly as given, since
    surrounding whitespace is significant when reporting on addresses.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=False,
    )
