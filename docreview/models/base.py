"""Base model shared by all wire DTOs.

Wire payloads use camelCase keys, python attributes use snake_case.
Every field declares its wire name as an alias; both names are accepted
on input. Invalid input raises docreview.errors.ValidationError whether the
model is built directly or through from_wire().
"""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict

from docreview.errors import ValidationError


class WireModel(BaseModel):
    """Pydantic base for every DTO crossing the transport boundary."""

    model_config = ConfigDict(populate_by_name=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid {type(self).__name__}: {e}") from e

    @classmethod
    def from_wire(cls, data: Any):
        """
        Parses a raw JSON-shaped value into this model.

        Args:
            data (Any): The decoded JSON value, usually a dict.

        Returns:
            The parsed model instance.

        Raises:
            ValidationError: If the payload does not match the model.
        """
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid {cls.__name__} payload: {e}") from e

    def to_payload(self) -> dict:
        """
        Returns the wire representation (camelCase keys, optional fields left out when unset).
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
