"""Dish form and API schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DishForm(BaseModel):
    """Submitted create/edit dish form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = None
    version: int | None = None
    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @field_validator("id", "version", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_values(self) -> dict:
        return self.model_dump(exclude={"id", "version"})


class DishResponse(BaseModel):
    """Serialized dish."""

    id: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)
