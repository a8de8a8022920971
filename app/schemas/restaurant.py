"""Restaurant form and API schemas."""

import re
from datetime import time

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.dish import DishResponse

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9 ()\-.]{5,20}$")


class RestaurantForm(BaseModel):
    """Submitted create/edit restaurant form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = None
    version: int | None = None
    name: str = Field(min_length=1, max_length=100)
    image_url: str = Field(min_length=1, max_length=500)
    address: str = Field(min_length=1)
    email: str | None = None
    phone_number: str | None = None
    description: str | None = None
    cuisine_type: str | None = Field(default=None, max_length=64)
    rating: float = Field(ge=1, le=5)
    opening_time: time
    closing_time: time
    price_range: str | None = Field(default=None, max_length=16)

    @field_validator(
        "id",
        "version",
        "email",
        "phone_number",
        "description",
        "cuisine_type",
        "price_range",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        if value is not None and not EMAIL_PATTERN.match(value):
            raise ValueError("Enter a valid email address")
        return value

    @field_validator("phone_number")
    @classmethod
    def check_phone(cls, value: str | None) -> str | None:
        if value is not None and not PHONE_PATTERN.match(value):
            raise ValueError("Enter a valid phone number")
        return value

    def to_values(self) -> dict:
        """Column values to persist, without identity and version."""
        return self.model_dump(exclude={"id", "version"})


class RestaurantResponse(BaseModel):
    """Serialized restaurant."""

    id: int
    name: str
    image_url: str
    address: str
    email: str | None
    phone_number: str | None
    description: str | None
    cuisine_type: str | None
    rating: float
    opening_time: time
    closing_time: time
    is_open_now: bool
    price_range: str | None

    model_config = ConfigDict(from_attributes=True)


class RestaurantDetailResponse(RestaurantResponse):
    """Restaurant with the dishes it offers and the dishes it could add."""

    dishes: list[DishResponse]
    available_dishes: list[DishResponse]
