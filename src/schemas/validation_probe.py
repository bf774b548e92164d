"""Pydantic models and validation rules for the format-validation probe."""

from typing import Optional

from pydantic import BaseModel, Field

from src.services.schema_validator import (
    SchemaValidator,
    email,
    length,
    pattern,
    postal_code_pattern,
    required,
    url,
    value_range,
)


class ProbeQuery(BaseModel):
    """Query string accepted by ``GET /validate``."""

    x: Optional[int] = Field(default=None, ge=0, description="Value between 1 and 10")
    y: Optional[str] = Field(default=None, description="Text of 2-5 characters")


class ProbeRecord(BaseModel):
    """JSON body accepted by ``POST /validate``."""

    name: Optional[str] = Field(default=None, description="Name (1-10 characters)")
    birth_month: Optional[int] = Field(default=None, ge=0, description="Birth month (1-12)")
    email: Optional[str] = Field(default=None, description="Email address")
    hp_url: Optional[str] = Field(default=None, description="Home page URL")
    post_code: Optional[str] = Field(default=None, description="Postal code, e.g. 123-4567")


QUERY_VALIDATOR = SchemaValidator((
    required("x"),
    value_range("x", 1, 10),
    length("y", 2, 5),
))

RECORD_VALIDATOR = SchemaValidator((
    required("name"),
    length("name", 1, 10),
    required("birth_month"),
    value_range("birth_month", 1, 12),
    email("email"),
    url("hp_url"),
    pattern("post_code", postal_code_pattern),
))
