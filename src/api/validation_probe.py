"""Endpoints that run the format validation rules against arbitrary input."""

from typing import Annotated, Optional

from fastapi import APIRouter, Query

from src.schemas.validation_probe import (
    QUERY_VALIDATOR,
    RECORD_VALIDATOR,
    ProbeQuery,
    ProbeRecord,
)


validation_probe_router = APIRouter(prefix="/validate", tags=["Validation"])


@validation_probe_router.get(
    "",
    response_model=ProbeQuery,
    response_model_exclude_none=True,
    summary="Validate Query String",
    description="Check x (required, 1-10) and y (optional, 2-5 characters).",
)
def validate_query(
    x: Annotated[Optional[int], Query(ge=0)] = None,
    y: Annotated[Optional[str], Query()] = None,
) -> ProbeQuery:
    query = ProbeQuery(x=x, y=y)
    QUERY_VALIDATOR.ensure_valid(query.model_dump())
    return query


@validation_probe_router.post(
    "",
    response_model=ProbeRecord,
    summary="Validate Record",
    description=(
        "Check name, birth month, email, home page URL and postal code "
        "and echo the record back when every rule passes."
    ),
)
def validate_record(body: ProbeRecord) -> ProbeRecord:
    RECORD_VALIDATOR.ensure_valid(body.model_dump())
    return body
