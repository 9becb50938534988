"""
Request and response schemas of the HTTP API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Body of POST /api/generate.

    ``tasks`` is typed loosely; emptiness and type are checked by the use
    case so that a missing value yields the same 400 as an empty one.
    """

    tasks: Optional[Any] = Field(
        None,
        description="Free-text list of tasks (string)",
        json_schema_extra={"type": "string"},
    )


class GenerateResponse(BaseModel):
    plan: str = Field(..., description="Prioritized plan for today")
    email: str = Field(..., description="Draft work update email")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")


class SheetsProbeResponse(BaseModel):
    success: bool = True
    data: List[List[Any]] = Field(default_factory=list)


class SheetsProbeErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
