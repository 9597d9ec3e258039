"""
RFC 7807 Problem Details error response schemas.

Implements standard error response format for the API.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details for HTTP APIs.

    Standard error response format that provides machine-readable details
    about errors in a consistent structure.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "https://httpstatuses.com/400",
                    "title": "Bad Request",
                    "status": 400,
                    "detail": "start_day and end_day must be provided together",
                    "instance": "/api/v1/monitors/42/uptime",
                },
                {
                    "type": "https://httpstatuses.com/502",
                    "title": "Bad Gateway",
                    "status": 502,
                    "detail": "Outage 9 ends before it starts: started_at=200, ended_at=100",
                    "instance": "/api/v1/monitors/42/uptime",
                },
                {
                    "type": "https://httpstatuses.com/503",
                    "title": "Service Unavailable",
                    "status": 503,
                    "detail": "Outage history is temporarily unavailable",
                    "instance": "/api/v1/monitors/42/outages",
                },
            ]
        }
    )

    type: str = Field(
        ...,
        description="URI reference that identifies the problem type",
        examples=["https://httpstatuses.com/503"],
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code", ge=100, le=599)
    detail: str = Field(
        ..., description="Human-readable explanation specific to this occurrence"
    )
    instance: str = Field(
        ..., description="URI reference that identifies the specific occurrence"
    )
    correlation_id: str | None = Field(
        None, description="Correlation ID for request tracing"
    )
