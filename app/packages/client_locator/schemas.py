"""Pydantic schemas for client locator package."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientIpResponse(BaseModel):
    """Resolved client IP for the calling request."""

    ip_address: str = Field(
        ..., description="Client IP as reported by forwarding headers or the peer"
    )


class SubdivisionResponse(BaseModel):
    """Subdivision lookup result."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ip_address": "203.0.113.7",
                "subdivision_code": "ON",
            }
        }
    )

    ip_address: str = Field(..., description="Queried IP address")
    subdivision_code: Optional[str] = Field(
        None,
        description="ISO code of the most specific subdivision; null when the "
        "database has no subdivision for the address",
    )


class DatabaseHealthResponse(BaseModel):
    """GeoIP2 database health."""

    status: str = Field(..., description="healthy when the database is readable")
    database_type: Optional[str] = Field(None, description="e.g. GeoLite2-City")
    build_epoch: Optional[int] = Field(None, description="Database build time (epoch)")
    ip_version: Optional[int] = Field(None, description="4 or 6")
