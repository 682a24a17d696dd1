"""
Pydantic response models for the API.

Shares are passed through as the source delivered them; no range or sum
checks are applied.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProbeAttemptOut(BaseModel):
    """One attempt against one data source."""
    probe: str = Field(..., description="Source name", examples=["datos.gob.es"])
    outcome: str = Field(..., description="ok | failed", examples=["failed"])
    elapsed_seconds: float = Field(..., description="Wall time spent on the attempt", examples=[0.412])
    simulated: bool = Field(False, description="True for placeholder sources that return fixed data")
    fallback: bool = Field(False, description="True for the last-resort local file attempt")
    detail: str | None = Field(None, description="Why the attempt failed", examples=["HTTP error! Status: 500"])


class DistributionOut(BaseModel):
    """The distribution obtained for this request and where it came from."""
    source: str = Field(..., description="Name of the source that produced the data", examples=["ministerio-hacienda"])
    simulated: bool = Field(..., description="True when the data is a placeholder, not real figures")
    fell_back: bool = Field(..., description="True when every prioritized source failed and the local file was used")
    shares: dict[str, Any] = Field(
        ...,
        description="Category name → share, in source order",
        examples=[{"Health": 35, "Education": 30, "Infrastructure": 20, "Pensions": 15}],
    )
    attempts: list[ProbeAttemptOut] = Field(default_factory=list)


class ErrorOut(BaseModel):
    """Error envelope used by every non-2xx JSON response."""
    error: str = Field(..., examples=["No data available"])
    detail: str | None = Field(None)
    status_code: int = Field(..., examples=[503])
