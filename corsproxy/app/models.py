"""
Data Models Module

This module defines the Pydantic models that carry a single proxied exchange
through the service. None of them outlive the request that created them.

Models are organized by functional area:
- Fetch result models (outcome of the outbound GET)
- Reply models (immutable description of what goes back to the client)
- Error and health payloads
"""

from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Fetch Result Models
# ============================================================================

class FetchSuccess(BaseModel):
    """Upstream answered; any status code counts as success."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    status_code: int = Field(..., description="Upstream HTTP status code")
    content_type: Optional[str] = Field(None, description="Upstream Content-Type header, if sent")
    body: str = Field("", description="Upstream body decoded as text")
    encoding: str = Field("utf-8", description="Text encoding the body was decoded with")


class FetchFailure(BaseModel):
    """The outbound call raised before a response could be read."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str = Field(..., description="Message text of the underlying error")
    error_type: str = Field(..., description="Class name of the underlying error")


FetchResult = Union[FetchSuccess, FetchFailure]


# ============================================================================
# Reply Models
# ============================================================================

class ProxyReply(BaseModel):
    """Complete description of a reply, built once and then rendered."""
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="Status code sent to the client")
    content_type: Optional[str] = Field(None, description="Content-Type sent to the client")
    body: str = Field("", description="Reply body text")
    encoding: str = Field("utf-8", description="Encoding used to write the body")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra response headers")


# ============================================================================
# Error / Health Models
# ============================================================================

class ErrorResponse(BaseModel):
    """JSON error payload returned for missing input and fetch failures."""
    error: str = Field(..., description="Fixed error message")
    details: Optional[str] = Field(None, description="Underlying error message, when there is one")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
