"""Pydantic response models for the HTTP server's own routes.

Slack routes return Bolt's responses untouched; only the health check
has a schema of its own.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = Field(description="Always 'ok' when the server is up.")
    version: str = Field(description="Installed deepl_slack version.")
    oauth_enabled: bool = Field(
        description="Whether the Slack OAuth install flow is mounted.",
    )
