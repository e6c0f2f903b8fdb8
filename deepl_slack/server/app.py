"""FastAPI application hosting the Slack app's HTTP endpoints.

WHY: Slack delivers events, shortcuts, and view submissions as signed HTTP
POSTs, and the OAuth install flow needs two GET routes. FastAPI gives us
those routes plus a health check for load balancers, served by uvicorn.

HOW: create_api() builds the Bolt AsyncApp from Settings and mounts it via
slack-bolt's FastAPI adapter. Every Slack route hands the raw request to
AsyncSlackRequestHandler, which verifies signatures and dispatches to the
listeners in deepl_slack.slack.bot.

RULES:
- POST /slack/events receives both Events API and interactivity payloads
- /slack/install and /slack/oauth_redirect exist only when OAuth is enabled
- GET /health needs no Slack signature
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
from slack_bolt.async_app import AsyncApp

from deepl_slack import __version__
from deepl_slack.config import Settings
from deepl_slack.server.models import HealthResponse
from deepl_slack.slack.bot import create_app

logger = logging.getLogger(__name__)


def create_api(settings: Settings, bolt_app: Optional[AsyncApp] = None) -> FastAPI:
    """Build the FastAPI app with the Slack routes and the health check.

    RULES:
    - bolt_app defaults to create_app(settings)
    - Slack route paths match the Request URLs in the Slack app config
    """
    bolt_app = bolt_app or create_app(settings)
    handler = AsyncSlackRequestHandler(bolt_app)

    api = FastAPI(
        title="DeepL for Slack",
        version=__version__,
        description="Translate Slack messages with flag reactions and a shortcut.",
    )

    @api.post(
        "/slack/events",
        tags=["slack"],
        summary="Slack events and interactivity",
        description="Request URL for Event Subscriptions, shortcuts and modals.",
    )
    async def slack_events(req: Request):
        return await handler.handle(req)

    if settings.oauth_enabled:

        @api.get("/slack/install", tags=["slack"], summary="Start the OAuth install flow")
        async def slack_install(req: Request):
            return await handler.handle(req)

        @api.get("/slack/oauth_redirect", tags=["slack"], summary="OAuth redirect URL")
        async def slack_oauth_redirect(req: Request):
            return await handler.handle(req)

    @api.get(
        "/health",
        response_model=HealthResponse,
        tags=["health"],
        summary="Health check",
        description="Liveness check for load balancers and orchestrators.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="ok",
            version=__version__,
            oauth_enabled=settings.oauth_enabled,
        )

    return api
