"""Configuration constants, DeepL endpoints, and .env loading.

WHY: Centralizes every configurable value so it is easy to find, update,
and override. Endpoints, OAuth scopes, and defaults are plain module-level
data, not buried in handler logic.

HOW: python-dotenv loads the .env file on import. load_settings() reads the
environment once at startup into a frozen Settings object that the server
and the Bolt app are built from.

RULES:
- Secrets are loaded from the environment (.env), never hardcoded
- load_settings() raises ValueError naming the missing variable
- Settings are read once; there is no hot-reload
- SLACK_LOG_LEVEL=debug selects DEBUG, anything else INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load .env from the project root (where the server is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# DeepL API endpoints
# ---------------------------------------------------------------------------

DEEPL_FREE_API_URL = "https://api-free.deepl.com/v2/translate"
DEEPL_PRO_API_URL = "https://api.deepl.com/v2/translate"

# ---------------------------------------------------------------------------
# Slack app defaults
# ---------------------------------------------------------------------------

SLACK_SCOPES = ["commands", "chat:write", "reactions:read"]
"""Bot scopes requested by the OAuth install flow."""

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

DEFAULT_IGNORE_PATTERN = "QP"
"""Reactions containing this (case-insensitive) are never translated."""


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once from the environment.

    RULES:
    - bot_token may be empty only when OAuth (client_id + client_secret) is set
    - deepl_free_plan selects DEEPL_FREE_API_URL over DEEPL_PRO_API_URL
    """

    signing_secret: str
    deepl_auth_key: str
    bot_token: str = ""
    client_id: str = ""
    client_secret: str = ""
    deepl_free_plan: bool = False
    ignore_pattern: str = DEFAULT_IGNORE_PATTERN
    log_level: int = logging.INFO
    port: int = DEFAULT_PORT

    @property
    def oauth_enabled(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def deepl_api_url(self) -> str:
        return DEEPL_FREE_API_URL if self.deepl_free_plan else DEEPL_PRO_API_URL


def parse_log_level(value: Optional[str]) -> int:
    """Map SLACK_LOG_LEVEL to a logging level (only "debug" is special)."""
    if (value or "").strip().lower() == "debug":
        return logging.DEBUG
    return logging.INFO


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    WHY: Missing secrets should fail the process at startup with a clear
    message, not surface later as a cryptic 401 from Slack or DeepL.

    HOW: Reads each variable from ``environ`` (defaults to os.environ,
    already populated by python-dotenv), validates the required ones,
    and returns a frozen Settings.

    RULES:
    - SLACK_SIGNING_SECRET and DEEPL_AUTH_KEY are always required
    - SLACK_BOT_TOKEN is required unless SLACK_CLIENT_ID/SECRET enable OAuth
    - DEEPL_FREE_API_PLAN == "1" selects the free endpoint
    - PORT must be an integer
    """
    env = os.environ if environ is None else environ

    signing_secret = env.get("SLACK_SIGNING_SECRET", "").strip()
    if not signing_secret:
        raise ValueError(
            "Slack signing secret not configured. "
            "Add SLACK_SIGNING_SECRET to the .env file."
        )

    deepl_auth_key = env.get("DEEPL_AUTH_KEY", "").strip()
    if not deepl_auth_key:
        raise ValueError(
            "DeepL API key not configured. "
            "Add DEEPL_AUTH_KEY to the .env file."
        )

    bot_token = env.get("SLACK_BOT_TOKEN", "").strip()
    client_id = env.get("SLACK_CLIENT_ID", "").strip()
    client_secret = env.get("SLACK_CLIENT_SECRET", "").strip()
    if not bot_token and not (client_id and client_secret):
        raise ValueError(
            "Slack credentials not configured. Add SLACK_BOT_TOKEN, or "
            "SLACK_CLIENT_ID and SLACK_CLIENT_SECRET for the OAuth flow."
        )

    port_raw = env.get("PORT", "").strip() or str(DEFAULT_PORT)
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError("PORT must be an integer, got {!r}".format(port_raw)) from None

    return Settings(
        signing_secret=signing_secret,
        deepl_auth_key=deepl_auth_key,
        bot_token=bot_token,
        client_id=client_id,
        client_secret=client_secret,
        deepl_free_plan=env.get("DEEPL_FREE_API_PLAN", "").strip() == "1",
        ignore_pattern=env.get("IGNORE_REACTION_PATTERN", DEFAULT_IGNORE_PATTERN),
        log_level=parse_log_level(env.get("SLACK_LOG_LEVEL")),
        port=port,
    )
