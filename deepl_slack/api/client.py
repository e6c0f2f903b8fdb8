"""Async HTTP client for the DeepL /v2/translate endpoint.

WHY: Both Slack entry points (reaction and modal) need the same single
call: send one text, get one translation back. This module hides the
endpoint choice, authentication, and response parsing behind one class so
handlers only see "translated text or None".

HOW: Uses httpx.AsyncClient for non-blocking HTTP. Each call opens its own
client for the duration of one request. translate_text() is the strict
layer (raises on failure); translate() is the forgiving layer used by the
Slack handlers (logs and returns None).

RULES:
- Auth header is "DeepL-Auth-Key <key>", body is JSON
- Request body: {"text": [text], "target_lang": code}
- The free/pro tier flag only selects the base URL
- No retry, no rate limiting, httpx default timeout
- translate() never raises; every failure is logged at ERROR and returns None
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from deepl_slack.api.models import TranslateResponse, Translation
from deepl_slack.config import DEEPL_PRO_API_URL, Settings

logger = logging.getLogger(__name__)


class DeepLAPIError(Exception):
    """Raised when DeepL returns a non-2xx response.

    RULES:
    - Always include status_code and message
    - message is the response body text
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"DeepL API error {status_code}: {message}")


class DeepLClient:
    """Client for DeepL text translation.

    WHY: Keeps the API key, tier-dependent URL, and HTTP details in one
    object that the Slack app is built with once at startup.

    HOW: Stores the key and URL; every translate call opens a short-lived
    httpx.AsyncClient. An optional transport can be injected (tests use
    httpx.MockTransport).

    RULES:
    - Use DeepLClient.from_settings(settings) in the app
    - api_url defaults to the Pro endpoint
    """

    def __init__(
        self,
        api_key: str,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url or DEEPL_PRO_API_URL
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> DeepLClient:
        return cls(
            api_key=settings.deepl_auth_key,
            api_url=settings.deepl_api_url,
            transport=transport,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    def _headers(self) -> dict:
        return {
            "Authorization": f"DeepL-Auth-Key {self._api_key}",
            "Content-Type": "application/json",
        }

    async def translate_text(self, text: str, target_lang: str) -> List[Translation]:
        """POST one text to DeepL and return the parsed translations.

        RULES:
        - Raises httpx.HTTPError on transport failures
        - Raises DeepLAPIError on non-2xx responses
        - Raises ValueError/KeyError/TypeError on a malformed body
        - Returns the (possibly empty) list of translations

        Args:
            text: Source text, sent as a single-element list.
            target_lang: DeepL target language code (e.g. "JA", "EN-US").

        Returns:
            List of Translation objects, in DeepL's order.
        """
        payload = {"text": [text], "target_lang": target_lang}

        async with httpx.AsyncClient(transport=self._transport) as http:
            resp = await http.post(self._api_url, json=payload, headers=self._headers())

        if not resp.is_success:
            raise DeepLAPIError(resp.status_code, resp.text)

        return TranslateResponse.from_dict(resp.json()).translations

    async def translate(self, text: str, target_lang: str) -> Optional[str]:
        """Translate text, returning the first result or None on any failure.

        WHY: Slack handlers treat "failed" and "nothing to post" the same
        way, so they should not need their own try/except around DeepL.

        Args:
            text: Source text.
            target_lang: DeepL target language code.

        Returns:
            The translated text, or None.
        """
        try:
            translations = await self.translate_text(text, target_lang)
        except DeepLAPIError as exc:
            logger.error("DeepL rejected translation to %s: %s", target_lang, exc)
            return None
        except httpx.HTTPError:
            logger.exception("Failed to call DeepL API (target %s)", target_lang)
            return None
        except (ValueError, KeyError, TypeError):
            logger.exception("Malformed DeepL response (target %s)", target_lang)
            return None

        if not translations:
            logger.error("DeepL returned no translations (target %s)", target_lang)
            return None

        return translations[0].text
