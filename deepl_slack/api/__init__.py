"""DeepL API client package: async HTTP interface to DeepL translation.

WHY: The Slack handlers need one translation call. This package
encapsulates all DeepL communication behind a single client class.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. Response data is
parsed into typed dataclasses defined in models.py.

RULES:
- All DeepL HTTP calls go through DeepLClient (no direct httpx usage elsewhere)
- Authentication is via the DeepL-Auth-Key header from config
"""

from deepl_slack.api.client import DeepLAPIError, DeepLClient
from deepl_slack.api.models import TranslateResponse, Translation

__all__ = ["DeepLAPIError", "DeepLClient", "TranslateResponse", "Translation"]
