"""DeepL /v2/translate response dataclasses.

WHY: DeepL answers with a JSON object holding a list of translations.
Typed dataclasses make the fields explicit and turn a malformed response
into a KeyError/TypeError at the parsing boundary instead of deep inside
a Slack handler.

HOW: Each dataclass maps 1:1 to a DeepL JSON object, with a from_dict
factory for parsing raw API responses.

RULES:
- text is always present on a translation
- detected_source_language may be absent in test doubles; it defaults to ""
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class Translation:
    """One entry of the DeepL ``translations`` array."""

    text: str
    detected_source_language: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Translation:
        return cls(
            text=data["text"],
            detected_source_language=data.get("detected_source_language", ""),
        )


@dataclass
class TranslateResponse:
    """Full response body of POST /v2/translate.

    RULES:
    - translations keeps DeepL's order (one entry per input text)
    - An empty list is valid JSON but means "no result" to callers
    """

    translations: List[Translation]

    @classmethod
    def from_dict(cls, data: dict) -> TranslateResponse:
        return cls(
            translations=[Translation.from_dict(t) for t in data["translations"]],
        )
