"""Flag emoji and country shorthand → DeepL target language resolution.

WHY: A reaction like :flag-jp: or :jp: should translate the message into
Japanese. The mapping from reaction names to DeepL language codes is the
only real decision the bot makes, so it lives here as plain data plus one
ordered policy function, testable without Slack or HTTP.

HOW: FLAG_LANGUAGE_MAP is keyed by bare, lowercase country codes. The
resolver checks the ignore pattern, normalizes the trigger (case, "flag-"
prefix), looks it up, and falls back to passing any other two-letter code
through uppercased.

RULES:
- Exclusion runs first: a trigger containing the ignore pattern
  (case-insensitive) never resolves, even if it is in the table
- "flag-xx", "xx" and "XX" are the same trigger
- Unknown two-letter codes pass through uppercased ("xx" → "XX")
- Anything else resolves to None (callers do nothing)
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

from deepl_slack.config import DEFAULT_IGNORE_PATTERN

FLAG_PREFIX = "flag-"

_SHORTHAND_RE = re.compile(r"^[a-z]{2}$")

# ---------------------------------------------------------------------------
# Country code → DeepL target language
# ---------------------------------------------------------------------------

FLAG_LANGUAGE_MAP: Mapping[str, str] = MappingProxyType({
    # English
    "us": "EN-US",
    "ca": "EN-US",
    "gb": "EN-GB",
    "au": "EN-GB",
    # Japanese
    "jp": "JA",
    # Chinese
    "cn": "ZH-HANS",
    "tw": "ZH-HANT",
    "hk": "ZH-HANT",
    # Korean
    "kr": "KO",
    # German
    "de": "DE",
    "at": "DE",
    "ch": "DE",
    # French
    "fr": "FR",
    # Spanish
    "es": "ES",
    "mx": "ES",
    # Portuguese
    "pt": "PT-PT",
    "br": "PT-BR",
    # One flag per language
    "it": "IT",
    "nl": "NL",
    "pl": "PL",
    "ru": "RU",
    "tr": "TR",
    "id": "ID",
    "ua": "UK",
    "se": "SV",
    "dk": "DA",
    "fi": "FI",
    "no": "NB",
    "cz": "CS",
    "gr": "EL",
    "hu": "HU",
    "ro": "RO",
    "bg": "BG",
    "sk": "SK",
    "si": "SL",
    "ee": "ET",
    "lv": "LV",
    "lt": "LT",
    # Arabic
    "sa": "AR",
    "ae": "AR",
})
"""Bare country codes to DeepL codes. Built once, read-only."""


def normalize_trigger(trigger: str) -> str:
    """Lowercase a reaction name and strip the "flag-" prefix."""
    name = trigger.strip().lower()
    if name.startswith(FLAG_PREFIX):
        name = name[len(FLAG_PREFIX):]
    return name


def is_ignored(trigger: str, ignore_pattern: str = DEFAULT_IGNORE_PATTERN) -> bool:
    """True if the trigger contains the ignore pattern, case-insensitively.

    An empty pattern ignores nothing.
    """
    if not ignore_pattern:
        return False
    return ignore_pattern.lower() in trigger.lower()


def resolve_language(
    trigger: Optional[str],
    ignore_pattern: str = DEFAULT_IGNORE_PATTERN,
) -> Optional[str]:
    """Resolve a reaction name or shorthand to a DeepL target language.

    WHY: Both the reaction handler and tests need a single, auditable
    place that decides whether a trigger means "translate into X".

    HOW: exclusion check → normalize → table lookup → two-letter fallback.

    RULES:
    - Returns None for empty triggers and ignored triggers
    - resolve_language("flag-jp") == resolve_language("JP") == "JA"
    - resolve_language("xx") == "XX"

    Args:
        trigger: Reaction name (e.g. "flag-br") or shorthand (e.g. "br").
        ignore_pattern: Substring that disqualifies a trigger.

    Returns:
        The DeepL language code, or None when there is no mapping.
    """
    if not trigger:
        return None

    if is_ignored(trigger, ignore_pattern):
        return None

    code = normalize_trigger(trigger)

    language = FLAG_LANGUAGE_MAP.get(code)
    if language is not None:
        return language

    if _SHORTHAND_RE.match(code):
        return code.upper()

    return None
