"""Core lookup logic: reaction name → DeepL target language.

Pure functions and static data only; no Slack or HTTP imports.
"""

from deepl_slack.core.languages import (
    FLAG_LANGUAGE_MAP,
    is_ignored,
    normalize_trigger,
    resolve_language,
)

__all__ = ["FLAG_LANGUAGE_MAP", "is_ignored", "normalize_trigger", "resolve_language"]
