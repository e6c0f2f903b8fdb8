"""Callback ids, the translate modal, and reply text for the Slack bot.

WHY: The bot sends one modal and two kinds of messages (a threaded
translation and a DM). Keeping the Block Kit layout and the ids here keeps
bot.py focused on event handling.

HOW: Plain functions returning Block Kit dicts or strings, ready to be
passed to client.views_open(view=...) or client.chat_postMessage(text=...).

RULES:
- callback_id / block_id / action_id values must match bot.py
- The language input defaults to DEFAULT_TARGET_LANGUAGE ("EN")
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

from typing import Any, Dict

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Must match the global shortcut configured in the Slack app manifest
SHORTCUT_CALLBACK_ID = "deepl-translation"
MODAL_CALLBACK_ID = "deepl-modal"

TEXT_BLOCK_ID = "text-block"
TEXT_ACTION_ID = "text"
LANG_BLOCK_ID = "lang-block"
LANG_ACTION_ID = "lang"

DEFAULT_TARGET_LANGUAGE = "EN"


def _plain(text: str) -> Dict[str, Any]:
    return {"type": "plain_text", "text": text}


# ---------------------------------------------------------------------------
# Modal
# ---------------------------------------------------------------------------


def build_translate_modal(
    initial_language: str = DEFAULT_TARGET_LANGUAGE,
) -> Dict[str, Any]:
    """Build the modal opened by the global shortcut.

    WHY: Users without a message to react to can still translate
    arbitrary text by typing it and a target code.

    HOW: Two plain_text_input blocks: multiline source text, and a
    free-text language code pre-filled with initial_language.

    RULES:
    - Both inputs are required by Slack (no "optional" flag)
    - The language code is free text; DeepL validates it
    """
    return {
        "type": "modal",
        "callback_id": MODAL_CALLBACK_ID,
        "title": _plain("DeepL Translate"),
        "submit": _plain("Translate"),
        "close": _plain("Close"),
        "blocks": [
            {
                "type": "input",
                "block_id": TEXT_BLOCK_ID,
                "element": {
                    "type": "plain_text_input",
                    "action_id": TEXT_ACTION_ID,
                    "multiline": True,
                    "placeholder": _plain("Text to translate"),
                },
                "label": _plain("Text"),
            },
            {
                "type": "input",
                "block_id": LANG_BLOCK_ID,
                "element": {
                    "type": "plain_text_input",
                    "action_id": LANG_ACTION_ID,
                    "placeholder": _plain("Language code (e.g. EN, JA, ZH)"),
                    "initial_value": initial_language,
                },
                "label": _plain("Target Language"),
            },
        ],
    }


# ---------------------------------------------------------------------------
# Message text
# ---------------------------------------------------------------------------


def format_translation_dm(text: str, language: str, translated: str) -> str:
    """DM body sent to the user who submitted the modal.

    Every line of the translation is block-quoted so multi-line results
    stay inside the quote.
    """
    quoted = "\n".join("> " + line for line in translated.split("\n"))
    return 'Translating "{}" to {}...\n\n{}'.format(text, language, quoted)
