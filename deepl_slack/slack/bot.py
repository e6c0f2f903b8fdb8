"""Slack bot: reaction, shortcut, and modal handlers.

WHY: Users translate Slack messages two ways: react to a message with a
flag emoji (the translation is posted in-thread), or open the "DeepL
Translate" shortcut and type text plus a target code (the translation is
sent as a DM). This module is the glue between those Slack interactions
and the DeepL client.

HOW: Uses slack-bolt's AsyncApp. create_app() registers the listeners and
a middleware that puts the shared DeepLClient and the ignore pattern into
the Bolt context, so the handlers stay plain module-level functions that
tests can call directly with mocks.

RULES:
- Unresolved reactions are a silent no-op: no Slack or DeepL calls
- A failed translation posts nothing, in either flow
- Slack API errors are logged and absorbed, never shown to users
- Shortcut and view submissions are ack()'d before any other work
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from slack_bolt.async_app import AsyncApp
from slack_bolt.oauth.async_oauth_settings import AsyncOAuthSettings

from deepl_slack.api.client import DeepLClient
from deepl_slack.config import DEFAULT_IGNORE_PATTERN, SLACK_SCOPES, Settings
from deepl_slack.core.languages import resolve_language
from deepl_slack.slack.messages import (
    LANG_ACTION_ID,
    LANG_BLOCK_ID,
    MODAL_CALLBACK_ID,
    SHORTCUT_CALLBACK_ID,
    TEXT_ACTION_ID,
    TEXT_BLOCK_ID,
    build_translate_modal,
    format_translation_dm,
)

logger = logging.getLogger(__name__)

# Bolt context keys set by the service middleware
CONTEXT_TRANSLATOR = "translator"
CONTEXT_IGNORE_PATTERN = "ignore_pattern"


# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------


def create_app(settings: Settings, translator: Optional[DeepLClient] = None) -> AsyncApp:
    """Create and configure the Bolt app with all listeners.

    WHY: Factory function lets the server and the tests build the app
    from explicit Settings and avoids module-level side effects.

    HOW: Builds an AsyncApp in single-workspace mode (bot token) or, when
    SLACK_CLIENT_ID/SECRET are set, with Bolt's OAuth install flow.
    Registers a middleware injecting the translator, then the listeners.

    RULES:
    - translator defaults to DeepLClient.from_settings(settings)
    - OAuth mode ignores the bot token; installations provide tokens
    - All listeners are registered before returning
    """
    translator = translator or DeepLClient.from_settings(settings)

    if settings.oauth_enabled:
        app = AsyncApp(
            signing_secret=settings.signing_secret,
            oauth_settings=AsyncOAuthSettings(
                client_id=settings.client_id,
                client_secret=settings.client_secret,
                scopes=SLACK_SCOPES,
            ),
            logger=logger,
        )
    else:
        app = AsyncApp(
            token=settings.bot_token,
            signing_secret=settings.signing_secret,
            logger=logger,
        )

    async def inject_services(context, next):
        context[CONTEXT_TRANSLATOR] = translator
        context[CONTEXT_IGNORE_PATTERN] = settings.ignore_pattern
        await next()

    app.use(inject_services)

    app.event("reaction_added")(handle_reaction_added)
    app.shortcut(SHORTCUT_CALLBACK_ID)(handle_translate_shortcut)
    app.view(MODAL_CALLBACK_ID)(handle_translate_modal_submit)

    return app


# ---------------------------------------------------------------------------
# Event handlers
# ---------------------------------------------------------------------------


async def handle_reaction_added(
    event: Dict[str, Any], client: Any, context: Any, logger: Any
) -> None:
    """Translate a message into the language of the flag it was reacted with.

    WHY: Reacting with :flag-jp: (or :jp:) is the quickest way to ask for
    a Japanese translation of a message, visible to the whole thread.

    HOW: Resolves the reaction name, fetches the reacted-to message,
    translates its text, and posts the result as a threaded reply.

    RULES:
    - Only item.type == "message" is handled
    - Ignored/unknown reactions return before any API call
    - Reply goes to the message's thread (or starts one under it)
    """
    item = event.get("item", {})
    if item.get("type") != "message":
        return

    reaction = event.get("reaction", "")
    ignore_pattern = context.get(CONTEXT_IGNORE_PATTERN, DEFAULT_IGNORE_PATTERN)
    language = resolve_language(reaction, ignore_pattern)
    if language is None:
        logger.debug("No language for reaction %r", reaction)
        return

    channel = item.get("channel", "")
    ts = item.get("ts", "")

    message = await _fetch_message(client, channel, ts, logger)
    if not message or not message.get("text"):
        return

    translator: DeepLClient = context[CONTEXT_TRANSLATOR]
    translated = await translator.translate(message["text"], language)
    if not translated:
        return

    thread_ts = message.get("thread_ts") or ts
    try:
        await client.chat_postMessage(
            channel=channel,
            thread_ts=thread_ts,
            text=translated,
        )
    except Exception:
        logger.exception("Failed to post %s translation in %s", language, channel)


async def _fetch_message(
    client: Any, channel: str, ts: str, logger: Any
) -> Optional[Dict[str, Any]]:
    """Fetch the message at ``ts`` via conversations.replies.

    conversations.replies also works for messages that are not in a
    thread. For a threaded reply the parent comes first, so the entry
    with the matching ts is preferred over the first one.
    """
    try:
        resp = await client.conversations_replies(
            channel=channel,
            ts=ts,
            inclusive=True,
        )
    except Exception:
        logger.exception("Failed to fetch message %s in %s", ts, channel)
        return None

    messages = resp.get("messages") or []
    if not messages:
        return None

    for message in messages:
        if message.get("ts") == ts:
            return message
    return messages[0]


# ---------------------------------------------------------------------------
# Shortcut and modal handlers
# ---------------------------------------------------------------------------


async def handle_translate_shortcut(ack: Any, body: Any, client: Any, logger: Any) -> None:
    """Open the translate modal from the global shortcut.

    RULES:
    - ack() FIRST
    - trigger_id from the shortcut body is required to open a modal
    """
    await ack()

    try:
        await client.views_open(
            trigger_id=body.get("trigger_id", ""),
            view=build_translate_modal(),
        )
    except Exception:
        logger.exception("Failed to open translate modal")


async def handle_translate_modal_submit(
    ack: Any, body: Any, view: Any, client: Any, context: Any, logger: Any
) -> None:
    """Translate the modal's text and DM the result to the submitting user.

    WHY: The modal has no channel of its own, so the only place to show
    the result is a direct message to whoever submitted it.

    RULES:
    - ack() closes the modal before translating
    - Both fields must be non-empty (after stripping)
    - The language code is passed to DeepL as typed
    - A failed translation sends nothing
    """
    await ack()

    text, language = _extract_modal_values(view)
    if not text or not language:
        return

    translator: DeepLClient = context[CONTEXT_TRANSLATOR]
    translated = await translator.translate(text, language)
    if not translated:
        return

    user_id = body.get("user", {}).get("id", "")
    try:
        await client.chat_postMessage(
            channel=user_id,
            text=format_translation_dm(text, language, translated),
        )
    except Exception:
        logger.exception("Failed to send translation DM to %s", user_id)


def _extract_modal_values(view: Dict[str, Any]) -> Tuple[str, str]:
    """Return (text, language) from the modal state, stripped, "" if absent."""
    values = view.get("state", {}).get("values", {})
    text = values.get(TEXT_BLOCK_ID, {}).get(TEXT_ACTION_ID, {}).get("value") or ""
    language = values.get(LANG_BLOCK_ID, {}).get(LANG_ACTION_ID, {}).get("value") or ""
    return text.strip(), language.strip()
