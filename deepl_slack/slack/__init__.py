"""Slack integration for DeepL translation.

WHY: Users in Slack translate messages by reacting with a flag emoji or
through a global shortcut. This package holds the Bolt listeners and the
Block Kit payloads they send.

HOW: bot.py builds a slack-bolt AsyncApp; the HTTP hosting lives in
deepl_slack.server. messages.py builds the modal and reply text.

RULES:
- Outbound DeepL calls go through deepl_slack.api.DeepLClient
- Shortcuts and view submissions must be ack()'d within 3 seconds
"""
