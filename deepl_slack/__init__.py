"""DeepL for Slack: translate Slack messages with flag reactions.

WHY: Teams working across languages want a translation one click away,
inside the conversation, without copying text into another tool.

HOW: Three layers: a static flag → language lookup (core), an async
DeepL client (api), and slack-bolt listeners (slack) hosted by a FastAPI
server (server).

RULES:
- The language lookup has no Slack or HTTP dependencies
- Translation failures are logged, never shown to Slack users
"""

__version__ = "0.1.0"
