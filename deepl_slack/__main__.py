"""Package entry point for ``python -m deepl_slack``.

Delegates to the CLI's main(), which starts the HTTP server.
"""

from deepl_slack.cli import main

if __name__ == "__main__":
    main()
