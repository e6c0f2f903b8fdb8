"""HTTP server hosting the Slack app (FastAPI + uvicorn)."""
