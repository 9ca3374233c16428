"""Configuration for the inlining page server."""

from pathlib import Path

# Built frontend that gets served (index.html plus its assets).
# Relative, so it resolves against the directory the server is started from.
DIST_ROOT = Path("web") / "dist"

# Entry document, relative to DIST_ROOT
INDEX_FILE = "index.html"

# Listen on all interfaces
SERVER_HOST = "0.0.0.0"

# Server port
SERVER_PORT = 8080
