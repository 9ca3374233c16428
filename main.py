#!/usr/bin/env python3
"""Entry point for the inlining page server.

Serves web/dist/index.html on http://0.0.0.0:8080/ with every head script
and stylesheet inlined. Takes no arguments.
"""

import logging

from pagebundle import create_app
from pagebundle.config import DIST_ROOT, SERVER_HOST, SERVER_PORT


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )

    app = create_app()

    print(f"Serving {DIST_ROOT} at http://localhost:{SERVER_PORT}")
    # werkzeug reports a failed bind on stderr and exits with status 1
    app.run(host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
