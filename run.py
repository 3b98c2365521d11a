#!/usr/bin/env python3
"""geoview - Web Mercator viewport service.

Starts the Flask JSON API.  Configured through the environment:
HOST, PORT, LOG_LEVEL and (optionally) LOG_DIR.
"""

import os

from geoview.log import setup_logging
from geoview.server import app

PORT = int(os.environ.get("PORT", 5050))
HOST = os.environ.get("HOST", "127.0.0.1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_DIR = os.environ.get("LOG_DIR")


if __name__ == "__main__":
    setup_logging(LOG_LEVEL, LOG_DIR)
    app.run(host=HOST, port=PORT, debug=False)
