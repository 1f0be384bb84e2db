# serve.py
"""
Start the People API on 127.0.0.1:3000.

Usage:
    python serve.py
"""

import logging

import uvicorn

from app.config import HOST, PORT
from app.main import app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    logger.info("listening on %s:%s", HOST, PORT)
    # uvicorn logs the bind error and exits non-zero if the address is taken
    uvicorn.run(app, host=HOST, port=PORT, log_level="warning")


if __name__ == "__main__":
    main()
