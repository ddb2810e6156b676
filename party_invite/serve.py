"""
API server (python -m party_invite.serve)
Runs the app under uvicorn on HOST:PORT; RELOAD=true watches the package
for changes during development.
"""

import logging
import os

import uvicorn

from .config import Settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)

    logger.info(
        f"Serving Party Invite API on http://{settings.HOST}:{settings.PORT} "
        f"(docs at /docs, reload={'on' if settings.RELOAD else 'off'})"
    )
    uvicorn.run(
        "party_invite.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        reload_dirs=[os.path.dirname(os.path.abspath(__file__))] if settings.RELOAD else None,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
