"""
Entry point for running the MusicDB API with uvicorn.

This module loads environment variables, configures logging and serves
``music_db.main:app``.
"""

import logging

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from music_db.main import app  # noqa: E402
from music_db.utils.config import get_settings  # noqa: E402
from music_db.utils.logger import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn

    setup_logging()
    settings = get_settings()

    logger.info(f"Starting MusicDB on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    uvicorn.run(
        "music_db.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
