"""
Entry point for the Guestbook API (local run)
"""

import logging

from backend.app.main import app
from backend.core.config import settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Application is running on: http://localhost:{settings.PORT}{settings.API_PREFIX}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
