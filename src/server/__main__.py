"""Server module entry point for running with python -m server."""

import uvicorn

from tagselector.config import TAGSELECTOR_HOST, TAGSELECTOR_PORT
from tagselector.utils.logging_config import configure_logging, get_logger

# Configure logging first to intercept all logging, uvicorn included
configure_logging()
logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(
        "Starting tagselector server",
        extra={
            "host": TAGSELECTOR_HOST,
            "port": TAGSELECTOR_PORT,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=TAGSELECTOR_HOST,
        port=TAGSELECTOR_PORT,
        log_config=None,  # Disable uvicorn's default logging config
    )
