import logging
import os
import sys

import uvicorn

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, "src")
sys.path.insert(0, src_path)

from patientregistry.core.config import get_settings  # noqa: E402
from patientregistry.core.structured_logger import configure_logging  # noqa: E402

if __name__ == "__main__":
    settings = get_settings()
    logger = configure_logging(settings.logging)

    port = int(os.environ.get("PORT", settings.port))
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} startup")
    logger.info("=" * 60)
    logger.info(f"Python version: {sys.version.split()[0]}")
    logger.info(f"APP_ENV: {settings.app_env}")
    logger.info(f"Listening on {settings.host}:{port}")

    uvicorn.run(
        "patientregistry.app:app",
        host=settings.host,
        port=port,
        log_level=logging.getLevelName(logger.level).lower(),
        reload=settings.is_development and settings.debug,
    )
