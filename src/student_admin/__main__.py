"""Run the Student Admin API server."""

from __future__ import annotations

import uvicorn

from student_admin.api import create_app
from student_admin.config import Settings
from student_admin.logging import get_logger, setup_logging

logger = get_logger("server")


def main() -> None:
    """Start the API with settings from the environment."""
    settings = Settings.from_env()
    setup_logging(log_dir=settings.log_dir, level=settings.log_level)
    logger.info("Serving on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
