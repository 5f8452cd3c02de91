"""Entry point for the Phone Store API.

Serves ``phone_store_api.app.main:app`` with Uvicorn.  Host and port
are read from the ``HOST`` and ``PORT`` environment variables (or a
``.env`` file in the working directory); defaults are ``0.0.0.0`` and
``3000``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from phone_store_api.app.core.config import settings
from phone_store_api.app.main import app


logger = logging.getLogger("phone_store_api")


def main() -> None:
    """Start the API server and block until it exits."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server is running on http://localhost:%s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
