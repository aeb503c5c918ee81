"""Entry point for the Customer Management API.

Starts the FastAPI application with uvicorn.  The bind address is read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``); see ``customer_api.app.core.config`` for
the remaining settings.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Keep the handlers installed by setup_logging in create_app().
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
