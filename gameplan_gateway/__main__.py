"""Run the gateway with uvicorn: python -m gameplan_gateway"""

import logging
import uvicorn

from gameplan_gateway.config import settings


def main() -> None:
    """Start the HTTP server on the configured host and port"""
    from gameplan_gateway.api.main import app

    logging.info(f"Server is running on http://localhost:{settings.port}", extra={"port": settings.port})
    # log_config=None keeps the JSON handlers installed by setup_logging
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
