# This file starts the credit API under uvicorn with the configured host and port.

from __future__ import annotations

import logging

import uvicorn

from credit_system.api.api_config import get_api_config
from credit_system.common.logging import configure_logging

LOGGER = logging.getLogger("api")


def main() -> None:
    configure_logging()
    config = get_api_config()
    LOGGER.info("starting api environment=%s host=%s port=%s", config.environment, config.host, config.port)
    uvicorn.run("credit_system.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
