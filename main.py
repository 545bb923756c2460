from __future__ import annotations

import logging
import sys

import uvicorn

from task_api.config import ConfigError, load_config_from_env
from task_api.logging_setup import setup_logging
from task_api.presentation.http.app import create_app

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging()

    try:
        config = load_config_from_env()
    except ConfigError as exc:
        logger.error("invalid configuration: %s", exc)
        return 1

    app = create_app(config)

    logger.info(
        "listening for requests at http://%s:%d (storage=%s)",
        config.server.host,
        config.server.port,
        config.storage,
    )
    # log_config=None: keep the handlers installed by setup_logging
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
        lifespan="on",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
