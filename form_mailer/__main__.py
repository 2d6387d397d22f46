"""Run the form mailer with uvicorn."""

import logging

import uvicorn

from form_mailer.core.config import get_settings
from form_mailer.core.logging import setup_logging


def main() -> None:
    config = get_settings()
    setup_logging(config.LOG_LEVEL)
    logging.getLogger(__name__).info(
        "Career mailer listening on http://localhost:%s", config.PORT
    )
    uvicorn.run("form_mailer.main:app", host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
