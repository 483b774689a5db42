"""Run the sort API with uvicorn: ``python -m server``."""

import uvicorn

from mdlistsort.utils.logging_config import configure_logging, get_logger
from server.server_config import MAX_TEXT_SIZE, SERVER_HOST, SERVER_PORT, SERVER_RELOAD

logger = get_logger(__name__)


def run() -> None:
    configure_logging()
    logger.info(
        "Serving mdlistsort sort API",
        extra={"host": SERVER_HOST, "port": SERVER_PORT, "max_text_size": MAX_TEXT_SIZE},
    )
    # log_config=None keeps uvicorn on the logging configured above
    uvicorn.run("server.main:app", host=SERVER_HOST, port=SERVER_PORT, reload=SERVER_RELOAD, log_config=None)


if __name__ == "__main__":
    run()
