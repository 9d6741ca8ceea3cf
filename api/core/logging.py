from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # uvicorn's access log duplicates the request middleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
