from __future__ import annotations

import logging
import sys
from typing import Optional

from cart_offer.settings import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# httpx and httpcore log every segment lookup request at INFO
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: Optional[str] = None) -> None:
    log_level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stdout)

    client_level = logging.DEBUG if log_level == "DEBUG" else logging.WARNING
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
