from __future__ import annotations

from cart_offer.app.server import create_app
from cart_offer.observability.logging import configure_logging

configure_logging()

app = create_app()
