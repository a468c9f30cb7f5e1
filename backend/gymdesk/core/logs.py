from __future__ import annotations

import logging
import time

from fastapi import Request

from gymdesk.core.config import settings

access_log = logging.getLogger("gymdesk.http")


def setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def log_api_requests(request: Request, call_next):
    """One line per /api request: METHOD path status in Nms."""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration_ms = int((time.perf_counter() - start) * 1000)
        access_log.info("%s %s %s in %sms", request.method, path, response.status_code, duration_ms)
    return response
