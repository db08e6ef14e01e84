# core/telemetry.py
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger("sellerqa.telemetry")


def log_api_event(event_name: str, endpoint: str, status: int, **fields: Any) -> None:
    """
    One INFO line per seller API answer, e.g.

        api_event product_detail /itemservice/api/beehive-items/7 status=404 deleted=True product_id=7

    `fields` are sorted so lines from repeated runs diff cleanly. Request bodies
    go through `seller_api.api_utils.log_api_call`; nothing secret belongs here.
    """
    details = " ".join(f"{key}={fields[key]}" for key in sorted(fields))
    logger.info("api_event %s %s status=%s%s", event_name, endpoint, status, f" {details}" if details else "")
