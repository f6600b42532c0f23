"""
Health check payload of the API.
"""

from __future__ import annotations

import json
import time
from typing import Any

SERVICE_NAME = "AIJay API"


def ping_response() -> dict[str, Any]:
    """Build the static health check response, stamped with the current epoch in milliseconds."""
    return {
        "statusCode": 200,
        "headers": {"content-type": "application/json"},
        "body": json.dumps(
            {"ok": True, "service": SERVICE_NAME, "ts": int(time.time() * 1000)},
            separators=(",", ":"),
        ),
    }
