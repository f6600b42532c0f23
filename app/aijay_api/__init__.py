"""
aijay API library module
"""

from __future__ import annotations

from .logging import logger
from .ping import SERVICE_NAME, ping_response

__all__ = [
    "SERVICE_NAME",
    "logger",
    "ping_response",
]
