"""
Lambda function answering the HTTP API requests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aijay_api import logger, ping_response

if TYPE_CHECKING:
    from aws_lambda_powertools.utilities.typing import LambdaContext


@logger.inject_lambda_context
def _handle(_event: Any, _context: LambdaContext) -> dict[str, Any]:
    logger.info("Received request")
    return ping_response()


def handler(event: Any, context: LambdaContext | None) -> dict[str, Any]:
    """Placeholder entry point, answers every request with the health check."""
    if context is None:
        # Nothing to inject outside the Lambda runtime
        logger.info("Received request without Lambda context")
        return ping_response()
    return _handle(event, context)
