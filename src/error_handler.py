"""Error taxonomy and handling helpers for the contract gateway."""
from typing import Any, Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    status_code = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.context = context or {}


class InvalidRequestError(GatewayError):
    """Caller error, raised before any upstream call is made."""

    status_code = 400


class NotFoundError(GatewayError):
    """The upstream answered but had no data for the identifier."""

    status_code = 404


class UpstreamError(GatewayError):
    """Upstream unreachable, timed out, or answered with a non-success status."""

    status_code = 500


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Tuple[int, Dict[str, Any]]:
        context = {**(getattr(exc, "context", None) or {}), **(context or {})}
        if isinstance(exc, GatewayError):
            log = logger.warning if exc.status_code < 500 else logger.error
            log("%s (status=%s): %s context=%s", type(exc).__name__, exc.status_code, exc.message, context)
            return exc.status_code, {"error": exc.message}

        logger.error("Unhandled exception in contract gateway: %s context=%s", exc, context, exc_info=True)
        return 500, {"error": "An internal error occurred while processing your request. Please try again later."}
