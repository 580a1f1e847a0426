from starlette.middleware.base import BaseHTTPMiddleware
import logging

from .handlers import message_response

logger = logging.getLogger(__name__)


class CatchAllExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"{type(exc).__name__} on {request.url.path} (500): {exc}", exc_info=True)
            return message_response(str(exc) or type(exc).__name__)
