from .catchall import CatchAllExceptionMiddleware
from .handlers import message_response, register_error_handlers

__all__ = ["CatchAllExceptionMiddleware", "message_response", "register_error_handlers"]
