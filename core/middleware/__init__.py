"""
Middlewares do core.

Localização: core/middleware/

Middlewares para funcionalidades diversas.
"""
from .exception_logging_middleware import ExceptionLoggingMiddleware
from .mongo_auth_middleware import MongoAuthMiddleware

__all__ = ['ExceptionLoggingMiddleware', 'MongoAuthMiddleware']
