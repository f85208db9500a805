"""
Middleware para capturar e logar exceções não tratadas.

Localização: core/middleware/exception_logging_middleware.py

ApiError vira resposta JSON com o status do erro. Demais exceções são
logadas com stacktrace resumido e seguem para o tratamento padrão do Django.
"""
import logging
import traceback

from django.http import JsonResponse

from core.exceptions import ApiError

logger = logging.getLogger(__name__)


class ExceptionLoggingMiddleware:
    """
    Middleware para capturar exceções não tratadas e logá-las.

    Deve ser adicionado após outros middlewares para capturar exceções.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        """
        Processa exceções não tratadas.

        Returns:
            JsonResponse para ApiError, None para o resto
        """
        if isinstance(exception, ApiError):
            return JsonResponse(exception.to_dict(), status=exception.status_code)

        user_id = None
        if getattr(request, 'user_mongo', None):
            user_id = str(request.user_mongo['_id'])

        error_trace = traceback.format_exception(
            type(exception),
            exception,
            exception.__traceback__
        )
        error_str = ''.join(error_trace[-5:])  # Últimas 5 linhas
        if len(error_str) > 1000:
            error_str = error_str[:997] + '...'

        logger.error(
            f"[UNHANDLED] {request.method} {request.path} user_id={user_id} "
            f"{type(exception).__name__}: {exception}\n{error_str}"
        )

        # Deixa o Django tratar a exceção normalmente
        return None
