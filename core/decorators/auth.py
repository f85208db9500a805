from functools import wraps

from django.http import JsonResponse

from core.exceptions import Errors, ApiError


def login_required_mongo(view_func):
    """
    Decorator que exige autenticação via sessão MongoDB.

    Todas as rotas do projeto são API (JSON): sem usuário autenticado
    retorna JSON com erro 401.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        user_mongo = getattr(request, 'user_mongo', None)

        if not user_mongo:
            error = ApiError(Errors.Unauthenticated)
            return JsonResponse(error.to_dict(), status=error.status_code)

        return view_func(request, *args, **kwargs)
    return wrapper
