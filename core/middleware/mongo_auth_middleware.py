"""
Middleware de autenticação via MongoDB.

Localização: core/middleware/mongo_auth_middleware.py

Injeta o usuário da sessão no request como request.user_mongo. O login é
feito por outro serviço, que grava 'user_id' na sessão compartilhada.
"""
import logging

from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class MongoAuthMiddleware:
    """
    Middleware de autenticação via MongoDB.

    request.user_mongo fica None quando não há sessão ou o usuário não
    existe mais; nesse caso 'user_id' é removido da sessão.
    """

    def __init__(self, get_response, user_repo: UserRepository = None):
        self.get_response = get_response
        self.user_repo = user_repo or UserRepository()

    def __call__(self, request):
        request.user_mongo = None

        user_id = request.session.get('user_id')
        if user_id:
            user = self.user_repo.find_by_id(user_id)
            if user:
                request.user_mongo = user
            else:
                logger.info(f"[AUTH] Sessão com usuário inexistente: {user_id}")
                del request.session['user_id']

        return self.get_response(request)
