"""
Service de usuários.

Localização: core/services/user_service.py

Usado pelo dashboard para validar referências a usuários (source de uma
receita, client de um recebível) antes de gravar o lançamento.
"""
import logging
from typing import Any, Dict

from core.exceptions import UserNotFound
from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Exemplo de uso:
        service = UserService()
        user = service.get_user_by_id('...')  # UserNotFound se não existir
    """

    def __init__(self, user_repo: UserRepository = None):
        self.user_repo = user_repo or UserRepository()

    def get_user_by_id(self, user_id: Any) -> Dict[str, Any]:
        """
        Busca usuário por ID.

        Raises:
            UserNotFound: Se o usuário não existir ou o ID for inválido
        """
        user = self.user_repo.find_by_id(user_id)
        if not user:
            logger.info(f"[USER_SERVICE] Usuário não encontrado: {user_id}")
            raise UserNotFound(user_id)
        user['id'] = str(user['_id'])
        return user
