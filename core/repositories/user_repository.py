"""
Repository para operações de usuário no MongoDB.

Localização: core/repositories/user_repository.py

Somente leitura: o cadastro de usuários é feito por outro serviço. Aqui
apenas resolvemos usuários referenciados pelos lançamentos do dashboard.
"""
from typing import Optional, Dict, Any

from core.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository):
    """
    Repository para consultar usuários no MongoDB.

    Exemplo de uso:
        repo = UserRepository()
        user = repo.find_by_id('64b7f0c2e1a4c3b2a1d0e9f8')
    """

    def __init__(self, db=None):
        super().__init__('users', db=db)

    def find_by_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca usuário por ID.

        Args:
            user_id: ID do usuário (ObjectId ou string)

        Returns:
            Dict com dados do usuário ou None (sem password_hash)
        """
        user = super().find_by_id(user_id)
        if user:
            user.pop('password_hash', None)
        return user
