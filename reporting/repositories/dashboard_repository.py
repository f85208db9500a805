"""
Repository para os dashboards financeiros.

Localização: reporting/repositories/dashboard_repository.py

Encapsula as operações com a collection 'dashboards' (um documento por
usuário, ver reporting/models/dashboard_model.py).
"""
from typing import Optional, Dict, Any

from pymongo import ReturnDocument

from core.repositories.base_repository import BaseRepository, to_object_id
from reporting.models.dashboard_model import DashboardModel


class DashboardRepository(BaseRepository):
    """
    Repository para gerenciar dashboards no MongoDB.

    Exemplo de uso:
        repo = DashboardRepository()
        dashboard = repo.add_entry(user_id, 'expenses', {
            'amount': 45.5,
            'date': datetime(2024, 3, 10),
            'category': 'Food'
        })
    """

    def __init__(self, db=None):
        super().__init__('dashboards', db=db)

    def _ensure_indexes(self):
        """
        Índices:
        - user (único): um dashboard por usuário
        """
        self.collection.create_index('user', unique=True)

    def find_by_user(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca o dashboard de um usuário.

        Returns:
            Documento do dashboard ou None
        """
        return self.collection.find_one({'user': to_object_id(user_id)})

    def create_for_user(self, user_id: Any) -> Dict[str, Any]:
        """Cria um dashboard vazio para o usuário."""
        return self.create(DashboardModel.create_dashboard_data(user_id))

    def add_entry(self, user_id: Any, field: str,
                  entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Adiciona um lançamento ao dashboard do usuário ($addToSet).

        Lançamentos com valor idêntico a um já existente não são duplicados.

        Args:
            user_id: ID do usuário dono do dashboard
            field: 'revenues', 'receivables' ou 'expenses'
            entry: Lançamento já normalizado pelo DashboardModel

        Returns:
            Documento atualizado ou None se o usuário não tiver dashboard

        Raises:
            ValueError: Se field não for uma coleção de lançamentos
        """
        if field not in DashboardModel.ENTRY_FIELDS:
            raise ValueError(f"Coleção de lançamentos inválida: {field!r}")

        return self.collection.find_one_and_update(
            {'user': to_object_id(user_id)},
            {'$addToSet': {field: entry}},
            return_document=ReturnDocument.AFTER,
        )
