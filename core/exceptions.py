"""
Erros de API.

Localização: core/exceptions.py

Cada erro conhecido da aplicação tem status HTTP, código e mensagem
definidos no catálogo Errors. As views convertem ApiError em JsonResponse
usando status_code e to_dict().
"""
from typing import Any, Dict, Optional, Tuple


class Errors:
    """Catálogo de erros: (status_code, code, message)."""

    UserNotFound: Tuple[int, str, str] = (
        404, 'USER_NOT_FOUND', 'Usuário não encontrado'
    )
    DashboardDataNotFound: Tuple[int, str, str] = (
        404, 'DASHBOARD_DATA_NOT_FOUND', 'Dados do dashboard não encontrados'
    )
    InvalidPayload: Tuple[int, str, str] = (
        400, 'INVALID_PAYLOAD', 'Dados inválidos'
    )
    Unauthenticated: Tuple[int, str, str] = (
        401, 'UNAUTHENTICATED', 'É necessário fazer login para acessar este recurso'
    )


class ApiError(Exception):
    """
    Erro de negócio com status HTTP associado.

    Exemplo de uso:
        raise ApiError(Errors.DashboardDataNotFound)
    """

    def __init__(self, error: Tuple[int, str, str], message: Optional[str] = None):
        self.status_code, self.code, default_message = error
        self.message = message or default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {'error': self.code, 'message': self.message}


class UserNotFound(ApiError):
    """Referência a usuário inexistente (source de receita, client de recebível)."""

    def __init__(self, user_id: Any = None):
        message = None
        if user_id is not None:
            message = f"Usuário não encontrado: {user_id}"
        super().__init__(Errors.UserNotFound, message)
        self.user_id = user_id


class DashboardDataNotFound(ApiError):
    """Nenhum dashboard encontrado para o usuário."""

    def __init__(self, user_id: Any = None):
        super().__init__(Errors.DashboardDataNotFound)
        self.user_id = user_id
