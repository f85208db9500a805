"""
Repositories do core.

Localização: core/repositories/

Repositories são a camada de acesso a dados (Data Access Layer).
Eles encapsulam todas as operações com MongoDB, isolando a lógica de acesso
a dados do resto da aplicação.
"""
from .base_repository import BaseRepository
from .user_repository import UserRepository

__all__ = ['BaseRepository', 'UserRepository']
