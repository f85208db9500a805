"""
Services do core.

Localização: core/services/

Services contêm a lógica de negócio relacionada a funcionalidades base,
como usuários.
"""
from .user_service import UserService

__all__ = ['UserService']
