"""
Decorators do core.

Localização: core/decorators/

Decorators para autenticação.
"""
from .auth import login_required_mongo

__all__ = ['login_required_mongo']
