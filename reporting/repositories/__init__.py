"""
Repositories do app reporting.

Localização: reporting/repositories/
"""
from .dashboard_repository import DashboardRepository

__all__ = ['DashboardRepository']
