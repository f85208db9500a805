"""
Services do app reporting.

Localização: reporting/services/

Services contêm a lógica de negócio: orquestram repositories, aplicam
regras e transformam dados entre camadas. Não acessam o MongoDB
diretamente, apenas via repositories.
"""
from .dashboard_service import DashboardService

__all__ = ['DashboardService']
