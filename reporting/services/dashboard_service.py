"""
Service para gerar dados do dashboard financeiro.

Localização: reporting/services/dashboard_service.py

Este service calcula os totais do overview e os dados dos gráficos
(formato Chart.js) a partir do documento de dashboard do usuário, e grava
novos lançamentos (receitas, recebíveis e despesas) nesse documento.

O documento é lido uma vez por consulta; filtros de data e somatórios são
feitos aqui, agrupando cada coleção de lançamentos por mês, dia ou categoria.
"""
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Sequence, Union

from core.exceptions import DashboardDataNotFound
from core.services.user_service import UserService
from reporting import calendar_utils
from reporting.filters import (
    DateFilter, DateRange, ExactDay, MonthYear, NoFilter,
    create_date_filter, create_date_range, to_naive_utc,
)
from reporting.models.dashboard_model import DashboardModel
from reporting.repositories.dashboard_repository import DashboardRepository

logger = logging.getLogger(__name__)

OverviewFilter = Union[None, Mapping[str, Any], NoFilter, ExactDay, MonthYear]
ChartsFilter = Union[None, Mapping[str, Any], DateRange]


def sum_by(entries: Iterable[Mapping[str, Any]],
           key: Callable[[Mapping[str, Any]], Hashable]) -> Dict[Hashable, float]:
    """Agrupa lançamentos por key(entry) somando os amounts."""
    totals = defaultdict(float)
    for entry in entries:
        totals[key(entry)] += entry.get('amount', 0)
    return totals


def dataset_for(labels: Sequence[Any], totals: Mapping[Hashable, float],
                label_key: Callable[[Any], Hashable] = lambda label: label) -> List[float]:
    """Valores na ordem dos rótulos; rótulos sem lançamentos valem 0."""
    return [totals.get(label_key(label), 0) for label in labels]


class DashboardService:
    """
    Service para o dashboard financeiro.

    Exemplo de uso:
        service = DashboardService()
        overview = service.get_overview(user_id='...', filter={'year': 2024, 'month': 3})
        charts = service.get_charts(user_id='...', filter={'startDate': '2024-01-01'})
        service.create_expense(user_id='...', expense={
            'amount': 120, 'date': '2024-03-10', 'category': 'Food'
        })
    """

    def __init__(self, dashboard_repo: DashboardRepository = None,
                 user_service: UserService = None):
        self.dashboard_repo = dashboard_repo or DashboardRepository()
        self.user_service = user_service or UserService()

    # ==================== CONSULTAS ====================

    @staticmethod
    def _overview_filter(filter: OverviewFilter) -> DateFilter:
        if filter is None:
            return NoFilter()
        if isinstance(filter, (NoFilter, ExactDay, MonthYear)):
            return filter
        return create_date_filter(
            filter.get('date'), filter.get('month'), filter.get('year')
        )

    @staticmethod
    def _charts_filter(filter: ChartsFilter) -> DateRange:
        if filter is None:
            return DateRange()
        if isinstance(filter, DateRange):
            return filter
        return create_date_range(filter.get('startDate'), filter.get('endDate'))

    @staticmethod
    def _entries(dashboard: Mapping[str, Any], field: str,
                 date_filter=None) -> List[Mapping[str, Any]]:
        entries = dashboard.get(field) or []
        if date_filter is None or getattr(date_filter, 'is_empty', False):
            return list(entries)
        return [e for e in entries if e.get('date') is not None and date_filter.matches(e['date'])]

    @staticmethod
    def _dated(entries) -> List[Mapping[str, Any]]:
        return [e for e in entries if e.get('date') is not None]

    def get_overview(self, user_id: str, filter: OverviewFilter = None) -> List[Dict[str, Any]]:
        """
        Totais do dashboard do usuário.

        Args:
            user_id: ID do usuário
            filter: Dict opcional com date (dia exato), year e month (1-12),
                ou um filtro já montado (NoFilter, ExactDay, MonthYear)

        Returns:
            Lista com uma linha:
            - totalRevenue: soma das receitas
            - totalReceivables: soma dos recebíveis
            - pendingReceivables: soma dos recebíveis com status 'Pending'
            - totalExpenses: soma das despesas
            Lista vazia se o usuário não tiver dashboard.

        Raises:
            ValueError: Se o filtro ou o user_id forem inválidos
        """
        date_filter = self._overview_filter(filter)
        dashboard = self.dashboard_repo.find_by_user(user_id)
        if not dashboard:
            logger.info(f"[DASHBOARD_SERVICE] Overview sem dashboard para user_id: {user_id}")
            return []

        revenues = self._entries(dashboard, DashboardModel.REVENUES, date_filter)
        receivables = self._entries(dashboard, DashboardModel.RECEIVABLES, date_filter)
        expenses = self._entries(dashboard, DashboardModel.EXPENSES, date_filter)

        by_status = sum_by(receivables, lambda e: e.get('status'))

        return [{
            '_id': dashboard.get('_id'),
            'totalRevenue': sum(e.get('amount', 0) for e in revenues),
            'totalReceivables': sum(e.get('amount', 0) for e in receivables),
            'pendingReceivables': by_status.get(DashboardModel.STATUS_PENDING, 0),
            'totalExpenses': sum(e.get('amount', 0) for e in expenses),
        }]

    def get_charts(self, user_id: str, filter: ChartsFilter = None) -> List[Dict[str, Any]]:
        """
        Dados dos três gráficos do dashboard.

        Args:
            user_id: ID do usuário
            filter: Dict opcional com startDate/endDate (limites inclusivos),
                aplicado a receitas e despesas, ou um DateRange

        Returns:
            Lista com uma linha contendo:
            - revenuesAndExpensesLineChart: meses do ano antes do mês atual
            - expensesDoughnut: despesas por categoria fixa
            - currentMonthExpensesAndRevenuesBarChart: somas por dia do mês (01-31)
            Lista vazia se o usuário não tiver dashboard.
        """
        date_range = self._charts_filter(filter)
        dashboard = self.dashboard_repo.find_by_user(user_id)
        if not dashboard:
            logger.info(f"[DASHBOARD_SERVICE] Gráficos sem dashboard para user_id: {user_id}")
            return []

        revenues = self._entries(dashboard, DashboardModel.REVENUES, date_range)
        expenses = self._entries(dashboard, DashboardModel.EXPENSES, date_range)

        current_month = calendar_utils.current_month_index()

        return [{
            '_id': dashboard.get('_id'),
            'revenuesAndExpensesLineChart': self._line_chart(revenues, expenses, current_month),
            'expensesDoughnut': self._doughnut_chart(expenses),
            'currentMonthExpensesAndRevenuesBarChart': self._bar_chart(
                revenues, expenses, current_month
            ),
        }]

    @staticmethod
    def _line_chart(revenues, expenses, current_month: int) -> Dict[str, Any]:
        # Rótulos: meses do início do ano até o mês atual (exclusive).
        # Cada rótulo casa com o mês do calendário pela sua posição na lista.
        labels = calendar_utils.get_months()[:current_month]

        def by_month(entries):
            return sum_by(DashboardService._dated(entries), lambda e: to_naive_utc(e['date']).month)

        month_of = calendar_utils.month_number_for_label
        return {
            'labels': labels,
            'revenueDataSet': dataset_for(labels, by_month(revenues), month_of),
            'expensesDataSet': dataset_for(labels, by_month(expenses), month_of),
        }

    @staticmethod
    def _doughnut_chart(expenses) -> Dict[str, Any]:
        labels = list(DashboardModel.EXPENSE_CATEGORIES)
        by_category = sum_by(expenses, lambda e: e.get('category'))
        return {
            'labels': labels,
            'datasets': dataset_for(labels, by_category),
        }

    @staticmethod
    def _bar_chart(revenues, expenses, current_month: int) -> Dict[str, Any]:
        # Agrupa apenas pelo dia do mês; o mês do lançamento não é considerado.
        # Lançamentos sem data ficam fora dos gráficos por mês e por dia.
        labels = calendar_utils.get_days_list()

        def by_day(entries):
            return sum_by(DashboardService._dated(entries), lambda e: to_naive_utc(e['date']).day)

        return {
            'currentMonth': current_month,
            'labels': labels,
            'revenueDataSet': dataset_for(labels, by_day(revenues), int),
            'expensesDataSet': dataset_for(labels, by_day(expenses), int),
        }

    # ==================== LANÇAMENTOS ====================

    def _add_entry(self, user_id: str, field: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        dashboard = self.dashboard_repo.add_entry(user_id, field, entry)
        if not dashboard:
            logger.warning(
                f"[DASHBOARD_SERVICE] Dashboard não encontrado ao gravar {field} "
                f"para user_id: {user_id}"
            )
            raise DashboardDataNotFound(user_id)
        logger.info(f"[DASHBOARD_SERVICE] Lançamento gravado em {field} para user_id: {user_id}")
        return dashboard

    def create_revenue(self, user_id: str, revenue: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Adiciona uma receita ao dashboard do usuário.

        Args:
            user_id: ID do usuário dono do dashboard
            revenue: Dict com amount, date e source (ID de um usuário existente)

        Returns:
            Dashboard atualizado

        Raises:
            ValueError: Se a receita for inválida
            UserNotFound: Se source não for um usuário existente (nada é gravado)
            DashboardDataNotFound: Se o usuário não tiver dashboard
        """
        entry = DashboardModel.create_revenue_data(revenue)
        self.user_service.get_user_by_id(entry['source'])
        return self._add_entry(user_id, DashboardModel.REVENUES, entry)

    def create_receivable(self, user_id: str, receivable: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Adiciona um recebível ao dashboard do usuário.

        Raises:
            ValueError: Se o recebível for inválido
            UserNotFound: Se client não for um usuário existente (nada é gravado)
            DashboardDataNotFound: Se o usuário não tiver dashboard
        """
        entry = DashboardModel.create_receivable_data(receivable)
        self.user_service.get_user_by_id(entry['client'])
        return self._add_entry(user_id, DashboardModel.RECEIVABLES, entry)

    def create_expense(self, user_id: str, expense: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Adiciona uma despesa ao dashboard do usuário.

        Raises:
            ValueError: Se a despesa for inválida
            DashboardDataNotFound: Se o usuário não tiver dashboard
        """
        entry = DashboardModel.create_expense_data(expense)
        return self._add_entry(user_id, DashboardModel.EXPENSES, entry)
