"""
Modelo do dashboard financeiro.

Localização: reporting/models/dashboard_model.py

Schema no MongoDB (collection 'dashboards', um documento por usuário):
{
  _id: ObjectId,
  user: ObjectId,                 # único, dono do dashboard
  revenues: [
    { amount: Number, date: ISODate, source: ObjectId }             # source -> users._id
  ],
  receivables: [
    { amount: Number, date: ISODate, status: String, client: ObjectId }  # client -> users._id
  ],
  expenses: [
    { amount: Number, date: ISODate, category: String }
  ]
}

Os lançamentos são gravados com $addToSet, então a ordem das chaves de cada
lançamento precisa ser sempre a mesma para que valores iguais não sejam
duplicados. Os métodos create_*_data garantem isso.
"""
import math
from typing import Any, Dict, Mapping
from numbers import Number

from core.repositories.base_repository import to_object_id
from reporting.filters import to_naive_utc


class DashboardModel:
    """
    Modelo de dados do dashboard e de seus lançamentos.
    """

    REVENUES = 'revenues'
    RECEIVABLES = 'receivables'
    EXPENSES = 'expenses'

    ENTRY_FIELDS = (REVENUES, RECEIVABLES, EXPENSES)

    # Categorias fixas de despesas (rótulos do gráfico de rosca)
    EXPENSE_CATEGORIES = (
        'Transfer between cards',
        'Cash withdrawn',
        'Food',
        'Taxes',
        'Rent',
    )

    STATUS_PENDING = 'Pending'
    STATUS_PAID = 'Paid'
    STATUS_OVERDUE = 'Overdue'

    RECEIVABLE_STATUSES = (STATUS_PENDING, STATUS_PAID, STATUS_OVERDUE)

    @staticmethod
    def create_dashboard_data(user_id: Any) -> Dict[str, Any]:
        """Documento vazio de dashboard para um usuário."""
        return {
            'user': to_object_id(user_id),
            DashboardModel.REVENUES: [],
            DashboardModel.RECEIVABLES: [],
            DashboardModel.EXPENSES: [],
        }

    @staticmethod
    def _require(data: Mapping[str, Any], *fields: str):
        missing = [f for f in fields if data.get(f) in (None, '')]
        if missing:
            raise ValueError(f"Campos obrigatórios: {', '.join(missing)}")

    @staticmethod
    def _amount(value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError("amount deve ser numérico")
        try:
            amount = float(value) if isinstance(value, Number) else float(str(value).strip())
        except (TypeError, ValueError) as e:
            raise ValueError(f"amount deve ser numérico: {value!r}") from e
        # NaN e infinito contaminariam todos os totais
        if not math.isfinite(amount):
            raise ValueError(f"amount deve ser finito: {value!r}")
        return amount

    @staticmethod
    def create_revenue_data(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Normaliza uma receita.

        Args:
            data: Dict com amount, date e source (ID do usuário de origem)

        Returns:
            Dict {amount, date, source}

        Raises:
            ValueError: Se algum campo estiver ausente ou inválido
        """
        DashboardModel._require(data, 'amount', 'date', 'source')
        return {
            'amount': DashboardModel._amount(data['amount']),
            'date': to_naive_utc(data['date']),
            'source': to_object_id(data['source']),
        }

    @staticmethod
    def create_receivable_data(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Normaliza um recebível.

        Args:
            data: Dict com amount, date, status e client (ID do usuário cliente)

        Returns:
            Dict {amount, date, status, client}

        Raises:
            ValueError: Se algum campo estiver ausente ou o status for desconhecido
        """
        DashboardModel._require(data, 'amount', 'date', 'status', 'client')
        status = str(data['status']).strip()
        if status not in DashboardModel.RECEIVABLE_STATUSES:
            raise ValueError(
                f"status inválido: {status!r} "
                f"(esperado um de {', '.join(DashboardModel.RECEIVABLE_STATUSES)})"
            )
        return {
            'amount': DashboardModel._amount(data['amount']),
            'date': to_naive_utc(data['date']),
            'status': status,
            'client': to_object_id(data['client']),
        }

    @staticmethod
    def create_expense_data(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Normaliza uma despesa.

        A categoria não é validada contra EXPENSE_CATEGORIES: categorias fora
        da lista são gravadas e apenas não aparecem no gráfico de rosca.
        """
        DashboardModel._require(data, 'amount', 'date', 'category')
        return {
            'amount': DashboardModel._amount(data['amount']),
            'date': to_naive_utc(data['date']),
            'category': str(data['category']).strip(),
        }
