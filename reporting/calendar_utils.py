"""
Tabelas de calendário usadas nos gráficos do dashboard.

Localização: reporting/calendar_utils.py

MONTH_NAMES e DAY_LABELS são montadas uma vez na importação e nunca são
alteradas; as funções get_* devolvem cópias.
"""
from datetime import datetime
from typing import List

import pytz
from django.conf import settings

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)

# Lista genérica de dias, independente da quantidade de dias do mês
DAY_LABELS = tuple(f"{day:02d}" for day in range(1, 32))


def get_months() -> List[str]:
    return list(MONTH_NAMES)


def get_days_list() -> List[str]:
    return list(DAY_LABELS)


def month_number_for_label(label: str) -> int:
    """
    Número do mês (1-12) de um rótulo, pela posição em MONTH_NAMES.

    Raises:
        ValueError: Se o rótulo não for um nome de mês conhecido
    """
    return MONTH_NAMES.index(label) + 1


def get_timezone():
    return pytz.timezone(getattr(settings, 'DASHBOARD_TIME_ZONE', 'UTC'))


def now() -> datetime:
    """Data/hora atual no fuso do dashboard."""
    return datetime.now(get_timezone())


def current_month_index() -> int:
    """Mês atual com índice 0 (janeiro = 0)."""
    return now().month - 1
