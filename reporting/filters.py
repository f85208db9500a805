"""
Filtros de data do dashboard.

Localização: reporting/filters.py

Tipos explícitos para os filtros opcionais das consultas:

- NoFilter: sem restrição de data
- ExactDay: lançamentos de um dia específico
- MonthYear: lançamentos de um mês (1-12) de um ano, ou do ano inteiro
- DateRange: intervalo fechado [start, end], com limites opcionais (gráficos)

Todos expõem matches(data), usado para filtrar os lançamentos do documento,
e to_query(campo), o predicado equivalente para consultas no MongoDB.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

import pytz
from dateutil import parser as date_parser

DateLike = Union[datetime, date, str]


def to_naive_utc(value: DateLike) -> datetime:
    """
    Normaliza datas para datetime naive em UTC (formato gravado no MongoDB).

    Raises:
        ValueError: Se o valor não puder ser interpretado como data
    """
    if isinstance(value, str):
        try:
            value = date_parser.isoparse(value)
        except ValueError:
            value = date_parser.parse(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(pytz.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise ValueError(f"Data inválida: {value!r}")


def _month_bounds(year: int, month: int):
    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 1, 1)
    return start, end


@dataclass(frozen=True)
class NoFilter:

    is_empty = True

    def matches(self, value: datetime) -> bool:
        return True

    def to_query(self, field: str) -> dict:
        return {}


@dataclass(frozen=True)
class ExactDay:
    day: date

    @property
    def bounds(self):
        start = datetime(self.day.year, self.day.month, self.day.day)
        return start, start + timedelta(days=1)

    def matches(self, value: datetime) -> bool:
        start, end = self.bounds
        return start <= to_naive_utc(value) < end

    def to_query(self, field: str) -> dict:
        start, end = self.bounds
        return {field: {'$gte': start, '$lt': end}}


@dataclass(frozen=True)
class MonthYear:
    year: int
    month: Optional[int] = None

    def __post_init__(self):
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"Mês inválido: {self.month} (esperado 1-12)")

    @property
    def bounds(self):
        if self.month is None:
            return datetime(self.year, 1, 1), datetime(self.year + 1, 1, 1)
        return _month_bounds(self.year, self.month)

    def matches(self, value: datetime) -> bool:
        start, end = self.bounds
        return start <= to_naive_utc(value) < end

    def to_query(self, field: str) -> dict:
        start, end = self.bounds
        return {field: {'$gte': start, '$lt': end}}


@dataclass(frozen=True)
class DateRange:
    """Intervalo fechado nos dois limites; qualquer limite pode faltar."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self):
        # Limites com fuso são comparados com as datas naive gravadas
        for name in ('start', 'end'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_naive_utc(value))

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    def matches(self, value: datetime) -> bool:
        value = to_naive_utc(value)
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True

    def to_query(self, field: str) -> dict:
        bounds = {}
        if self.start is not None:
            bounds['$gte'] = self.start
        if self.end is not None:
            bounds['$lte'] = self.end
        return {field: bounds} if bounds else {}


DateFilter = Union[NoFilter, ExactDay, MonthYear]


def create_date_filter(date: Optional[DateLike] = None,
                       month: Optional[Any] = None,
                       year: Optional[Any] = None) -> DateFilter:
    """
    Monta o filtro do overview.

    Prioridade: date (dia exato) > year (+ month opcional) > sem filtro.
    month sem year é ignorado.

    Raises:
        ValueError: Se data, mês ou ano forem inválidos
    """
    if date not in (None, ''):
        return ExactDay(to_naive_utc(date).date())

    if year not in (None, ''):
        month_value = int(month) if month not in (None, '') else None
        return MonthYear(year=int(year), month=month_value)

    return NoFilter()


def create_date_range(start_date: Optional[DateLike] = None,
                      end_date: Optional[DateLike] = None) -> DateRange:
    """Monta o intervalo dos gráficos a partir de startDate/endDate opcionais."""
    start = to_naive_utc(start_date) if start_date not in (None, '') else None
    end = to_naive_utc(end_date) if end_date not in (None, '') else None
    return DateRange(start=start, end=end)
