"""Configuração do Django e dublês compartilhados pelos testes."""

import copy
from datetime import datetime

import django
import pytest
from bson import ObjectId
from django.conf import settings


def pytest_configure() -> None:
    if not settings.configured:
        settings.configure(
            SECRET_KEY='test-secret-key',
            DEBUG=False,
            ALLOWED_HOSTS=['testserver'],
            INSTALLED_APPS=['django.contrib.sessions', 'core', 'reporting'],
            ROOT_URLCONF='reporting_site.urls',
            DATABASES={},
            USE_TZ=True,
            MONGO_URI='mongodb://localhost:27017',
            MONGO_DB_NAME='painel_financeiro_test',
            MONGO_TIMEOUT_MS=100,
            DASHBOARD_TIME_ZONE='UTC',
        )
        django.setup()


class FakeDashboardRepository:
    """DashboardRepository em memória; add_entry reproduz o $addToSet."""

    def __init__(self, dashboards=None):
        self.dashboards = {d['user']: d for d in (dashboards or [])}
        self.add_entry_calls = []

    def find_by_user(self, user_id):
        dashboard = self.dashboards.get(ObjectId(user_id))
        return copy.deepcopy(dashboard) if dashboard else None

    def add_entry(self, user_id, field, entry):
        self.add_entry_calls.append((user_id, field, entry))
        dashboard = self.dashboards.get(ObjectId(user_id))
        if dashboard is None:
            return None
        if entry not in dashboard[field]:
            dashboard[field].append(entry)
        return copy.deepcopy(dashboard)


class FakeUserService:
    def __init__(self, user_ids=()):
        self.user_ids = {ObjectId(u) for u in user_ids}

    def get_user_by_id(self, user_id):
        from core.exceptions import UserNotFound

        if ObjectId(user_id) not in self.user_ids:
            raise UserNotFound(user_id)
        return {'_id': ObjectId(user_id), 'id': str(user_id)}


@pytest.fixture
def user_id() -> ObjectId:
    return ObjectId()


@pytest.fixture
def other_user_id() -> ObjectId:
    return ObjectId()


@pytest.fixture
def dashboard(user_id, other_user_id) -> dict:
    return {
        '_id': ObjectId(),
        'user': user_id,
        'revenues': [
            {'amount': 100.0, 'date': datetime(2024, 1, 5), 'source': other_user_id},
            {'amount': 200.0, 'date': datetime(2024, 3, 10), 'source': other_user_id},
        ],
        'receivables': [
            {'amount': 50.0, 'date': datetime(2024, 1, 5), 'status': 'Pending', 'client': other_user_id},
            {'amount': 70.0, 'date': datetime(2024, 3, 10), 'status': 'Paid', 'client': other_user_id},
            {'amount': 30.0, 'date': datetime(2024, 3, 11), 'status': 'Pending', 'client': other_user_id},
        ],
        'expenses': [
            {'amount': 40.0, 'date': datetime(2024, 1, 5), 'category': 'Food'},
            {'amount': 500.0, 'date': datetime(2024, 3, 1), 'category': 'Rent'},
            {'amount': 12.5, 'date': datetime(2023, 3, 10), 'category': 'Food'},
        ],
    }


@pytest.fixture
def dashboard_repo(dashboard) -> FakeDashboardRepository:
    return FakeDashboardRepository([dashboard])


@pytest.fixture
def user_service(other_user_id) -> FakeUserService:
    return FakeUserService([other_user_id])


@pytest.fixture
def empty_dashboard_repo(user_id) -> FakeDashboardRepository:
    return FakeDashboardRepository([{
        '_id': ObjectId(),
        'user': user_id,
        'revenues': [],
        'receivables': [],
        'expenses': [],
    }])
