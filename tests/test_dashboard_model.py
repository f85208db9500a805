"""Tests for DashboardModel entry builders."""

from datetime import datetime

import pytest
from bson import ObjectId

from reporting.models.dashboard_model import DashboardModel


class TestCreateEntries:
    """Tests for create_*_data."""

    def test_revenue_fields_and_order(self) -> None:
        """Revenue is normalized with a fixed key order."""
        source = ObjectId()
        entry = DashboardModel.create_revenue_data({
            'source': str(source), 'date': '2024-01-05', 'amount': 100,
        })
        assert list(entry) == ['amount', 'date', 'source']
        assert entry == {'amount': 100.0, 'date': datetime(2024, 1, 5), 'source': source}

    def test_equal_inputs_build_equal_entries(self) -> None:
        """Same values in any key order build identical entries."""
        first = DashboardModel.create_expense_data(
            {'amount': 30, 'date': '2024-03-10', 'category': 'Food'}
        )
        second = DashboardModel.create_expense_data(
            {'category': 'Food ', 'date': datetime(2024, 3, 10), 'amount': '30'}
        )
        assert first == second
        assert list(first) == list(second)

    def test_receivable_status_must_be_known(self) -> None:
        """Receivable status is checked against the known statuses."""
        with pytest.raises(ValueError):
            DashboardModel.create_receivable_data({
                'amount': 1, 'date': '2024-01-01', 'status': 'pending', 'client': str(ObjectId()),
            })

    def test_receivable(self) -> None:
        """Receivable keeps status and client."""
        client = ObjectId()
        entry = DashboardModel.create_receivable_data({
            'amount': 50, 'date': '2024-01-01', 'status': 'Pending', 'client': client,
        })
        assert entry['status'] == 'Pending'
        assert entry['client'] == client

    def test_expense_category_not_whitelisted(self) -> None:
        """Any category is accepted."""
        entry = DashboardModel.create_expense_data(
            {'amount': 5, 'date': '2024-01-01', 'category': 'Pets'}
        )
        assert entry['category'] == 'Pets'

    @pytest.mark.parametrize('amount', ['abc', True, None, 'nan', 'inf', float('-inf')])
    def test_invalid_amount(self, amount) -> None:
        """Non numeric or non finite amounts are rejected."""
        with pytest.raises(ValueError):
            DashboardModel.create_expense_data(
                {'amount': amount, 'date': '2024-01-01', 'category': 'Food'}
            )

    def test_missing_fields(self) -> None:
        """Missing required fields are reported."""
        with pytest.raises(ValueError, match='source'):
            DashboardModel.create_revenue_data({'amount': 1, 'date': '2024-01-01'})

    def test_invalid_reference_id(self) -> None:
        """Reference ids must be valid ObjectIds."""
        with pytest.raises(ValueError):
            DashboardModel.create_revenue_data(
                {'amount': 1, 'date': '2024-01-01', 'source': 'not-an-id'}
            )


class TestCreateDashboardData:
    """Tests for create_dashboard_data."""

    def test_empty_dashboard(self) -> None:
        """A new dashboard has empty entry collections."""
        user_id = ObjectId()
        data = DashboardModel.create_dashboard_data(str(user_id))
        assert data == {'user': user_id, 'revenues': [], 'receivables': [], 'expenses': []}
