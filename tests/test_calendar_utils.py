"""Tests for calendar tables."""

import pytest

from reporting import calendar_utils


class TestCalendarTables:
    """Tests for month and day labels."""

    def test_months(self) -> None:
        """Twelve English month names, January first."""
        months = calendar_utils.get_months()
        assert len(months) == 12
        assert months[0] == 'January'
        assert months[-1] == 'December'

    def test_get_months_returns_copy(self) -> None:
        """Callers cannot mutate the shared table."""
        calendar_utils.get_months().clear()
        assert len(calendar_utils.MONTH_NAMES) == 12

    def test_days(self) -> None:
        """31 zero-padded day labels."""
        days = calendar_utils.get_days_list()
        assert days[:3] == ['01', '02', '03']
        assert days[-1] == '31'
        assert len(days) == 31

    def test_month_number_for_label(self) -> None:
        """Labels map to calendar month by position."""
        assert calendar_utils.month_number_for_label('January') == 1
        assert calendar_utils.month_number_for_label('December') == 12

    def test_unknown_month_label(self) -> None:
        """Unknown labels raise ValueError."""
        with pytest.raises(ValueError):
            calendar_utils.month_number_for_label('Janeiro')

    def test_current_month_index(self, settings_tz) -> None:
        """current_month_index is zero-based."""
        assert calendar_utils.current_month_index() == calendar_utils.now().month - 1

    def test_now_uses_configured_timezone(self, settings_tz) -> None:
        """now() is aware, in DASHBOARD_TIME_ZONE."""
        assert calendar_utils.now().tzinfo.zone == 'America/Sao_Paulo'


@pytest.fixture
def settings_tz():
    from django.conf import settings

    previous = settings.DASHBOARD_TIME_ZONE
    settings.DASHBOARD_TIME_ZONE = 'America/Sao_Paulo'
    yield
    settings.DASHBOARD_TIME_ZONE = previous
