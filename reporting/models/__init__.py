from .dashboard_model import DashboardModel

__all__ = ['DashboardModel']
