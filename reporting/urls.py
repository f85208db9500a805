"""
URLs do app reporting.

Localização: reporting/urls.py
"""
from django.urls import path
from . import views

app_name = 'reporting'

urlpatterns = [
    path('api/overview/', views.overview_api_view, name='overview-api'),
    path('api/charts/', views.charts_api_view, name='charts-api'),
    path('api/revenues/', views.create_revenue_api_view, name='create-revenue-api'),
    path('api/receivables/', views.create_receivable_api_view, name='create-receivable-api'),
    path('api/expenses/', views.create_expense_api_view, name='create-expense-api'),
]
