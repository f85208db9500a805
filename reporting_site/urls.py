"""
URL configuration do projeto.

Estrutura de URLs:
- /reporting/ - Dashboard financeiro (API JSON)
"""
from django.urls import path, include

urlpatterns = [
    path('reporting/', include('reporting.urls')),
]
