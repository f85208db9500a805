"""
WSGI config do projeto.

Expõe o callable ``application`` usado pelo servidor WSGI.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'reporting_site.settings')

application = get_wsgi_application()
