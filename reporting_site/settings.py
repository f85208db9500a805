"""
Configurações do projeto.

Localização: reporting_site/settings.py

Valores sensíveis e de ambiente vêm de variáveis de ambiente (.env
carregado via python-dotenv).
"""
import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-only-secret-key')

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.sessions',
    'core',
    'reporting',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'core.middleware.MongoAuthMiddleware',
    'core.middleware.ExceptionLoggingMiddleware',
]

ROOT_URLCONF = 'reporting_site.urls'

WSGI_APPLICATION = 'reporting_site.wsgi.application'

# Sessões assinadas em cookie: o projeto não usa banco relacional
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'

DATABASES = {}

# MongoDB
MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017')
MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'painel_financeiro')
MONGO_TIMEOUT_MS = int(os.getenv('MONGO_TIMEOUT_MS', '5000'))

# Fuso usado para determinar o "mês atual" dos gráficos
DASHBOARD_TIME_ZONE = os.getenv('DASHBOARD_TIME_ZONE', 'UTC')

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'UTC'
USE_TZ = True

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'pymongo': {
            'level': 'WARNING',
        },
    },
}
