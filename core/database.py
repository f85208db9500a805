"""
Conexão com o MongoDB.

Localização: core/database.py

Um único MongoClient por processo, criado sob demanda a partir das
configurações do Django (MONGO_URI / MONGO_DB_NAME).
"""
import logging
from typing import Optional

from django.conf import settings
from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    """Retorna o MongoClient do processo, criando na primeira chamada."""
    global _client
    if _client is None:
        logger.info("[DATABASE] Conectando ao MongoDB")
        _client = MongoClient(
            settings.MONGO_URI,
            serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
            tz_aware=False,
        )
    return _client


def get_database() -> Database:
    """
    Retorna o database configurado.

    Returns:
        pymongo.database.Database
    """
    return get_client()[settings.MONGO_DB_NAME]

