"""
Repository base para MongoDB.

Localização: core/repositories/base_repository.py

Repository base estendido pelos demais repositories para compartilhar
o acesso à collection e as operações comuns de leitura/escrita.
"""
from typing import Optional, Dict, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database

from core.database import get_database


def to_object_id(value: Any) -> ObjectId:
    """
    Converte string/ObjectId em ObjectId.

    Raises:
        ValueError: Se o valor não for um ObjectId válido
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) geraria um ID novo
    if value is None:
        raise ValueError("ID inválido: None")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValueError(f"ID inválido: {value!r}") from e


class BaseRepository:
    """
    Repository base com operações comuns.

    Os índices de cada collection são criados uma única vez por processo,
    na primeira instância do repository.

    Exemplo de uso:
        class UserRepository(BaseRepository):
            def __init__(self, db=None):
                super().__init__('users', db=db)
    """

    _indexed = set()

    def __init__(self, collection_name: str, db: Optional[Database] = None):
        """
        Inicializa o repository.

        Args:
            collection_name: Nome da collection no MongoDB
            db: Database a usar (default: get_database())
        """
        self.db = db if db is not None else get_database()
        self.collection = self.db[collection_name]

        key = (self.db.name, collection_name)
        if key not in BaseRepository._indexed:
            self._ensure_indexes()
            BaseRepository._indexed.add(key)

    def _ensure_indexes(self):
        """
        Cria índices necessários.
        Deve ser sobrescrito nas classes filhas.
        """
        pass

    def find_by_id(self, document_id: Any) -> Optional[Dict[str, Any]]:
        """
        Busca documento por ID.

        Returns:
            Dict com dados do documento ou None (inclusive para ID inválido)
        """
        try:
            object_id = to_object_id(document_id)
        except ValueError:
            return None
        return self.collection.find_one({'_id': object_id})

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cria um novo documento.

        Returns:
            Dict com dados do documento criado (incluindo _id)
        """
        result = self.collection.insert_one(data)
        data['_id'] = result.inserted_id
        return data

