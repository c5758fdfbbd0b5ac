import logging
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)


def create_client(mongo_uri: str) -> MongoClient[Any]:
    """
    Crea el cliente de MongoDB y verifica la conexión con un ping.

    Argumentos:
        mongo_uri (str): Cadena de conexión.

    Retorna:
        MongoClient: El cliente conectado. Quien lo crea es responsable de cerrarlo.
    """
    client: MongoClient[Any] = MongoClient(mongo_uri, tz_aware=True)
    try:
        client.admin.command("ping")
    except Exception as e:
        logger.error(f"❌ MongoDB connection error: {e}")
        client.close()
        raise
    return client


def get_db(client: MongoClient[Any], db_name: str) -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    return client[db_name]
