from .mongo_connection import get_database, get_user_collection, close_database
from .mongo_auth_repository import MongoAuthRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "close_database",
    "MongoAuthRepository",
]
