"""
Database module - MongoDB connection.
"""
from app.db.mongodb import (
    COLLECTIONS,
    close_mongo_client,
    get_collection,
    get_mongo_db,
    init_mongo_indexes,
    test_mongo_connection
)

__all__ = [
    "COLLECTIONS",
    "close_mongo_client",
    "get_collection",
    "get_mongo_db",
    "init_mongo_indexes",
    "test_mongo_connection"
]
