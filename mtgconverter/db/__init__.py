from mtgconverter.db.database import async_session_factory, close_db, init_db
from mtgconverter.db.storage import DatabaseStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "DatabaseStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "async_session_factory",
    "close_db",
    "init_db",
]
