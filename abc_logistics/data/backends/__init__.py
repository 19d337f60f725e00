from .json_backend import JsonItemBackend
from .sqlite_backend import SqliteItemBackend

__all__ = ["JsonItemBackend", "SqliteItemBackend"]
