"""Client adapters that consume parsed connection strings."""

from .base import BaseClientAdapter
from .mongodb import MongoDBAdapter

__all__ = [
    "BaseClientAdapter",
    "MongoDBAdapter",
]
