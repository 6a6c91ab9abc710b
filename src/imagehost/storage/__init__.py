"""Storage layer."""

from .mongo import MongoImageStore
from .protocols import ImageStoreProtocol

__all__ = ["ImageStoreProtocol", "MongoImageStore"]
