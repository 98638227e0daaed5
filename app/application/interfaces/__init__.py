"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import ISourceRepository, IStoreConnection

__all__ = [
    "ISourceRepository",
    "IStoreConnection",
]
