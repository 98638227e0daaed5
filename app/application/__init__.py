"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (record repositories, store probe).
"""

from app.application.interfaces import ISourceRepository, IStoreConnection
from app.application.use_cases.search import SearchService

__all__ = [
    "ISourceRepository",
    "IStoreConnection",
    "SearchService",
]
