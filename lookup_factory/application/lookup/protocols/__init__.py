from .lookup_repository import LookupRepositoryProtocol

__all__ = ["LookupRepositoryProtocol"]
