from collections.abc import Callable
from typing import Any

from lookup_factory.application.lookup.services.lookup_service import LookupService
from lookup_factory.core import container
from lookup_factory.database import DatabaseSession
from lookup_factory.infrastructure.lookup.kinds import LookupKind


def inject_lookup_service(kind: LookupKind) -> Callable[[DatabaseSession], LookupService[Any]]:
    """
    Create a FastAPI dependency building the service for a lookup kind.

    The request-scoped database session is handed to the repository provider.
    """
    repository_provider = getattr(container, f"{kind.slug}_repository")
    service_provider = getattr(container, f"{kind.slug}_service")

    def dependency(db: DatabaseSession) -> LookupService[Any]:
        return service_provider(repository=repository_provider(db=db))

    return dependency
