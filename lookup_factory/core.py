from dependency_injector import containers, providers

from lookup_factory.application.lookup.services.lookup_service import LookupService
from lookup_factory.infrastructure.lookup.kinds import CATEGORIES, ROLES, TAGS
from lookup_factory.infrastructure.lookup.repositories.lookup_repository import LookupRepository


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container.

    Repositories take the request-scoped session as a call-time ``db``
    argument, so no session state is shared between requests.
    """

    # Category
    category_repository = providers.Factory(
        LookupRepository,
        entry_type=CATEGORIES.entry_type,
        orm_model=CATEGORIES.orm_model,
    )
    category_service = providers.Factory(
        LookupService,
        factory=CATEGORIES.entry_type.create,
        kind=CATEGORIES.name,
    )

    # Role
    role_repository = providers.Factory(
        LookupRepository,
        entry_type=ROLES.entry_type,
        orm_model=ROLES.orm_model,
    )
    role_service = providers.Factory(
        LookupService,
        factory=ROLES.entry_type.create,
        kind=ROLES.name,
    )

    # Tag
    tag_repository = providers.Factory(
        LookupRepository,
        entry_type=TAGS.entry_type,
        orm_model=TAGS.orm_model,
    )
    tag_service = providers.Factory(
        LookupService,
        factory=TAGS.entry_type.create,
        kind=TAGS.name,
    )


# Initialize container
container = Container()
