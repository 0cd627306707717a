"""Router builders for lookup kinds."""

from collections.abc import Callable, Iterable
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from lookup_factory.application.lookup.services.lookup_service import LookupService
from lookup_factory.infrastructure.common.di import inject_lookup_service
from lookup_factory.infrastructure.common.schemas.envelope import (
    ErrorEnvelope,
    LookupEntryResponse,
)
from lookup_factory.infrastructure.lookup.controller import LookupController
from lookup_factory.infrastructure.lookup.kinds import LOOKUP_KINDS, LookupKind

ServiceDependency = Callable[..., LookupService[Any]]

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorEnvelope, "description": "Missing, empty or duplicate value"},
    500: {"model": ErrorEnvelope, "description": "Construction or persistence failure"},
}


def build_lookup_router(
    *,
    path: str,
    request_value_key: str,
    service_dependency: ServiceDependency,
    tags: list[str] | None = None,
) -> APIRouter:
    """
    Build a router with POST (create) and GET (list) on ``path``.

    Args:
        path: Mount path for both endpoints
        request_value_key: JSON key holding the value in POST bodies
        service_dependency: FastAPI dependency returning the lookup service
        tags: OpenAPI tags

    Returns:
        Router ready to be included in an application
    """
    router = APIRouter(tags=tags or [])

    @router.post(
        path,
        status_code=201,
        response_model=LookupEntryResponse,
        responses=_ERROR_RESPONSES,
    )
    def create_entry(
        service: Annotated[LookupService[Any], Depends(service_dependency)],
        body: Annotated[Any, Body()] = None,
    ) -> JSONResponse:
        """Create a new entry, rejecting values that already exist."""
        return LookupController(service, request_value_key).create(body)

    @router.get(
        path,
        response_model=list[LookupEntryResponse],
        responses={500: _ERROR_RESPONSES[500]},
    )
    def list_entries(
        service: Annotated[LookupService[Any], Depends(service_dependency)],
    ) -> JSONResponse:
        """List every entry of this kind."""
        return LookupController(service, request_value_key).list_all()

    return router


def build_kind_router(kind: LookupKind) -> APIRouter:
    """Build the router for a registered lookup kind, backed by the database."""
    return build_lookup_router(
        path=kind.path,
        request_value_key=kind.request_value_key,
        service_dependency=inject_lookup_service(kind),
        tags=[kind.path.strip("/")],
    )


def build_lookup_routers(kinds: Iterable[LookupKind] = LOOKUP_KINDS) -> list[APIRouter]:
    """Build one router per lookup kind."""
    return [build_kind_router(kind) for kind in kinds]
