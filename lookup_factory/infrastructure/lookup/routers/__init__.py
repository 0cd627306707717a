"""Routers exposing lookup kinds over HTTP."""

from .lookup_router import build_kind_router, build_lookup_router, build_lookup_routers

__all__ = ["build_kind_router", "build_lookup_router", "build_lookup_routers"]
