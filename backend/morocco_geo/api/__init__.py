"""HTTP API for Morocco Geo."""

from .routes import get_lookup_service, router

__all__ = ["get_lookup_service", "router"]
