"""HTTP API routers."""

from .router import SERVICE_ROUTERS, build_router

__all__ = ["SERVICE_ROUTERS", "build_router"]
