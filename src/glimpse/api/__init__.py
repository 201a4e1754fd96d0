"""HTTP API for the analyzers."""

from glimpse.api.router import api_router

__all__ = ["api_router"]
