"""API routers package."""

from minibank.api.routers.accounts import router as accounts_router

__all__ = [
    "accounts_router",
]
