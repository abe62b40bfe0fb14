"""FastAPI dependencies for authentication, stores and services."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from puckmind.config import get_settings
from puckmind.database import get_db
from puckmind.services.auth import AlwaysDevPrincipal, AuthProvider, JWTAuthProvider, Principal
from puckmind.services.game_service import GameService
from puckmind.services.mental_state_service import MentalStateService
from puckmind.stores.base import Store
from puckmind.stores.memory import InMemoryStore
from puckmind.stores.sql import SqlStore

logger = logging.getLogger(__name__)

# Missing credentials are reported by the auth provider as a 401
security = HTTPBearer(auto_error=False)


@lru_cache
def get_memory_store() -> InMemoryStore:
    """Process-wide in-memory store."""
    logger.warning("Using in-memory store; data will not survive a restart")
    return InMemoryStore()


@lru_cache
def get_auth_provider() -> AuthProvider:
    """Auth provider selected by settings.auth_provider."""
    settings = get_settings()
    if settings.auth_provider == "dev":
        logger.warning(f"Authentication disabled; every request acts as {settings.dev_user_email}")
        return AlwaysDevPrincipal(settings.dev_user_email, settings.dev_user_name)
    return JWTAuthProvider()


def get_store(db: Annotated[Session, Depends(get_db)]) -> Store:
    """Store selected by settings.store_backend."""
    if get_settings().store_backend == "memory":
        return get_memory_store()
    return SqlStore(db)


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[Store, Depends(get_store)],
    auth_provider: Annotated[AuthProvider, Depends(get_auth_provider)],
) -> Principal:
    """Get the principal for the request, or fail with 401."""
    token = credentials.credentials if credentials else None
    return auth_provider.authenticate(token, store)


def get_game_service(store: Annotated[Store, Depends(get_store)]) -> GameService:
    """Get game service with dependencies."""
    return GameService(store)


def get_mental_state_service(
    store: Annotated[Store, Depends(get_store)],
) -> MentalStateService:
    """Get mental state service with dependencies."""
    return MentalStateService(store)
