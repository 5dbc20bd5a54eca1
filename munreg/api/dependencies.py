"""Request Dependencies — current user and reference-data provider.

Invariants:
    - get_current_user either returns a persisted User or raises AuthenticationError
    - get_reference_provider is lazy: building it performs no query

Design Decisions:
    - HTTPBearer(auto_error=False): missing credentials go through our own
      401 envelope instead of FastAPI's default 403
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.config import Settings, get_settings
from munreg.core.errors import AuthenticationError
from munreg.core.repository_protocols import ReferenceProvider
from munreg.infrastructure.database import get_db
from munreg.infrastructure.reference_repository import DatabaseReferenceProvider
from munreg.infrastructure.security import decode_access_token
from munreg.models.user import User
from munreg.services.auth_service import get_user_by_id

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    if credentials is None:
        raise AuthenticationError("You are not logged in")
    payload = decode_access_token(
        credentials.credentials,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    user = await get_user_by_id(db, int(payload["sub"]))
    if not user:
        raise AuthenticationError("You are not logged in")
    return user


async def get_reference_provider(
    db: AsyncSession = Depends(get_db),
) -> ReferenceProvider:
    return DatabaseReferenceProvider(db)
