"""Auth Service — account creation, credential checks, token issuance.

Invariants:
    - Email uniqueness checked before insert AND guarded by the unique index
    - Login failures never reveal whether the email exists
    - Tokens issued with the Settings secret/algorithm/lifetime
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.config import Settings
from munreg.core.errors import AuthenticationError, ConflictError
from munreg.infrastructure.security import (
    build_access_token, hash_password, verify_password,
)
from munreg.models.user import User
from munreg.schemas.forms import LoginForm, SignupForm

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email is already registered"
BAD_CREDENTIALS = "Invalid email or password"


def issue_token(user: User, settings: Settings) -> str:
    return build_access_token(
        user_id=user.id,
        email=user.email,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def register_user(
    db: AsyncSession, form: SignupForm, settings: Settings,
) -> tuple[User, str]:
    """Create the account described by a validated signup form."""
    if await get_user_by_email(db, form.email):
        raise ConflictError(EMAIL_TAKEN)

    user = User(
        email=form.email,
        password_hash=hash_password(form.password),
        firstname=form.firstname,
        lastname=form.lastname,
        phone=form.phone,
        birthdate=form.birthdate,
        nationality=form.nationality,
        schoolname=form.schoolname,
        dietary=form.dietary.value if form.dietary else None,
        other_info=form.other_info,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(EMAIL_TAKEN)
    await db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user, issue_token(user, settings)


async def authenticate(
    db: AsyncSession, form: LoginForm, settings: Settings,
) -> tuple[User, str]:
    user = await get_user_by_email(db, form.email)
    if not user or not verify_password(form.password, user.password_hash):
        logger.info("Login rejected")
        raise AuthenticationError(BAD_CREDENTIALS)
    return user, issue_token(user, settings)
