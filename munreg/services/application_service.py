"""Application Service — persists delegate, chair and delegation applications.

Invariants:
    - One application per user per role: checked before insert, and a racing
      insert that trips the unique index maps to the same 403
    - Any other constraint failure at commit (e.g. a delegation deleted after
      validation) is a 409 conflict, never reported as a duplicate
    - New delegate/chair applications always start with payment_status "pending"
    - Forms arrive fully validated (shape + reference checks); nothing re-checked here

Design Decisions:
    - form.model_dump(mode="json") feeds the ORM constructor: enum members become
      their stored string values and field names already match column names
    - After an IntegrityError the existing row is looked up again instead of
      parsing driver-specific constraint names out of the error message
"""

import logging
from collections.abc import Awaitable, Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from munreg.core.domain_types import ApplicationRole, PaymentStatus
from munreg.core.errors import ConflictError, DuplicateApplicationError
from munreg.db.base import Base
from munreg.models.application import ChairApplication, DelegateApplication
from munreg.models.delegation import Delegation
from munreg.schemas.forms import (
    ChairApplyForm, DelegateApplyForm, DelegationApplyForm,
)

logger = logging.getLogger(__name__)

STALE_REFERENCE = "The application refers to a record that no longer exists"

_APPLICATION_MODELS = {
    ApplicationRole.DELEGATE: DelegateApplication,
    ApplicationRole.CHAIR: ChairApplication,
}

FindExisting = Callable[[], Awaitable[Base | None]]


async def get_application(
    db: AsyncSession, role: ApplicationRole, user_id: int,
) -> DelegateApplication | ChairApplication | None:
    model = _APPLICATION_MODELS[role]
    result = await db.execute(select(model).where(model.user_id == user_id))
    return result.scalar_one_or_none()


async def _insert_once(
    db: AsyncSession,
    row: Base,
    role: ApplicationRole,
    user_id: int,
    find_existing: FindExisting,
) -> Base:
    db.add(row)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        if await find_existing():
            raise DuplicateApplicationError(role.value)
        logger.error(
            f"{role.value} application rejected at commit: {exc.orig}",
            extra={"user_id": user_id, "role": role.value},
        )
        raise ConflictError(STALE_REFERENCE)
    await db.refresh(row)
    logger.info(
        f"{role.value} application created",
        extra={"user_id": user_id, "role": role.value},
    )
    return row


async def submit_application(
    db: AsyncSession,
    role: ApplicationRole,
    user_id: int,
    form: DelegateApplyForm | ChairApplyForm,
) -> DelegateApplication | ChairApplication:
    """Store a delegate or chair application for user_id."""

    async def find_existing():
        return await get_application(db, role, user_id)

    if await find_existing():
        raise DuplicateApplicationError(role.value)
    model = _APPLICATION_MODELS[role]
    row = model(
        **form.model_dump(mode="json"),
        user_id=user_id,
        payment_status=PaymentStatus.PENDING.value,
    )
    return await _insert_once(db, row, role, user_id, find_existing)


async def get_led_delegation(db: AsyncSession, user_id: int) -> Delegation | None:
    result = await db.execute(
        select(Delegation).where(Delegation.leader_id == user_id),
    )
    return result.scalars().first()


async def submit_delegation(
    db: AsyncSession, user_id: int, form: DelegationApplyForm,
) -> Delegation:
    """Register a delegation led by user_id. A user leads at most one."""

    async def find_existing():
        return await get_led_delegation(db, user_id)

    if await find_existing():
        raise DuplicateApplicationError(ApplicationRole.DELEGATION.value)
    row = Delegation(**form.model_dump(mode="json"), leader_id=user_id)
    return await _insert_once(
        db, row, ApplicationRole.DELEGATION, user_id, find_existing,
    )
