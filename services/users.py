"""
User registry: idempotent registration keyed on email, lookup, role changes, removal.

Email uniqueness is held by the unique constraint on users.email. Registration is a
single conditional insert against that constraint, so two concurrent registrations
for the same new email cannot both create a record.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models import User, UserRole
from utils.clock import to_utc, utcnow

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class UserNotFoundError(LookupError):
    """Raised when no user has the given id."""


async def _insert_if_absent(session: AsyncSession, values: dict) -> bool:
    """Insert the user unless the email is taken. Returns True when a row was written."""
    dialect = session.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect)
    if insert is not None:
        stmt = insert(User.__table__).values(**values).on_conflict_do_nothing(index_elements=["email"])
        result = await session.execute(stmt)
        return result.rowcount == 1
    try:
        async with session.begin_nested():
            session.add(User(**values))
    except IntegrityError:
        return False
    return True


async def register_user(
    session: AsyncSession,
    *,
    name: str,
    email: str,
    photo: Optional[str] = None,
    role: UserRole = UserRole.BORROWER,
    created_at: Optional[datetime] = None,
) -> tuple[bool, User]:
    """
    Create the user if the email is new. An existing record is returned untouched.
    Returns (created, user).
    """
    created = await _insert_if_absent(session, {
        "id": f"user-{uuid.uuid4().hex[:12]}",
        "email": email,
        "name": name,
        "photo": photo,
        "role": UserRole(role).value,
        "created_at": to_utc(created_at) if created_at else utcnow(),
    })
    user = await get_user_by_email(session, email)
    if user is None:
        # Only reachable if a concurrent request removed the row between the two statements
        raise UserNotFoundError(email)
    if created:
        logger.info("User registered id=%s email=%s role=%s", user.id, email, user.role)
    else:
        logger.info("User already registered email=%s", email)
    return created, user


async def list_users(session: AsyncSession) -> Sequence[User]:
    result = await session.execute(select(User))
    return result.scalars().all()


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def set_user_role(session: AsyncSession, email: str, role: UserRole) -> None:
    """Update the role. Matching nothing is not an error and is not reported."""
    result = await session.execute(update(User).where(User.email == email).values(role=UserRole(role).value))
    logger.info("Role set email=%s role=%s matched=%d", email, UserRole(role).value, result.rowcount)


async def remove_user(
    session: AsyncSession, user_id: str, reason: Optional[str] = None, feedback: Optional[str] = None
) -> None:
    """
    Delete the user permanently. "Suspension" in the API is a hard delete; there is
    no soft-delete flag. reason/feedback go to the audit log only.
    """
    result = await session.execute(delete(User).where(User.id == user_id))
    if result.rowcount == 0:
        raise UserNotFoundError(user_id)
    logger.info("User suspended id=%s reason=%r feedback=%r", user_id, reason, feedback)
