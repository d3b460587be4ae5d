"""
Loan application intake and role-scoped queries.

Intake never trusts the client for server-owned fields: status, fee status,
creation time and id are always written here. Every list call is a fresh read
ordered newest first, with equal timestamps kept in creation order.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import ApplicationStatus, FeeStatus, LoanApplication
from utils.clock import utcnow

logger = logging.getLogger(__name__)

SERVER_OWNED_FIELDS = frozenset({
    "id",
    "_id",
    "applicantEmail",
    "status",
    "applicationFeeStatus",
    "createdAt",
})


class ApplicationNotFoundError(LookupError):
    """Raised when no application has the given id."""


class InvalidTransitionError(ValueError):
    """Raised when an application status transition is not allowed."""

    def __init__(self, current: ApplicationStatus, target: ApplicationStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move application from {current.value} to {target.value}")


def strip_server_owned(payload: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in payload.items() if k not in SERVER_OWNED_FIELDS}


async def submit_application(
    session: AsyncSession, payload: dict[str, Any], applicant_email: str
) -> LoanApplication:
    """
    Store a new application in its initial state.
    Not idempotent: a retried call stores a second application.
    """
    app = LoanApplication(
        id=f"app-{uuid.uuid4().hex[:12]}",
        applicant_email=applicant_email,
        payload=strip_server_owned(payload),
        status=ApplicationStatus.initial().value,
        application_fee_status=FeeStatus.UNPAID.value,
        created_at=utcnow(),
    )
    session.add(app)
    await session.flush()
    logger.info("Application submitted id=%s applicant=%s", app.id, applicant_email)
    return app


def _newest_first(stmt):
    return stmt.order_by(LoanApplication.created_at.desc(), LoanApplication.seq.asc())


async def list_applications(
    session: AsyncSession, status: Optional[ApplicationStatus] = None
) -> Sequence[LoanApplication]:
    stmt = select(LoanApplication)
    if status is not None:
        stmt = stmt.where(LoanApplication.status == ApplicationStatus(status).value)
    result = await session.execute(_newest_first(stmt))
    return result.scalars().all()


async def list_applications_for_user(session: AsyncSession, email: str) -> Sequence[LoanApplication]:
    """Borrower view: everything this applicant has submitted."""
    result = await session.execute(
        _newest_first(select(LoanApplication).where(LoanApplication.applicant_email == email))
    )
    return result.scalars().all()


async def list_pending_applications(session: AsyncSession) -> Sequence[LoanApplication]:
    """Manager view: applications still awaiting a decision."""
    return await list_applications(session, ApplicationStatus.PENDING)


async def transition_application(
    session: AsyncSession, application_id: str, target: ApplicationStatus
) -> LoanApplication:
    result = await session.execute(select(LoanApplication).where(LoanApplication.id == application_id))
    app = result.scalar_one_or_none()
    if app is None:
        raise ApplicationNotFoundError(application_id)
    current = ApplicationStatus(app.status)
    if not current.can_transition_to(target):
        raise InvalidTransitionError(current, target)
    app.status = target.value
    await session.flush()
    logger.info("Application %s moved %s -> %s", app.id, current.value, target.value)
    return app
