from __future__ import annotations

import logging
import uuid
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Loan
from utils.clock import utcnow

logger = logging.getLogger(__name__)


async def create_loan(session: AsyncSession, payload: dict[str, Any]) -> Loan:
    """Add an offer to the catalog. Retrying after a timeout can add it twice."""
    terms = {k: v for k, v in payload.items() if k not in ("id", "_id", "createdAt")}
    loan = Loan(id=f"loan-{uuid.uuid4().hex[:12]}", payload=terms, created_at=utcnow())
    session.add(loan)
    await session.flush()
    logger.info("Loan created id=%s", loan.id)
    return loan


async def list_loans(session: AsyncSession) -> Sequence[Loan]:
    # No ordering is promised to callers.
    result = await session.execute(select(Loan))
    return result.scalars().all()


async def get_loan(session: AsyncSession, loan_id: str) -> Optional[Loan]:
    result = await session.execute(select(Loan).where(Loan.id == loan_id))
    return result.scalar_one_or_none()
