from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models import Loan
from schemas.loan import LoanCreate
from services.loans import create_loan, get_loan, list_loans
from utils.clock import isoformat_utc

router = APIRouter(prefix="/loans", tags=["loans"])


def _loan_to_response(loan: Loan) -> dict[str, Any]:
    return {
        **(loan.payload or {}),
        "id": loan.id,
        "createdAt": isoformat_utc(loan.created_at),
    }


@router.get("")
async def get_loans(db: AsyncSession = Depends(get_db)):
    loans = await list_loans(db)
    return [_loan_to_response(loan) for loan in loans]


@router.get("/{loan_id}")
async def get_loan_by_id(loan_id: str, db: AsyncSession = Depends(get_db)) -> Optional[dict[str, Any]]:
    loan = await get_loan(db, loan_id)
    if loan is None:
        return None
    return _loan_to_response(loan)


@router.post("", status_code=201)
async def post_loan(body: LoanCreate, db: AsyncSession = Depends(get_db)):
    loan = await create_loan(db, body.root)
    return _loan_to_response(loan)
