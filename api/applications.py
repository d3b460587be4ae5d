from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models import ApplicationStatus, LoanApplication
from schemas.application import ApplicationSubmit
from services.applications import (
    list_applications,
    list_applications_for_user,
    list_pending_applications,
    submit_application,
)
from utils.clock import isoformat_utc

router = APIRouter(prefix="/loan-applications", tags=["loan-applications"])


def _app_to_response(app: LoanApplication) -> dict[str, Any]:
    """Flatten the stored payload back into a single document, server fields last."""
    return {
        **(app.payload or {}),
        "id": app.id,
        "applicantEmail": app.applicant_email,
        "status": app.status,
        "applicationFeeStatus": app.application_fee_status,
        "createdAt": isoformat_utc(app.created_at),
    }


@router.post("", status_code=201)
async def create_application(body: ApplicationSubmit, db: AsyncSession = Depends(get_db)):
    app = await submit_application(db, body.payload, body.applicant_email)
    return _app_to_response(app)


@router.get("")
async def get_applications(
    status: Optional[ApplicationStatus] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    apps = await list_applications(db, status)
    return [_app_to_response(a) for a in apps]


@router.get("/user/{email}")
async def get_user_applications(email: str, db: AsyncSession = Depends(get_db)):
    apps = await list_applications_for_user(db, email)
    return [_app_to_response(a) for a in apps]


@router.get("/status/pending")
async def get_pending_applications(db: AsyncSession = Depends(get_db)):
    apps = await list_pending_applications(db)
    return [_app_to_response(a) for a in apps]
