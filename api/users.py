from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from models import User
from schemas.user import RoleUpdate, UserRegister, UserSuspend
from services.users import (
    UserNotFoundError,
    get_user_by_email,
    list_users,
    register_user,
    remove_user,
    set_user_role,
)
from utils.clock import isoformat_utc

router = APIRouter(prefix="/users", tags=["users"])

MSG_USER_NOT_FOUND = "User not found"


def _user_to_response(u: User) -> dict[str, Any]:
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "photo": u.photo,
        "role": u.role,
        "createdAt": isoformat_utc(u.created_at),
    }


@router.post("")
async def post_user(body: UserRegister, db: AsyncSession = Depends(get_db)):
    created, user = await register_user(
        db,
        name=body.name,
        email=body.email,
        photo=body.photo,
        role=body.role,
        created_at=body.created_at,
    )
    content = {"created": created, "user": _user_to_response(user)}
    if not created:
        content["message"] = "User already exists"
    return JSONResponse(status_code=201 if created else 200, content=content)


@router.get("")
async def get_users(db: AsyncSession = Depends(get_db)):
    users = await list_users(db)
    return [_user_to_response(u) for u in users]


@router.get("/{email}")
async def get_user(email: str, db: AsyncSession = Depends(get_db)) -> Optional[dict[str, Any]]:
    user = await get_user_by_email(db, email)
    if user is None:
        return None
    return _user_to_response(user)


@router.patch("/role/{email}")
async def patch_user_role(email: str, body: RoleUpdate, db: AsyncSession = Depends(get_db)):
    await set_user_role(db, email, body.role)
    return {"success": True}


@router.delete("/{user_id}/suspend")
async def suspend_user(
    user_id: str,
    body: Optional[UserSuspend] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    body = body or UserSuspend()
    try:
        await remove_user(db, user_id, body.reason, body.feedback)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail=MSG_USER_NOT_FOUND)
    return {
        "deleted": True,
        "id": user_id,
        "reason": body.reason,
        "feedback": body.feedback,
    }
