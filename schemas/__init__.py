from schemas.application import ApplicationSubmit
from schemas.loan import LoanCreate
from schemas.user import RoleUpdate, UserRegister, UserSuspend

__all__ = [
    "ApplicationSubmit",
    "LoanCreate",
    "RoleUpdate",
    "UserRegister",
    "UserSuspend",
]
