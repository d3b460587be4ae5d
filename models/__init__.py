from models.application import LoanApplication
from models.enums import ApplicationStatus, FeeStatus, UserRole
from models.loan import Loan
from models.user import User

__all__ = [
    "ApplicationStatus",
    "FeeStatus",
    "Loan",
    "LoanApplication",
    "User",
    "UserRole",
]
