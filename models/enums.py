"""
Enumerated field values shared by models, schemas and services.
Values are the exact literals persisted in the store; filters compare against these, never free strings.
"""
from __future__ import annotations

import enum


class ApplicationStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def initial(cls) -> "ApplicationStatus":
        return cls.PENDING

    @classmethod
    def terminal_stages(cls) -> frozenset["ApplicationStatus"]:
        return frozenset({cls.APPROVED, cls.REJECTED})

    def can_transition_to(self, target: "ApplicationStatus") -> bool:
        return target in _STATUS_TRANSITIONS[self]


_STATUS_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.APPROVED, ApplicationStatus.REJECTED}),
    ApplicationStatus.APPROVED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


class FeeStatus(str, enum.Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"


class UserRole(str, enum.Enum):
    BORROWER = "borrower"
    MANAGER = "manager"
    ADMIN = "admin"
