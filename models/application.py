from sqlalchemy import JSON, Column, DateTime, Integer, String, func

from database import Base
from models.enums import ApplicationStatus, FeeStatus


class LoanApplication(Base):
    __tablename__ = "loan_applications"

    # Insertion sequence; breaks created_at ties in creation order. Never exposed.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)
    applicant_email = Column(String(320), nullable=False, index=True)
    # Client-supplied fields, stored as given minus server-owned keys
    payload = Column(JSON, nullable=False, default=dict)
    status = Column(String(32), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    application_fee_status = Column(String(32), nullable=False, default=FeeStatus.UNPAID.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
