from sqlalchemy import JSON, Column, DateTime, String, func

from database import Base


class Loan(Base):
    __tablename__ = "loans"

    id = Column(String(64), primary_key=True, index=True)
    # Offer terms (title, interest rate, max amount, ...) exactly as posted
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
