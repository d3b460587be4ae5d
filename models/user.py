from sqlalchemy import Column, DateTime, String, func

from database import Base
from models.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, index=True)
    email = Column(String(320), unique=True, nullable=False, index=True)
    name = Column(String(256), nullable=False)
    photo = Column(String(1024), nullable=True)
    role = Column(String(32), nullable=False, default=UserRole.BORROWER.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
