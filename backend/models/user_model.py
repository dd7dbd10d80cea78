# backend/models/user_model.py
from typing import Optional

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, DateTime, func, UniqueConstraint

from backend.models.database import Base


class User(Base):
    __tablename__ = "users"
    id            = Column(Integer, primary_key=True)
    provider      = Column(String, default="local")       # local / google
    provider_id   = Column(String, nullable=True)

    email         = Column(String, nullable=False, index=True)
    name          = Column(String, nullable=True)
    password_hash = Column(String, nullable=True)         # local만 사용

    created_at    = Column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("provider", "email", name="uq_provider_email"),
    )


class SignupRequest(BaseModel):
    email: str
    password: str
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class CurrentUser(BaseModel):
    """토큰에서 꺼낸 호출자 정보. 서비스 계층에는 sub 가 owner_id 로 전달된다."""
    sub: str
    email: str
    name: str = ""
    provider: str = "local"
