# backend/models/project_model.py
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Column, String, DateTime, JSON

from backend.models.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class AdProject(Base):
    __tablename__ = "ad_projects"
    id            = Column(String, primary_key=True, default=_new_id)
    user_id       = Column(String, nullable=False, index=True)   # 소유자 (토큰 sub)
    title         = Column(String, nullable=False)
    template_type = Column(String, nullable=False)               # social / banner / story ...
    content       = Column(JSON, nullable=False, default=dict)   # 스키마 없는 content bag
    thumbnail_url = Column(String, nullable=True)

    created_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)


# ---------------------------------------------------------
# API 스키마
# ---------------------------------------------------------
class ProjectCreateRequest(BaseModel):
    template_type: str = Field(..., description="social / banner / story 등 템플릿 태그")
    title: Optional[str] = Field(None, description="비우면 'New {template_type} Ad'")


class ProjectUpdateRequest(BaseModel):
    title: str
    content: Dict[str, Any] = Field(default_factory=dict, description="headline, bodyText, cta, bgColor, imageUrl")


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    template_type: str
    content: Dict[str, Any] = Field(default_factory=dict)
    thumbnail_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
