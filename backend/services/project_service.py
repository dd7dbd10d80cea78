# backend/services/project_service.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.models.project_model import AdProject, utcnow

logger = logging.getLogger(__name__)


class ProjectNotFound(LookupError):
    """프로젝트가 없거나 호출자 소유가 아님. 두 경우를 구분하지 않는다."""


def default_title(template_type: str) -> str:
    return f"New {template_type} Ad"


def create_project(db: Session, owner_id: str, template_type: str, title: Optional[str] = None) -> AdProject:
    project = AdProject(
        user_id=owner_id,
        template_type=template_type,
        title=title or default_title(template_type),
        content={},
    )
    db.add(project)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(project)
    logger.info("project created id=%s owner=%s template=%s", project.id, owner_id, template_type)
    return project


def list_projects(db: Session, owner_id: str) -> List[AdProject]:
    stmt = (
        select(AdProject)
        .where(AdProject.user_id == owner_id)
        .order_by(AdProject.updated_at.desc())
    )
    return list(db.scalars(stmt))


def get_project(db: Session, owner_id: str, project_id: str) -> AdProject:
    stmt = select(AdProject).where(AdProject.id == project_id, AdProject.user_id == owner_id)
    project = db.scalars(stmt).first()
    if project is None:
        raise ProjectNotFound(project_id)
    return project


def update_project(
    db: Session,
    owner_id: str,
    project_id: str,
    title: str,
    content: Dict[str, Any],
) -> AdProject:
    """title 과 content 전체를 교체한다. 실패 시 롤백되어 저장된 값은 그대로 남는다."""
    project = get_project(db, owner_id, project_id)
    project.title = title
    project.content = dict(content)
    project.updated_at = utcnow()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(project)
    return project
