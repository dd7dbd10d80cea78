# backend/routers/projects.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.auth import get_current_user
from backend.models.database import get_db
from backend.models.project_model import ProjectCreateRequest, ProjectUpdateRequest, ProjectResponse
from backend.models.user_model import CurrentUser
from backend.services import project_service
from backend.services.project_service import ProjectNotFound

router = APIRouter(prefix="/projects", tags=["Projects"])
logger = logging.getLogger(__name__)


def _failed(operation: str, e: Exception) -> HTTPException:
    logger.exception("%s failed: %s", operation, e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{operation} failed: {e}",
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.get("", response_model=List[ProjectResponse], summary="내 프로젝트 목록 (최근 수정순)")
def list_projects(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return project_service.list_projects(db, owner_id=user.sub)
    except Exception as e:
        raise _failed("list projects", e)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="템플릿으로 새 프로젝트 생성",
)
def create_project(
    req: ProjectCreateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return project_service.create_project(db, owner_id=user.sub, template_type=req.template_type, title=req.title)
    except Exception as e:
        raise _failed("create project", e)


@router.get("/{project_id}", response_model=ProjectResponse, summary="프로젝트 조회 (소유자만)")
def read_project(project_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return project_service.get_project(db, owner_id=user.sub, project_id=project_id)
    except ProjectNotFound:
        raise _not_found()


@router.put("/{project_id}", response_model=ProjectResponse, summary="프로젝트 전체 저장")
def save_project(
    project_id: str,
    req: ProjectUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """title 과 content 전체를 교체. 부분 업데이트 없음, 마지막 저장이 이긴다."""
    try:
        return project_service.update_project(
            db, owner_id=user.sub, project_id=project_id, title=req.title, content=req.content,
        )
    except ProjectNotFound:
        raise _not_found()
    except Exception as e:
        raise _failed("update project", e)
