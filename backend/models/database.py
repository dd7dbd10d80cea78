# backend/models/database.py
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.config import DATABASE_URL

_url = make_url(DATABASE_URL)
_is_sqlite = _url.get_backend_name() == "sqlite"

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # sqlite 파일 경로의 상위 폴더 보장
    if _is_sqlite and _url.database and _url.database != ":memory:":
        Path(_url.database).parent.mkdir(parents=True, exist_ok=True)

    # 테이블 등록용 import
    from backend.models import user_model, project_model  # noqa: F401
    Base.metadata.create_all(bind=engine)
