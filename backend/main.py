# backend/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from backend.config import JWT_SECRET, CORS_ORIGINS, LOG_LEVEL
from backend.models.database import init_db

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="AdGen Studio API", version="1.0")

# --- CORS ---
# 편집기에서 브라우저가 직접 호출할 수 있도록 허용 헤더를 고정
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# --- 세션 (OAuth용) ---
app.add_middleware(SessionMiddleware, secret_key=JWT_SECRET, same_site="lax")

# --- DB 초기화 ---
init_db()

# --- 라우터 등록 ---
from backend.routers import projects, adcopy  # noqa: E402
from backend import auth  # noqa: E402
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(adcopy.router)

# --- 문구 생성 preflight ---
# 마지막에 등록한 미들웨어가 가장 바깥 → CORSMiddleware 보다 먼저 응답
app.middleware("http")(adcopy.adcopy_preflight)


@app.get("/")
def root():
    return {"ok": True, "msg": "AdGen Studio API running"}
