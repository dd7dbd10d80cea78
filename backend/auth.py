# backend/auth.py
import logging
from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode

import bcrypt
import jwt
from authlib.integrations.starlette_client import OAuth
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.requests import Request as StarletteRequest

from backend.config import (
    JWT_SECRET, JWT_EXPIRE_HOURS, FRONTEND_URL,
    GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, HAS_GOOGLE,
)
from backend.models.database import get_db
from backend.models.user_model import User, SignupRequest, LoginRequest, CurrentUser

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ISSUER = "adgen-studio"

# ---------------------------------------------------------------------
# JWT / 보안
# ---------------------------------------------------------------------
security = HTTPBearer(auto_error=False)


def issue_token(sub: str, email: str, name: str, provider: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": sub,
        "email": email,
        "name": name,
        "provider": provider,
        "iss": ISSUER,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=JWT_EXPIRE_HOURS)).timestamp()),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token: str) -> CurrentUser:
    payload = jwt.decode(token, JWT_SECRET, algorithms=[ALGORITHM], issuer=ISSUER, leeway=10)
    return CurrentUser(
        sub=str(payload["sub"]),
        email=payload.get("email") or "",
        name=payload.get("name") or "",
        provider=payload.get("provider") or "local",
    )


def get_current_user(creds: HTTPAuthorizationCredentials = Depends(security)) -> CurrentUser:
    if not creds:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing auth token")
    try:
        return decode_token(creds.credentials)
    except (jwt.InvalidTokenError, KeyError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid auth token")


def _normalize_id(identifier: str) -> str:
    identifier = (identifier or "").strip()
    # 이메일처럼 보일 때만 소문자 정규화
    return identifier.lower() if "@" in identifier else identifier


def _auth_payload(user: User) -> dict:
    token = issue_token(sub=str(user.id), email=user.email, name=user.name or "", provider=user.provider)
    return {"token": token, "user": {"email": user.email, "name": user.name or ""}}


# ---------------------------------------------------------------------
# OAuth 클라이언트 (설정된 경우만)
# ---------------------------------------------------------------------
oauth = OAuth()
if HAS_GOOGLE:
    oauth.register(
        name="google",
        client_id=GOOGLE_CLIENT_ID,
        client_secret=GOOGLE_CLIENT_SECRET,
        server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
        client_kwargs={"scope": "openid email profile"},
    )


# ---------------------------------------------------------------------
# 설정
# ---------------------------------------------------------------------
@router.get("/enabled")
async def auth_enabled():
    return {"local": True, "google": HAS_GOOGLE}


# ---------------------------------------------------------------------
# 로컬 회원가입/로그인
# ---------------------------------------------------------------------
@router.post("/signup")
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    email = _normalize_id(payload.email)
    password = payload.password or ""
    if not email or not password:
        raise HTTPException(400, "email and password required")
    name = (payload.name or "").strip() or email.split("@")[0]

    exists = db.scalars(select(User).where(User.provider == "local", User.email == email)).first()
    if exists:
        raise HTTPException(409, "email already exists")

    pw_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
    user = User(provider="local", email=email, name=name, password_hash=pw_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # 동시 가입으로 사전 조회를 통과한 경우 (provider, email) 유니크 제약에 걸린다
        db.rollback()
        raise HTTPException(409, "email already exists")
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info("local user signed up: %s", email)
    return _auth_payload(user)


@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    email = _normalize_id(payload.email)
    password = payload.password or ""
    if not email or not password:
        raise HTTPException(400, "email and password required")

    user = db.scalars(select(User).where(User.provider == "local", User.email == email)).first()
    if not user or not user.password_hash or not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
        raise HTTPException(401, "invalid credentials")
    return _auth_payload(user)


# ---------------------------------------------------------------------
# Google OAuth
# ---------------------------------------------------------------------
@router.get("/google/login")
async def google_login(request: StarletteRequest):
    if not HAS_GOOGLE:
        raise HTTPException(501, "Google OAuth not configured")
    return await oauth.google.authorize_redirect(request, request.url_for("google_callback"))


@router.get("/google/callback")
async def google_callback(request: StarletteRequest, db: Session = Depends(get_db)):
    if not HAS_GOOGLE:
        raise HTTPException(501, "Google OAuth not configured")
    try:
        token = await oauth.google.authorize_access_token(request)
        info = token.get("userinfo") or {}
        if "email" not in info:
            raise HTTPException(400, "Google OAuth failed")

        email = _normalize_id(info["email"])
        user = db.scalars(select(User).where(User.provider == "google", User.email == email)).first()
        if user is None:
            user = User(provider="google", provider_id=info.get("sub"), email=email, name=info.get("name", ""))
            db.add(user)
            db.commit()
            db.refresh(user)

        app_jwt = _auth_payload(user)["token"]
        query = urlencode({"token": app_jwt, "name": user.name or "", "email": user.email})
        return RedirectResponse(f"{FRONTEND_URL}/?{query}")
    except HTTPException:
        raise
    except Exception:
        logger.exception("google callback failed")
        return JSONResponse({"error": "OAuth callback failed"}, status_code=500)


# ---------------------------------------------------------------------
# 토큰 검증
# ---------------------------------------------------------------------
@router.get("/me")
def auth_me(user: CurrentUser = Depends(get_current_user)):
    return user.model_dump()
