# backend/routers/adcopy.py
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from backend.auth import get_current_user
from backend.models.adcopy_model import AdcopyRequest, AdcopyResponse, AdcopyErrorResponse
from backend.models.user_model import CurrentUser
from backend.services.adcopy_service import generate_text

router = APIRouter(tags=["Adcopy"])
logger = logging.getLogger(__name__)

ADCOPY_PATH = "/generate-ad-copy"

# 브라우저에서 직접 호출하므로 모든 응답에 붙인다
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


async def adcopy_preflight(request: Request, call_next):
    """
    OPTIONS /generate-ad-copy 는 요청 헤더/본문과 상관없이 항상 200 + 빈 본문 + 고정 CORS 헤더.
    CORSMiddleware 바깥에 등록해야 브라우저 preflight 도 여기서 끝난다.
    """
    if request.method == "OPTIONS" and request.url.path == ADCOPY_PATH:
        return Response(content=b"", headers=CORS_HEADERS)
    return await call_next(request)


@router.post(
    ADCOPY_PATH,
    response_model=AdcopyResponse,
    responses={500: {"model": AdcopyErrorResponse}},
    summary="광고 문구 생성 (Headline/Body/CTA 원문 반환)",
)
async def generate_ad_copy(request: Request, user: CurrentUser = Depends(get_current_user)):
    try:
        # 본문 파싱도 같은 에러 경계 안에서 처리 → 실패는 모두 500
        body = await request.json()
        req = AdcopyRequest.model_validate(body)
        result = await run_in_threadpool(generate_text, req)
        return JSONResponse(result.model_dump(), headers=CORS_HEADERS)
    except Exception as e:
        logger.exception("generate_ad_copy failed: %s", e)
        message = str(e) or "Unknown error occurred"
        return JSONResponse(
            AdcopyErrorResponse(error=message).model_dump(),
            status_code=500,
            headers=CORS_HEADERS,
        )
