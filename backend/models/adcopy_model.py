# backend/models/adcopy_model.py
from typing import Optional
from pydantic import BaseModel


class AdcopyRequest(BaseModel):
    # 존재 여부 외 검증 없음. 빠진 값(null 포함)은 빈 문자열로 프롬프트에 들어간다.
    prompt: Optional[str] = ""
    adType: Optional[str] = ""
    tone: Optional[str] = ""


class AdcopyResponse(BaseModel):
    content: str   # 모델 원문 그대로. 파싱은 클라이언트 몫


class AdcopyErrorResponse(BaseModel):
    error: str
