# utils/openai_utils.py
from functools import lru_cache
from typing import Any, Dict, List, Optional

from openai import OpenAI, APIConnectionError, APIStatusError

from backend.config import OPENAI_API_KEY


class UpstreamError(RuntimeError):
    """OpenAI 호출 실패(비정상 status 또는 전송 오류)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@lru_cache
def get_client() -> OpenAI:
    # 재시도 없음: 한 번의 업스트림 실패는 한 번의 실패로 보고한다
    return OpenAI(api_key=OPENAI_API_KEY, max_retries=0)


def _extract_text(resp: Any) -> str:
    """chat.completions 응답에서 첫 choice 의 텍스트를 꺼낸다."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        raise UpstreamError("OpenAI API error: empty response")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        raise UpstreamError("OpenAI API error: missing message content")
    return content


# -------------------- OpenAI 호출 --------------------
def call_chat_model(
    model: str,
    messages: List[Dict[str, str]],
    *,
    temperature: Optional[float] = 0.8,
) -> str:
    req: Dict[str, Any] = {"model": model, "messages": messages}
    if temperature is not None:
        req["temperature"] = temperature

    try:
        resp = get_client().chat.completions.create(**req)
    except APIStatusError as e:
        raise UpstreamError(f"OpenAI API error: {e.status_code}", status_code=e.status_code) from e
    except APIConnectionError as e:
        raise UpstreamError(f"OpenAI connection error: {e}") from e
    return _extract_text(resp)
