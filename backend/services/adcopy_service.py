# backend/services/adcopy_service.py
import logging

from backend.config import ADCOPY_MODEL, ADCOPY_TEMPERATURE
from backend.models.adcopy_model import AdcopyRequest, AdcopyResponse
from utils import openai_utils

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert advertising copywriter. Generate compelling ad copy based on "
    "the user's requirements. Keep it concise, engaging, and action-oriented."
)


def build_messages(req: AdcopyRequest) -> list:
    ad_type = req.adType or ""
    tone = req.tone or ""
    prompt = req.prompt or ""

    user_prompt = (
        f"Create {ad_type} ad copy with a {tone} tone. Requirements: {prompt}\n"
        "\n"
        "Return the response in the following format:\n"
        "- Headline: [catchy headline]\n"
        "- Body: [main ad text]\n"
        "- CTA: [call to action]"
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def generate_text(req: AdcopyRequest) -> AdcopyResponse:
    logger.info("Generating ad copy for adType=%r tone=%r", req.adType, req.tone)
    content = openai_utils.call_chat_model(
        model=ADCOPY_MODEL,
        messages=build_messages(req),
        temperature=ADCOPY_TEMPERATURE,
    )
    return AdcopyResponse(content=content)
