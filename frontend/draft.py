# frontend/draft.py
# 편집 중인 프로젝트 한 건의 로컬 사본. 저장 버튼을 누르기 전까지 서버와 분리된다.
import re
from typing import Any, Dict, Optional

from frontend.api_client import AdGenClient

DEFAULT_BG_COLOR = "#8B5CF6"
DEFAULT_CTA = "Learn More"

# "Headline: ..." / "- body: ..." / "**CTA:** ..." 등 줄 머리 라벨
def _label(name: str) -> "re.Pattern[str]":
    return re.compile(rf"^[ \t\-*•]*{name}[ \t]*\**[ \t]*:[ \t]*\**(.*)$", re.I | re.M)


_FIELD_PATTERNS = {
    "headline": _label("headline"),
    "bodyText": _label("body"),
    "cta":      _label("cta"),
}

PRESETS = [
    {
        "name": "Product launch spotlight",
        "headline": "Launch your next big release",
        "bodyText": "Highlight key benefits, pricing, and urgency to drive rapid adoption.",
        "cta": "See launch plan",
        "bgColor": "#5B2EFF",
    },
    {
        "name": "Seasonal promo",
        "headline": "Seasonal offer just dropped",
        "bodyText": "Bundle your best sellers and give early access to loyal customers.",
        "cta": "Preview collection",
        "bgColor": "#0F6B81",
    },
    {
        "name": "Event registration",
        "headline": "Join our live workshop",
        "bodyText": "Walk through strategy, creative, and measurement with our experts.",
        "cta": "Reserve a seat",
        "bgColor": "#E2543D",
    },
]


def parse_generated_copy(text: Optional[str]) -> Dict[str, str]:
    """
    모델 원문에서 Headline/Body/CTA 줄을 찾아 돌려준다.
    찾은 라벨만 key 로 들어가고, 못 찾으면 빈 dict. 예외를 던지지 않는다.
    """
    if not text or not isinstance(text, str):
        return {}
    found: Dict[str, str] = {}
    for key, pattern in _FIELD_PATTERNS.items():
        m = pattern.search(text)
        if m:
            found[key] = m.group(1).strip().strip("*").strip()
    return found


class EditorDraft:
    def __init__(self, client: AdGenClient):
        self.client = client
        self.project: Optional[Dict[str, Any]] = None
        self.title = ""
        self.headline = ""
        self.body_text = ""
        self.cta = DEFAULT_CTA
        self.bg_color = DEFAULT_BG_COLOR
        self.image_url = ""

    @property
    def project_id(self) -> Optional[str]:
        return self.project["id"] if self.project else None

    def load(self, project_id: str) -> "EditorDraft":
        # 없거나 남의 프로젝트면 ProjectNotFound 가 그대로 올라간다
        project = self.client.get_project(project_id)
        self.project = project
        self.title = project.get("title") or ""

        content = project.get("content") or {}
        self.headline = content.get("headline") or ""
        self.body_text = content.get("bodyText") or ""
        self.cta = content.get("cta") if content.get("cta") is not None else DEFAULT_CTA
        self.bg_color = content.get("bgColor") if content.get("bgColor") is not None else DEFAULT_BG_COLOR
        self.image_url = content.get("imageUrl") or ""
        return self

    def content(self) -> Dict[str, str]:
        return {
            "headline": self.headline,
            "bodyText": self.body_text,
            "cta": self.cta,
            "bgColor": self.bg_color,
            "imageUrl": self.image_url,
        }

    def save(self) -> Dict[str, Any]:
        """전체 content 를 덮어쓴다. 실패해도 로컬 값은 그대로 둔다."""
        if not self.project_id:
            raise ValueError("no project loaded")
        saved = self.client.save_project(self.project_id, self.title, self.content())
        self.project = saved
        return saved

    def apply_generated(self, text: Optional[str]) -> Dict[str, str]:
        fields = parse_generated_copy(text)
        if "headline" in fields:
            self.headline = fields["headline"]
        if "bodyText" in fields:
            self.body_text = fields["bodyText"]
        if "cta" in fields:
            self.cta = fields["cta"]
        return fields

    def generate(self, prompt: str, ad_type: str, tone: str) -> Dict[str, str]:
        # 호출이 실패하면 필드를 건드리기 전에 예외가 올라간다
        text = self.client.generate_ad_copy(prompt, ad_type, tone)
        return self.apply_generated(text)

    def apply_preset(self, preset: Dict[str, str]):
        self.headline = preset["headline"]
        self.body_text = preset["bodyText"]
        self.cta = preset["cta"]
        self.bg_color = preset["bgColor"]
