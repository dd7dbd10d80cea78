# frontend/preview.py
import html
import re

from frontend.draft import EditorDraft, DEFAULT_BG_COLOR

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def safe_color(value: str) -> str:
    return value if value and _HEX_COLOR.fullmatch(value) else DEFAULT_BG_COLOR


def render_preview_html(draft: EditorDraft) -> str:
    """라이브 미리보기 카드. 빈 필드는 그리지 않는다."""
    parts = []
    if draft.image_url:
        parts.append(
            f'<img src="{html.escape(draft.image_url, quote=True)}" alt="Ad image" '
            'style="width:100%;max-width:320px;border-radius:10px;box-shadow:0 8px 20px rgba(0,0,0,.25);" />'
        )
    if draft.headline:
        parts.append(
            '<h3 style="font-size:36px;font-weight:800;color:#fff;margin:0;'
            'text-shadow:0 12px 25px rgba(0,0,0,.45);">'
            f"{html.escape(draft.headline)}</h3>"
        )
    if draft.body_text:
        parts.append(
            '<p style="font-size:18px;color:rgba(255,255,255,.9);max-width:440px;margin:0;">'
            f"{html.escape(draft.body_text)}</p>"
        )
    if draft.cta:
        parts.append(
            '<span style="display:inline-block;background:#fff;color:#111827;font-weight:600;'
            'padding:12px 32px;border-radius:8px;box-shadow:0 6px 14px rgba(0,0,0,.2);">'
            f"{html.escape(draft.cta)}</span>"
        )

    return (
        f'<div style="aspect-ratio:1/1;background:{safe_color(draft.bg_color)};padding:48px;'
        "display:flex;flex-direction:column;align-items:center;justify-content:center;"
        'text-align:center;gap:24px;border-radius:14px;">'
        + "".join(parts)
        + "</div>"
    )
