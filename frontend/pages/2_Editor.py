# 프로젝트 한 건 편집: Content/Design/Presets 탭 + AI 문구 생성 + 라이브 미리보기.
import streamlit as st

from frontend.api_client import ApiError, NotAuthenticated, ProjectNotFound
from frontend.draft import EditorDraft, PRESETS
from frontend.preview import render_preview_html, safe_color
from frontend.session import require_session, end_session

DASHBOARD_PAGE = "pages/1_Dashboard.py"

AD_TYPES = ["social media", "display banner", "story"]
TONES = ["friendly", "professional", "playful", "urgent", "luxurious", "inspirational"]

st.set_page_config(page_title="Creative Workspace", page_icon="✨", layout="wide")

session = require_session()

project_id = st.session_state.get("editor_project_id") or st.query_params.get("id")
if not project_id:
    st.switch_page(DASHBOARD_PAGE)

# ---- 드래프트 로드 (프로젝트가 바뀔 때만)
draft: EditorDraft = st.session_state.get("draft_editor")
if draft is None or draft.project_id != project_id:
    draft = EditorDraft(session.client())
    try:
        draft.load(project_id)
    except ProjectNotFound:
        st.session_state.pop("editor_project_id", None)
        st.toast("Project not found")
        st.switch_page(DASHBOARD_PAGE)
    except NotAuthenticated:
        end_session()
        st.switch_page("Home.py")
    except ApiError as e:
        st.session_state.pop("editor_project_id", None)
        st.toast(f"Failed to load project: {e.detail or e}")
        st.switch_page(DASHBOARD_PAGE)
    st.session_state["draft_editor"] = draft
    st.session_state["draft_rev"] = 0

# 생성/프리셋으로 값이 바뀌면 rev 를 올려 위젯을 새 값으로 다시 그린다
rev = st.session_state.get("draft_rev", 0)

def _bump():
    st.session_state["draft_rev"] = rev + 1

editor_col, preview_col = st.columns(2, gap="large")

with editor_col:
    st.caption("CAMPAIGN BUILDER")
    st.title("Creative Workspace")

    tab_content, tab_design, tab_presets = st.tabs(["✏️ Content", "🎨 Design", "🗂️ Presets"])

    with tab_content:
        draft.title = st.text_input("Project Title", value=draft.title, placeholder="My Amazing Ad", key=f"title_{rev}")
        draft.headline = st.text_input("Headline", value=draft.headline, placeholder="Your Catchy Headline", key=f"headline_{rev}")
        draft.body_text = st.text_area("Body Text", value=draft.body_text, placeholder="Your compelling message...", height=110, key=f"body_{rev}")
        draft.cta = st.text_input("Call to Action", value=draft.cta, placeholder="Learn More", key=f"cta_{rev}")

    with tab_design:
        draft.bg_color = st.color_picker("Background Color", value=safe_color(draft.bg_color), key=f"bg_{rev}")
        draft.image_url = st.text_input("Image URL", value=draft.image_url, placeholder="https://...", key=f"img_{rev}")

    with tab_presets:
        st.markdown("**Favorite presets**")
        for preset in PRESETS:
            if st.button(f"{preset['name']}: {preset['headline']}", key=f"preset_{preset['name']}", use_container_width=True):
                draft.apply_preset(preset)
                _bump()
                st.toast("Preset applied")
                st.rerun()
        st.markdown("**Creative checklist**")
        st.markdown(
            "- Define audience pain points and desired outcome.\n"
            "- Confirm tone, voice, and mandatory brand language.\n"
            "- List the essential visuals or product highlights.\n"
            "- Decide supporting channels for repurposed assets."
        )

    # ---- AI 문구 생성
    with st.form("generate_form"):
        st.subheader("Generate with AI")
        prompt = st.text_area("What are you promoting?", placeholder="EX) Summer sale on running shoes, 30% off")
        c1, c2 = st.columns(2)
        with c1:
            ad_type = st.selectbox("Ad type", AD_TYPES, index=0)
        with c2:
            tone = st.selectbox("Tone", TONES, index=0)
        generate_clicked = st.form_submit_button("✨ Generate copy", use_container_width=True)

    if generate_clicked:
        with st.spinner("Writing your ad copy..."):
            try:
                fields = draft.generate(prompt, ad_type, tone)
            except NotAuthenticated:
                end_session()
                st.switch_page("Home.py")
            except ApiError as e:
                st.error(f"Failed to generate copy: {e.detail or e}")
            else:
                _bump()
                st.toast("Copy generated!" if fields else "No copy fields found in the response")
                st.rerun()

    if st.button("💾 Save progress", type="primary", use_container_width=True):
        with st.spinner("Saving..."):
            try:
                draft.save()
                st.toast("Project saved!")
            except NotAuthenticated:
                end_session()
                st.switch_page("Home.py")
            except ApiError as e:
                # 드래프트는 유지 → 다시 저장 가능
                st.error(f"Failed to save project: {e.detail or e}")

    if st.button("← Back to projects", use_container_width=True):
        st.session_state.pop("draft_editor", None)
        st.switch_page(DASHBOARD_PAGE)

with preview_col:
    st.caption("LIVE PREVIEW")
    st.subheader("Campaign mockup")
    st.markdown(render_preview_html(draft), unsafe_allow_html=True)
