# 템플릿 카드 3종으로 새 프로젝트를 만들고, 최근 수정순으로 내 프로젝트를 보여준다.
import streamlit as st

from frontend.api_client import ApiError, NotAuthenticated
from frontend.session import require_session, end_session

EDITOR_PAGE = "pages/2_Editor.py"

TEMPLATES = [
    ("social", "🖼️ Social Media Ad", "Perfect for Instagram, Facebook & Twitter"),
    ("banner", "📄 Display Banner", "Web banners for Google Ads & more"),
    ("story",  "📱 Story Ad", "Instagram & Snapchat stories"),
]

st.set_page_config(page_title="Your Ad Projects", page_icon="✨", layout="wide")

session = require_session()
client = session.client()

def _open_editor(project_id: str):
    st.session_state["editor_project_id"] = project_id
    st.switch_page(EDITOR_PAGE)

def _signed_out():
    end_session()
    st.switch_page("Home.py")

# ---- 상단 바
left, right = st.columns([0.75, 0.25])
with left:
    st.title("Your Ad Projects")
    st.caption("Create and manage your advertising campaigns")
with right:
    st.write(f"{session.user_name or session.user_email}")
    if st.button("Sign out", use_container_width=True):
        _signed_out()

# ---- 템플릿 선택
cols = st.columns(3)
for col, (template_type, label, desc) in zip(cols, TEMPLATES):
    with col:
        with st.container(border=True):
            st.subheader(label)
            st.caption(desc)
            if st.button("＋ Create", key=f"create_{template_type}", use_container_width=True):
                try:
                    project = client.create_project(template_type)
                    st.toast("Project created!")
                    _open_editor(project["id"])
                except NotAuthenticated:
                    _signed_out()
                except ApiError as e:
                    st.error(f"Failed to create project: {e.detail or e}")

st.divider()

# ---- 최근 프로젝트
with st.spinner("Loading your projects..."):
    try:
        projects = client.list_projects()
    except NotAuthenticated:
        projects = []
        _signed_out()
    except ApiError as e:
        projects = []
        st.error(f"Failed to load projects: {e.detail or e}")

if projects:
    st.subheader("Recent Projects")
    grid = st.columns(4)
    for i, project in enumerate(projects):
        with grid[i % 4]:
            with st.container(border=True):
                if project.get("thumbnail_url"):
                    st.image(project["thumbnail_url"], use_container_width=True)
                st.markdown(f"**{project['title']}**")
                st.caption(project["template_type"].capitalize())
                if st.button("Open", key=f"open_{project['id']}", use_container_width=True):
                    _open_editor(project["id"])
