import streamlit as st

from frontend.api_client import AdGenClient, ApiError, BACKEND_URL
from frontend.session import current_session, start_session, end_session

DASHBOARD_PAGE = "pages/1_Dashboard.py"

# 로그인 전 사이드바 접기
st.set_page_config(page_title="AdGen Studio", page_icon="✨", initial_sidebar_state="collapsed")

public = AdGenClient(base_url=BACKEND_URL)

# ---------------- 쿼리파라미터 ----------------
params = st.query_params
def _qp(k):
    v = params.get(k)
    return v[0] if isinstance(v, list) else v

# ---------------- 서버 상태 ----------------
def _get_enabled_providers():
    try:
        return public.enabled_providers()
    except ApiError:
        return {"local": True, "google": False}

ENABLED = _get_enabled_providers()

def _verify_and_fill(token: str) -> bool:
    try:
        data = AdGenClient(base_url=BACKEND_URL, token=token).me()
    except ApiError:
        return False
    start_session(
        token,
        email=data.get("email") or "",
        name=data.get("name") or "",
        provider=data.get("provider") or "local",
    )
    return True

# ------------ OAuth 콜백 처리 ------------
tok = _qp("token")
if tok:
    if not _verify_and_fill(tok):
        st.warning("Your sign-in link expired. Please sign in again.")
    st.query_params.clear()

def _logout():
    end_session()
    st.rerun()

session = current_session()
if session and not session.user_email:
    if not _verify_and_fill(session.token):
        st.warning("Your session expired. Please sign in again.")
        _logout()

# ---------------- 로그인 영역 ----------------
st.markdown("<h2 style='text-align:center;font-weight:800;'>✨ AdGen Studio</h2>", unsafe_allow_html=True)
st.markdown(
    "<p style='text-align:center;color:rgba(49,51,63,.6);'>Create social posts, banners, and stories with AI-drafted copy.</p>",
    unsafe_allow_html=True,
)

if session:
    colA, colB = st.columns([3, 1], gap="small")
    with colA:
        via = f" via {session.provider}" if session.provider else ""
        st.success(f"Signed in as {session.user_name} ({session.user_email}){via}")
    with colB:
        if st.button("Sign out", use_container_width=True):
            _logout()
    if st.button("Go to dashboard", type="primary", use_container_width=True):
        st.switch_page(DASHBOARD_PAGE)
else:
    # 사이드바 숨김
    st.markdown('<style>[data-testid="stSidebar"]{display:none !important;}</style>', unsafe_allow_html=True)

    tab_login, tab_signup = st.tabs(["Sign in", "Create account"])
    with tab_login:
        email = st.text_input("Email", key="login_email")
        pw = st.text_input("Password", key="login_pw", type="password")
        if st.button("Sign in", use_container_width=True, key="btn_login"):
            if not email or not pw:
                st.warning("Enter your email and password.")
            else:
                try:
                    js = public.login(email.strip(), pw)
                    start_session(js["token"], email=js["user"]["email"], name=js["user"].get("name") or "")
                    st.rerun()
                except ApiError as e:
                    st.error(f"Sign in failed: {e.detail or e}")

    with tab_signup:
        su_name = st.text_input("Name (optional)", key="signup_name")
        su_email = st.text_input("Email", key="signup_email")
        su_pw = st.text_input("Password", key="signup_pw", type="password")
        if st.button("Create account", use_container_width=True, key="btn_signup"):
            if not su_email or not su_pw:
                st.warning("Enter your email and password.")
            else:
                try:
                    js = public.signup(su_email.strip(), su_pw, su_name.strip())
                    start_session(js["token"], email=js["user"]["email"], name=js["user"].get("name") or "")
                    st.rerun()
                except ApiError as e:
                    st.error(f"Sign up failed: {e.detail or e}")

    if ENABLED.get("google"):
        st.divider()
        st.link_button("Continue with Google", f"{BACKEND_URL}/auth/google/login", use_container_width=True)
