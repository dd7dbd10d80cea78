# frontend/session.py
# 로그인 정보를 st.session_state 전역 대신 AppSession 값으로 넘긴다.
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from frontend.api_client import AdGenClient, BACKEND_URL

SESSION_KEYS = ["token", "user_name", "user_email", "provider"]
SIGN_IN_PAGE = "Home.py"


@dataclass(frozen=True)
class AppSession:
    token: str
    user_email: str = ""
    user_name: str = ""
    provider: str = "local"

    def client(self, base_url: str = BACKEND_URL) -> AdGenClient:
        return AdGenClient(base_url=base_url, token=self.token)


def current_session() -> Optional[AppSession]:
    token = st.session_state.get("token")
    if not token:
        return None
    return AppSession(
        token=token,
        user_email=st.session_state.get("user_email") or "",
        user_name=st.session_state.get("user_name") or "",
        provider=st.session_state.get("provider") or "local",
    )


def start_session(token: str, email: str = "", name: str = "", provider: str = "local"):
    st.session_state.token = token
    st.session_state.user_email = email
    st.session_state.user_name = name
    st.session_state.provider = provider


def end_session():
    for k in SESSION_KEYS:
        st.session_state.pop(k, None)
    for k in list(st.session_state.keys()):
        if str(k).startswith("draft_"):
            st.session_state.pop(k, None)


def require_session() -> AppSession:
    """로그인이 없으면 에러 없이 로그인 화면으로 보낸다."""
    session = current_session()
    if session is None:
        st.switch_page(SIGN_IN_PAGE)
        st.stop()
    return session
