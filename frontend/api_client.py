# frontend/api_client.py
# 백엔드 REST 호출 래퍼. Streamlit 페이지와 EditorDraft 가 공유한다.
import os
from typing import Any, Dict, List, Optional

import requests

BACKEND_URL  = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")
TIMEOUT_GET  = 30
TIMEOUT_POST = 60


class ApiError(RuntimeError):
    """operation 이름과 HTTP status 를 담은 호출 실패."""

    def __init__(self, operation: str, status: Optional[int] = None, detail: str = ""):
        self.operation = operation
        self.status = status
        self.detail = detail
        msg = f"{operation} failed"
        if status is not None:
            msg += f" ({status})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class NotAuthenticated(ApiError):
    pass


class ProjectNotFound(ApiError):
    pass


def _detail(r) -> str:
    try:
        js = r.json()
    except ValueError:
        return r.text
    if isinstance(js, dict):
        return str(js.get("detail") or js.get("error") or js)
    return str(js)


def _raise_for(operation: str, r, not_found: bool = False):
    if 200 <= r.status_code < 300:
        return
    detail = _detail(r)
    if r.status_code == 401:
        raise NotAuthenticated(operation, r.status_code, detail)
    if not_found and r.status_code == 404:
        raise ProjectNotFound(operation, r.status_code, detail)
    raise ApiError(operation, r.status_code, detail)


class AdGenClient:
    """
    토큰 하나에 묶인 API 클라이언트.
    - http: requests.Session 호환 객체 (테스트에서는 FastAPI TestClient)
    """

    def __init__(self, base_url: str = BACKEND_URL, token: Optional[str] = None, http=None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.http = http if http is not None else requests.Session()

    def _headers(self) -> Dict[str, str]:
        h = {}
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    def _request(self, operation: str, method: str, path: str, *, json_body=None, timeout=TIMEOUT_GET):
        try:
            return self.http.request(
                method,
                f"{self.base_url}{path}",
                json=json_body,
                headers=self._headers(),
                timeout=timeout,
            )
        except requests.RequestException as e:
            raise ApiError(operation, None, str(e)) from e

    # ---------------- 인증 ----------------
    def signup(self, email: str, password: str, name: str = "") -> Dict[str, Any]:
        r = self._request("sign up", "POST", "/auth/signup",
                          json_body={"email": email, "password": password, "name": name}, timeout=TIMEOUT_POST)
        _raise_for("sign up", r)
        return r.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        r = self._request("sign in", "POST", "/auth/login",
                          json_body={"email": email, "password": password}, timeout=TIMEOUT_POST)
        _raise_for("sign in", r)
        return r.json()

    def enabled_providers(self) -> Dict[str, bool]:
        r = self._request("load providers", "GET", "/auth/enabled")
        _raise_for("load providers", r)
        return r.json()

    def me(self) -> Dict[str, Any]:
        r = self._request("verify session", "GET", "/auth/me")
        _raise_for("verify session", r)
        return r.json()

    # ---------------- 프로젝트 ----------------
    def list_projects(self) -> List[Dict[str, Any]]:
        r = self._request("list projects", "GET", "/projects")
        _raise_for("list projects", r)
        return r.json()

    def create_project(self, template_type: str) -> Dict[str, Any]:
        r = self._request("create project", "POST", "/projects",
                          json_body={"template_type": template_type}, timeout=TIMEOUT_POST)
        _raise_for("create project", r)
        return r.json()

    def get_project(self, project_id: str) -> Dict[str, Any]:
        r = self._request("load project", "GET", f"/projects/{project_id}")
        _raise_for("load project", r, not_found=True)
        return r.json()

    def save_project(self, project_id: str, title: str, content: Dict[str, Any]) -> Dict[str, Any]:
        r = self._request("save project", "PUT", f"/projects/{project_id}",
                          json_body={"title": title, "content": content}, timeout=TIMEOUT_POST)
        _raise_for("save project", r, not_found=True)
        return r.json()

    # ---------------- 문구 생성 ----------------
    def generate_ad_copy(self, prompt: str, ad_type: str, tone: str) -> str:
        r = self._request("generate ad copy", "POST", "/generate-ad-copy",
                          json_body={"prompt": prompt, "adType": ad_type, "tone": tone}, timeout=TIMEOUT_POST)
        _raise_for("generate ad copy", r)
        return r.json().get("content") or ""
