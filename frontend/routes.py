from typing import Final
from urllib.parse import quote

HOME_PATH: Final[str] = "/"
LOGIN_PATH: Final[str] = "/auth/login"
ADMIN_DASHBOARD_PATH: Final[str] = "/admin/dashboard"
USER_DASHBOARD_PATH: Final[str] = "/user/dashboard"


def post_path(post_id: str) -> str:
    return f"/post/{quote(str(post_id), safe='')}"


def search_path(query: str) -> str:
    """전체 검색 결과 페이지 경로 (encodeURIComponent 와 같은 규칙으로 인코딩)"""
    return f"/search?q={quote(query, safe='')}"


def category_path(name: str) -> str:
    return f"/category/{name}"


def lifestyle_path(subcategory: str) -> str:
    return f"/category/lifestyle/{subcategory}"
