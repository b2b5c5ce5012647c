import logging
from typing import Callable

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect

from frontend.routes import (
    ADMIN_DASHBOARD_PATH,
    HOME_PATH,
    LOGIN_PATH,
    USER_DASHBOARD_PATH,
)
from newshub.auth import get_verifier, is_admin

logger = logging.getLogger("newshub")

GATED_PREFIXES = ("/admin", "/user", "/auth")


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


class AuthGateMiddleware:
    """
    /admin, /user, /auth 경로에 대한 인증 게이트

    - /admin/*: 비로그인 -> 로그인 페이지, 관리자가 아니면 -> 홈
    - /user/*: 비로그인 -> 로그인 페이지
    - /auth/*: 로그인 상태면 역할에 맞는 대시보드로
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response
        self.verifier = get_verifier()

    def __call__(self, request: HttpRequest) -> HttpResponse:
        path = request.path
        if not any(_matches(path, prefix) for prefix in GATED_PREFIXES):
            return self.get_response(request)

        claims = self.verifier(request)
        authenticated = claims is not None
        admin = is_admin(claims)

        if _matches(path, "/admin"):
            if not authenticated:
                return HttpResponseRedirect(LOGIN_PATH)
            if not admin:
                logger.warning(
                    f"Non-admin access to {path} (email: {claims.get('email')})"
                )
                return HttpResponseRedirect(HOME_PATH)

        if _matches(path, "/user") and not authenticated:
            return HttpResponseRedirect(LOGIN_PATH)

        if _matches(path, "/auth") and authenticated:
            return HttpResponseRedirect(
                ADMIN_DASHBOARD_PATH if admin else USER_DASHBOARD_PATH
            )

        return self.get_response(request)
