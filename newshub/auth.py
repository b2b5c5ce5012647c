import logging
from typing import Any, Callable

from django.conf import settings
from django.core import signing
from django.http import HttpRequest
from django.utils.module_loading import import_string

logger = logging.getLogger("newshub")

TOKEN_SALT = "newshub.auth.token"

TokenVerifier = Callable[[HttpRequest], dict[str, Any] | None]


def issue_token(claims: dict[str, Any]) -> str:
    """세션 토큰을 서명합니다. (로그인 처리 쪽과 테스트에서 사용)"""
    return signing.dumps(claims, key=settings.AUTH_TOKEN_SECRET, salt=TOKEN_SALT)


def _read_raw_token(request: HttpRequest) -> str | None:
    authorization = request.headers.get("Authorization", "")
    if authorization.startswith("Bearer "):
        return authorization.removeprefix("Bearer ").strip() or None
    return request.COOKIES.get(settings.AUTH_TOKEN_COOKIE)


def verify_token(request: HttpRequest) -> dict[str, Any] | None:
    """
    요청의 세션 토큰(쿠키 또는 Bearer 헤더)을 검증하고 claims 를 반환합니다.

    Args:
        request: Django 요청 객체

    Returns:
        dict | None: 토큰 claims (email, role 등), 없거나 유효하지 않으면 None
    """
    raw_token = _read_raw_token(request)
    if not raw_token:
        return None
    try:
        claims = signing.loads(
            raw_token,
            key=settings.AUTH_TOKEN_SECRET,
            salt=TOKEN_SALT,
            max_age=settings.AUTH_TOKEN_MAX_AGE,
        )
    except signing.BadSignature as e:
        # SignatureExpired 도 BadSignature 의 하위 클래스
        logger.info(f"Rejected session token: {e}")
        return None
    return claims if isinstance(claims, dict) else None


def get_verifier() -> TokenVerifier:
    return import_string(settings.AUTH_TOKEN_VERIFIER)


def is_admin(claims: dict[str, Any] | None) -> bool:
    """role 이 admin 이고 이메일이 설정된 관리자 이메일과 같아야 관리자"""
    if not claims:
        return False
    return (
        claims.get("role") == "admin"
        and bool(settings.ADMIN_EMAIL)
        and claims.get("email") == settings.ADMIN_EMAIL
    )
