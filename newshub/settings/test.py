from .local import *  # noqa: F401, F403

# 테스트에서는 외부 .env 값과 무관하게 고정 값을 사용
ADMIN_EMAIL = "admin@newshub.test"
AUTH_TOKEN_SECRET = "test-auth-token-secret"
AUTH_TOKEN_COOKIE = "newshub-session-token"
AUTH_TOKEN_VERIFIER = "newshub.auth.verify_token"
