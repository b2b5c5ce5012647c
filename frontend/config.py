from dataclasses import dataclass

import environ

from frontend.api.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    RELATED_POSTS_LIMIT,
    SEARCH_DEBOUNCE_SECONDS,
    SEARCH_LIMIT,
)


@dataclass
class FrontendConfig:
    """컨트롤러 설정값. django 없이도 환경 변수에서 읽을 수 있다."""

    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    search_debounce: float = SEARCH_DEBOUNCE_SECONDS
    search_limit: int = SEARCH_LIMIT
    related_limit: int = RELATED_POSTS_LIMIT

    @classmethod
    def from_env(cls, env: environ.Env | None = None) -> "FrontendConfig":
        """
        환경 변수에서 설정을 읽습니다.

        Args:
            env: environ.Env 인스턴스 (None 이면 새로 생성)

        Returns:
            FrontendConfig: 설정 객체
        """
        env = env or environ.Env()
        return cls(
            api_base_url=env.str("NEWSHUB_API_BASE_URL", default=DEFAULT_BASE_URL),
            request_timeout=env.float(
                "NEWSHUB_REQUEST_TIMEOUT", default=DEFAULT_TIMEOUT_SECONDS
            ),
            # 밀리초 단위로 받는다
            search_debounce=env.int(
                "NEWSHUB_SEARCH_DEBOUNCE_MS",
                default=int(SEARCH_DEBOUNCE_SECONDS * 1000),
            )
            / 1000,
            search_limit=env.int("NEWSHUB_SEARCH_LIMIT", default=SEARCH_LIMIT),
            related_limit=env.int(
                "NEWSHUB_RELATED_LIMIT", default=RELATED_POSTS_LIMIT
            ),
        )
