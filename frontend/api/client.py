from typing import TYPE_CHECKING

from frontend.api.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from frontend.api.schemas import Comment, CommentDraft, Post, SearchResult
from frontend.protocols import HttpSession


class NewsHubClient:
    """
    NewsHub API 클라이언트 - Facade Pattern with Lazy Initialization Singleton
    Client는 싱글톤으로 관리되며, 각 컨트롤러(검색, 상세, 구독)의 API 진입점 역할
    """

    if TYPE_CHECKING:
        # circular import 때문에 dynamic import
        from frontend.api.service import NewsHubService

        _instance: "NewsHubClient" | None = None
        _service: "NewsHubService" | None = None
    else:
        _instance = None
        _service = None

    _session: HttpSession | None = None
    _base_url: str = DEFAULT_BASE_URL
    _timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __init__(self, session: HttpSession, base_url: str, timeout: float):
        """
        Private constructor. Use get_client() instead.

        Args:
            session: HTTP 세션 객체
            base_url: NewsHub 백엔드 URL
            timeout: API 호출별 타임아웃 (초)
        """
        self._session = session
        self._base_url = base_url
        self._timeout = timeout

        # Service 도 lazy initialization
        self._service = None

    @classmethod
    def get_client(
        cls,
        session: HttpSession,
        base_url: str = "",
        timeout: float | None = None,
    ) -> "NewsHubClient":
        """
        싱글톤 인스턴스를 반환합니다.

        Args:
            session: HTTP 세션 객체 (aiohttp.ClientSession 등)
            base_url: 백엔드 URL. 비어 있으면 기존 값 (첫 호출이면 기본값) 유지
            timeout: API 호출 타임아웃. None 이면 기존 값 유지

        Returns:
            NewsHubClient: 초기화된 클라이언트 인스턴스

        Raises:
            ValueError: 세션이 없는 경우
        """
        if not session:
            raise ValueError("session은 필수입니다.")

        if cls._instance is None:
            cls._instance = cls(
                session,
                base_url or DEFAULT_BASE_URL,
                DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout,
            )
        else:
            cls._instance._session = session
            if base_url:
                cls._instance._base_url = base_url
            if timeout is not None:
                cls._instance._timeout = timeout
            if cls._instance._service:
                cls._instance._service.session = session
                cls._instance._service.base_url = cls._instance._base_url
                cls._instance._service.timeout = cls._instance._timeout

        return cls._instance

    @property
    def service(self) -> "NewsHubService":
        """
        NewsHubService 인스턴스를 반환합니다. (Lazy initialization)

        Returns:
            NewsHubService: 서비스 인스턴스
        """
        if self._service is None:
            if not self._session:
                raise ValueError("서비스를 사용하기 전에 세션을 설정해야 합니다.")

            from frontend.api.service import NewsHubService

            self._service = NewsHubService(
                self._session, self._base_url, self._timeout
            )
        return self._service

    async def get_post(self, post_id: str) -> Post:
        """
        게시물 상세 정보를 조회합니다.

        Raises:
            NotFound: 게시물이 없는 경우
            NewsHubError: API 요청 중 오류가 발생한 경우
        """
        return await self.service.get_post(post_id)

    async def track_view(self, post_id: str) -> None:
        """게시물 조회수를 증가시킵니다."""
        await self.service.track_view(post_id)

    async def get_related_posts(
        self, category: str, exclude_id: str, limit: int = 3
    ) -> list[SearchResult]:
        return await self.service.get_related_posts(
            category, exclude_id, limit
        )

    async def get_comments(self, post_id: str) -> list[Comment]:
        return await self.service.get_comments(post_id)

    async def create_comment(
        self, post_id: str, draft: CommentDraft
    ) -> Comment:
        """
        댓글을 작성합니다.

        Raises:
            ServerError: 서버가 댓글을 거절한 경우 (message 에 서버 문구)
            NetworkFailure: 네트워크 오류
        """
        return await self.service.create_comment(post_id, draft)

    async def search_posts(
        self, query: str, limit: int = 5
    ) -> list[SearchResult]:
        """
        게시물을 검색합니다.

        Args:
            query: 검색어
            limit: 가져올 결과 수 (기본값: 5)
        """
        return await self.service.search_posts(query, limit)

    async def subscribe(self, email: str) -> str | None:
        return await self.service.subscribe(email)

    @classmethod
    def reset_client(cls) -> None:
        """
        클라이언트 인스턴스를 재설정합니다.
        주로 테스트나 설정 변경 시 사용됩니다.
        """
        cls._instance = None
        cls._session = None
        cls._base_url = DEFAULT_BASE_URL
        cls._timeout = DEFAULT_TIMEOUT_SECONDS
        cls._service = None
