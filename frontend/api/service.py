import asyncio
import logging
from typing import Any

import async_timeout

from frontend.api.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    POST_COMMENTS_PATH,
    POST_PATH,
    POST_VIEW_PATH,
    POSTS_PATH,
    RELATED_POSTS_LIMIT,
    SEARCH_LIMIT,
    SUBSCRIBE_PATH,
)
from frontend.api.exceptions import (
    NetworkFailure,
    NewsHubError,
    NotFound,
    ServerError,
)
from frontend.api.schemas import Comment, CommentDraft, Post, SearchResult

logger = logging.getLogger("frontend")


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """camelCase / snake_case 등 여러 후보 키 중 처음 존재하는 값을 반환"""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _to_post(data: dict[str, Any]) -> Post:
    author = data.get("author") or ""
    if isinstance(author, dict):
        author = author.get("name", "")
    return Post(
        id=str(_pick(data, "id", "_id", default="")),
        title=data.get("title", ""),
        content=data.get("content", ""),
        category=data.get("category", ""),
        image=_pick(data, "image", "imageUrl"),
        author=author,
        created_at=_pick(data, "createdAt", "created_at"),
        views=int(_pick(data, "views", "viewCount", default=0)),
        comment_count=int(
            _pick(data, "commentCount", "comment_count", default=0)
        ),
    )


def _to_search_result(data: dict[str, Any]) -> SearchResult:
    return SearchResult(
        id=str(_pick(data, "id", "_id", default="")),
        title=data.get("title", ""),
        category=data.get("category", ""),
        image=_pick(data, "image", "imageUrl"),
        created_at=_pick(data, "createdAt", "created_at"),
    )


def _to_comment(data: dict[str, Any], post_id: str = "") -> Comment:
    return Comment(
        id=str(_pick(data, "id", "_id", default="")),
        post_id=str(_pick(data, "postId", "post_id", default=post_id)),
        name=data.get("name", ""),
        email=data.get("email", ""),
        comment=_pick(data, "comment", "content", default=""),
        created_at=_pick(data, "createdAt", "created_at"),
    )


class NewsHubService:
    """
    NewsHub 백엔드 API 호출 서비스
    NewsHubClient 를 통해 사용되며 모든 HTTP 요청은 이 클래스를 거친다.
    """

    def __init__(
        self,
        session: Any,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
        }

    @staticmethod
    async def _error_message(response: Any) -> tuple[str, dict[str, Any] | None]:
        """
        실패 응답에서 사용자에게 보여줄 메시지를 추출합니다.

        Args:
            response: HTTP 응답 객체

        Returns:
            tuple[str, dict | None]: (메시지, JSON 본문) 본문이 JSON 이 아니면 ("", None)
        """
        try:
            body = await response.json()
        except Exception:
            body = None

        if isinstance(body, dict):
            message = body.get("error") or body.get("message") or ""
            return str(message), body

        # HTML 에러 페이지 등은 사용자에게 보여주지 않고 로그로만 남긴다
        try:
            text = await response.text()
        except Exception:
            text = ""
        logger.warning(f"Non-JSON error response: {text[:200]}")
        return "", None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        read_body: bool = True,
    ) -> dict[str, Any]:
        """
        API 요청을 실행합니다.

        Args:
            method: "GET" 또는 "POST"
            path: API 경로 (base_url 뒤에 붙는다)
            params: 쿼리 스트링 파라미터
            payload: 요청 본문 (JSON)
            read_body: False 면 성공 응답의 본문을 읽지 않는다

        Returns:
            dict[str, Any]: 응답 JSON 본문 (객체가 아니면 빈 딕셔너리)

        Raises:
            NotFound: 404 응답
            ServerError: 그 외 2xx 가 아닌 응답
            NetworkFailure: 연결 실패, 타임아웃, 응답 파싱 실패
        """
        url = f"{self.base_url}{path}"
        headers = self._get_headers()
        try:
            async with async_timeout.timeout(self.timeout):
                if method == "GET":
                    response = await self.session.get(
                        url, params=params, headers=headers
                    )
                else:
                    response = await self.session.post(
                        url, json=payload, headers=headers
                    )
                res_http_status = (
                    response.status
                    if hasattr(response, "status")
                    else response.status_code
                )

                if res_http_status == 404:
                    message, _ = await self._error_message(response)
                    raise NotFound(message)
                if not 200 <= res_http_status < 300:
                    message, body = await self._error_message(response)
                    raise ServerError(res_http_status, message, body)

                if not read_body:
                    # 본문을 비워 연결을 풀에 반환
                    await response.read()
                    return {}
                result = await response.json()
                return result if isinstance(result, dict) else {}
        except NewsHubError:
            # 이미 정의된 예외는 그대로 전파
            raise
        except asyncio.TimeoutError as e:
            raise NetworkFailure(
                f"API 요청 타임아웃 ({self.timeout}s): {method} {path}"
            ) from e
        except Exception as e:
            # 기타 예외는 NetworkFailure 로 래핑하여 전파
            raise NetworkFailure(f"API 요청 중 예외 발생: {str(e)}") from e

    async def get_post(self, post_id: str) -> Post:
        """
        게시물 단건을 조회합니다.

        Raises:
            NotFound: 게시물이 없는 경우
        """
        response = await self._request(
            "GET", POST_PATH.format(post_id=post_id)
        )
        if not response:
            raise NotFound(f"post {post_id} not found")
        return _to_post(response)

    async def track_view(self, post_id: str) -> None:
        """게시물 조회수를 1 증가시킵니다. 응답 본문은 무시합니다."""
        await self._request(
            "POST", POST_VIEW_PATH.format(post_id=post_id), read_body=False
        )

    async def get_related_posts(
        self,
        category: str,
        exclude_id: str,
        limit: int = RELATED_POSTS_LIMIT,
    ) -> list[SearchResult]:
        """
        같은 카테고리의 다른 게시물을 조회합니다.

        Args:
            category: 카테고리 이름
            exclude_id: 결과에서 제외할 게시물 ID (현재 게시물)
            limit: 최대 개수 (기본값: 3)
        """
        params = {"category": category, "limit": limit, "exclude": exclude_id}
        response = await self._request("GET", POSTS_PATH, params=params)
        posts = response.get("posts") or []
        return [_to_search_result(post) for post in posts[:limit]]

    async def get_comments(self, post_id: str) -> list[Comment]:
        """게시물의 전체 댓글을 백엔드가 돌려준 순서 그대로 조회합니다."""
        response = await self._request(
            "GET", POST_COMMENTS_PATH.format(post_id=post_id)
        )
        comments = response.get("comments") or []
        return [_to_comment(comment, post_id) for comment in comments]

    async def create_comment(
        self, post_id: str, draft: CommentDraft
    ) -> Comment:
        """
        댓글을 생성합니다.

        Raises:
            ServerError: 서버가 거절한 경우 (message 에 서버의 error 문구)
        """
        response = await self._request(
            "POST",
            POST_COMMENTS_PATH.format(post_id=post_id),
            payload=draft.to_payload(),
        )
        return _to_comment(response, post_id)

    async def search_posts(
        self, query: str, limit: int = SEARCH_LIMIT
    ) -> list[SearchResult]:
        """
        제목/본문 검색 결과를 조회합니다. 결과 순서는 백엔드 순서를 유지합니다.

        Args:
            query: 검색어
            limit: 최대 개수 (기본값: 5)
        """
        params = {"search": query, "limit": limit}
        response = await self._request("GET", POSTS_PATH, params=params)
        posts = response.get("posts") or []
        return [_to_search_result(post) for post in posts[:limit]]

    async def subscribe(self, email: str) -> str | None:
        """
        뉴스레터를 구독합니다.

        Returns:
            str | None: 서버가 돌려준 message (없으면 None)
        """
        response = await self._request(
            "POST", SUBSCRIBE_PATH, payload={"email": email}
        )
        message = response.get("message")
        logger.info("Subscribed to newsletter")
        return message
