from typing import Any, Awaitable, Protocol


class HttpSession(Protocol):
    """HTTP 비동기 세션을 위한 프로토콜. (aiohttp.ClientSession 호환)"""

    def get(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Awaitable[Any]:
        """
        HTTP GET 요청을 수행합니다.

        Args:
            url: 요청 URL
            params: 쿼리 스트링 파라미터
            headers: 요청 헤더

        Returns:
            응답 객체 (status, json(), text() 제공)
        """
        ...

    def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Awaitable[Any]:
        """
        HTTP POST 요청을 수행합니다.

        Args:
            url: 요청 URL
            json: 요청 본문 (JSON)
            headers: 요청 헤더

        Returns:
            응답 객체 (status, json(), text() 제공)
        """
        ...


class Router(Protocol):
    """페이지 이동을 담당하는 라우터 프로토콜."""

    def push(self, path: str) -> None: ...


class Notifier(Protocol):
    """사용자에게 알림(alert)을 띄우는 프로토콜."""

    def alert(self, message: str) -> None: ...


class Clipboard(Protocol):
    """클립보드 쓰기 프로토콜."""

    async def write_text(self, text: str) -> None: ...
