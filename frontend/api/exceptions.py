from typing import Any


class NewsHubError(Exception):
    """NewsHub API 관련 기본 예외 클래스"""

    pass


class NetworkFailure(NewsHubError):
    """요청 자체가 실패한 경우 (연결 오류, 타임아웃, 응답 파싱 실패)"""

    pass


class ServerError(NewsHubError):
    """API 가 성공이 아닌 상태 코드를 돌려준 경우"""

    def __init__(
        self, status: int, message: str, body: dict[str, Any] | None = None
    ):
        self.status = status
        self.message = message
        self.body = body
        super().__init__(f"API 오류 (상태 코드: {status}): {message}")


class NotFound(ServerError):
    """게시물 등 조회 대상이 없는 경우 (404)"""

    def __init__(self, message: str = ""):
        super().__init__(404, message)


class ValidationFailure(NewsHubError):
    """요청 전 클라이언트 측 입력 검증 실패"""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)
